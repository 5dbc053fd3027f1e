from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.common.serializers import ErrorResponseSerializer
from .serializers import (
    EquipmentPreferencesSerializer,
    PreferencesUpdateSerializer,
    EquipmentNameSerializer,
)
from .services import (
    get_preferences,
    update_preferences,
    toggle_equipment,
    add_custom_equipment,
    remove_custom_equipment,
    UnknownEquipmentError,
    LastEnabledItemError,
)


@extend_schema(
    methods=['GET'],
    responses={200: EquipmentPreferencesSerializer},
    description="Get equipment preferences.",
    tags=['preferences'],
)
@extend_schema(
    methods=['PATCH'],
    request=PreferencesUpdateSerializer,
    responses={200: EquipmentPreferencesSerializer, 400: ErrorResponseSerializer},
    description="Change enabled equipment and the default water temperature.",
    tags=['preferences'],
)
@api_view(['GET', 'PATCH'])
def preferences_detail(request):
    """Read or update equipment preferences."""
    if request.method == 'GET':
        return Response(EquipmentPreferencesSerializer(get_preferences()).data)

    serializer = PreferencesUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        prefs = update_preferences(changes=serializer.validated_data)
    except UnknownEquipmentError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(EquipmentPreferencesSerializer(prefs).data)


@extend_schema(
    request=EquipmentNameSerializer,
    responses={200: EquipmentPreferencesSerializer, 400: ErrorResponseSerializer},
    description="Enable or disable a brewing method or grinder. The last enabled item cannot be disabled.",
    tags=['preferences'],
)
@api_view(['POST'])
def toggle(request, kind):
    """Toggle one item of equipment."""
    serializer = EquipmentNameSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        prefs = toggle_equipment(kind=kind, name=serializer.validated_data['name'])
    except (UnknownEquipmentError, LastEnabledItemError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(EquipmentPreferencesSerializer(prefs).data)


@extend_schema(
    request=EquipmentNameSerializer,
    responses={200: EquipmentPreferencesSerializer, 400: ErrorResponseSerializer},
    description="Add a custom brewing method or grinder. Blank and duplicate names are ignored.",
    tags=['preferences'],
)
@api_view(['POST'])
def add_custom(request, kind):
    """Add custom equipment."""
    serializer = EquipmentNameSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        prefs = add_custom_equipment(kind=kind, name=serializer.validated_data['name'])
    except UnknownEquipmentError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(EquipmentPreferencesSerializer(prefs).data)


@extend_schema(
    request=EquipmentNameSerializer,
    responses={200: EquipmentPreferencesSerializer, 404: ErrorResponseSerializer},
    description="Remove a custom brewing method or grinder.",
    tags=['preferences'],
)
@api_view(['POST'])
def remove_custom(request, kind):
    """Remove custom equipment."""
    serializer = EquipmentNameSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        prefs = remove_custom_equipment(kind=kind, name=serializer.validated_data['name'])
    except UnknownEquipmentError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(EquipmentPreferencesSerializer(prefs).data)
