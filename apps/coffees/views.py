from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.common.pagination import JournalPagination
from apps.common.serializers import ErrorResponseSerializer
from .models import Coffee, RoastLevel, PROCESSING_OPTIONS
from .serializers import (
    CoffeeSerializer,
    CoffeeCreateSerializer,
    CoffeeListSerializer,
    CoffeeRatingSummarySerializer,
    ProcessingMethodSerializer,
)
from .services import (
    create_coffee,
    update_coffee,
    delete_coffee,
    search_coffees,
    get_all_roasters,
    get_coffee_rating_summary,
    get_processing_methods_sorted,
    CoffeeNotFoundError,
    InvalidCoffeeError,
)


class CoffeeViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Coffee CRUD operations.

    list: Get all coffees (with filters)
    create: Add a coffee
    retrieve: Get a specific coffee
    update: Update a coffee
    partial_update: Partially update a coffee
    destroy: Delete a coffee (its notes are kept)
    """

    queryset = Coffee.objects.all()
    serializer_class = CoffeeSerializer
    pagination_class = JournalPagination

    def get_queryset(self):
        """
        Filter coffees based on query parameters.

        Filters:
        - search: Search in name, roaster, origin
        - roaster: Filter by roaster
        - origin: Filter by origin
        - processing: Filter by processing method
        - roast_level: Filter by roast level
        - ordering: name, recent or roaster
        """
        params = self.request.query_params
        return search_coffees(
            search=params.get('search'),
            roaster=params.get('roaster'),
            origin=params.get('origin'),
            processing=params.get('processing'),
            roast_level=params.get('roast_level'),
            ordering=params.get('ordering'),
        )

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return CoffeeListSerializer
        elif self.action == 'create':
            return CoffeeCreateSerializer
        return CoffeeSerializer

    def create(self, request, *args, **kwargs):
        """Add a coffee."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            coffee = create_coffee(**serializer.validated_data)
        except InvalidCoffeeError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        output_serializer = CoffeeSerializer(coffee)
        return Response(
            output_serializer.data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update a coffee through the service layer."""
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = CoffeeCreateSerializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            coffee = update_coffee(coffee_id=instance.id, data=serializer.validated_data)
        except CoffeeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidCoffeeError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(CoffeeSerializer(coffee).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a coffee."""
        coffee_id = kwargs.get('pk')

        try:
            delete_coffee(coffee_id=coffee_id)
        except CoffeeNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: CoffeeRatingSummarySerializer, 404: ErrorResponseSerializer})
    @action(detail=True, methods=['get'])
    def summary(self, request, pk=None):
        """Rating summary across all brewing notes for this coffee."""
        try:
            summary = get_coffee_rating_summary(coffee_id=pk)
        except CoffeeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(summary)

    @action(detail=False, methods=['get'])
    def roasters(self, request):
        """Get list of all roasters."""
        return Response(get_all_roasters())

    @action(detail=False, methods=['get'], url_path='options', url_name='options')
    def form_options(self, request):
        """Choices offered by the coffee form."""
        return Response({
            'roast_levels': [value for value, _ in RoastLevel.choices],
            'processing': PROCESSING_OPTIONS,
        })

    @extend_schema(
        responses=ProcessingMethodSerializer(many=True),
        parameters=[OpenApiParameter('limit', int, description='Return only the top N methods')],
    )
    @action(detail=False, methods=['get'], url_path='processing-methods')
    def processing_methods(self, request):
        """Processing methods, most used first."""
        methods = get_processing_methods_sorted()
        limit = request.query_params.get('limit')
        if limit and limit.isdigit():
            methods = methods[:int(limit)]
        return Response(ProcessingMethodSerializer(methods, many=True).data)
