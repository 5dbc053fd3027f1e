import uuid

from rest_framework import viewsets, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.common.pagination import JournalPagination
from apps.common.serializers import ErrorResponseSerializer
from .models import BrewingNote
from .serializers import (
    BrewingNoteSerializer,
    BrewingNoteCreateSerializer,
    BrewingNoteListSerializer,
)
from .services import (
    create_brewing_note,
    update_brewing_note,
    delete_brewing_note,
    search_brewing_notes,
    BrewingNoteNotFoundError,
    InvalidRatingError,
    CoffeeNotFoundError,
    RecipeNotFoundError,
)


def _id_param(params, name):
    """Parse an optional UUID query parameter; 400 when malformed."""
    value = params.get(name)
    if not value:
        return None
    try:
        return uuid.UUID(value)
    except ValueError:
        raise ValidationError({name: f"'{value}' is not a valid id"})


class BrewingNoteViewSet(viewsets.ModelViewSet):
    """
    ViewSet for BrewingNote CRUD operations.

    list: Get brewing notes, newest first (with filters)
    create: Log a brewing session (counts a use of its recipe)
    retrieve: Get a specific note
    update: Update a note
    partial_update: Partially update a note
    destroy: Delete a note
    """

    queryset = BrewingNote.objects.all()
    serializer_class = BrewingNoteSerializer
    pagination_class = JournalPagination

    def get_queryset(self):
        """
        Filter notes based on query parameters.

        Filters:
        - search: Search in coffee, roaster, recipe, method and notes
        - coffee: Coffee UUID
        - recipe: Recipe UUID
        - min_rating: Minimum star rating
        """
        params = self.request.query_params
        min_rating = params.get('min_rating', '')
        return search_brewing_notes(
            search=params.get('search'),
            coffee_id=_id_param(params, 'coffee'),
            recipe_id=_id_param(params, 'recipe'),
            min_rating=int(min_rating) if min_rating.isdigit() else None,
        )

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return BrewingNoteListSerializer
        elif self.action == 'create':
            return BrewingNoteCreateSerializer
        return BrewingNoteSerializer

    @extend_schema(
        request=BrewingNoteCreateSerializer,
        responses={201: BrewingNoteSerializer, 400: ErrorResponseSerializer},
    )
    def create(self, request, *args, **kwargs):
        """Log a brewing session."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            note = create_brewing_note(**serializer.validated_data)
        except (InvalidRatingError, CoffeeNotFoundError, RecipeNotFoundError) as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        output_serializer = BrewingNoteSerializer(note)
        return Response(
            output_serializer.data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        request=BrewingNoteCreateSerializer,
        responses={200: BrewingNoteSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    )
    def update(self, request, *args, **kwargs):
        """Update a note through the service layer."""
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = BrewingNoteCreateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            note = update_brewing_note(note_id=instance.id, data=serializer.validated_data)
        except BrewingNoteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (InvalidRatingError, CoffeeNotFoundError, RecipeNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(BrewingNoteSerializer(note).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a note."""
        note_id = kwargs.get('pk')

        try:
            delete_brewing_note(note_id=note_id)
        except BrewingNoteNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(status=status.HTTP_204_NO_CONTENT)
