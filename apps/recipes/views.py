from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.common.pagination import JournalPagination
from apps.common.serializers import ErrorResponseSerializer
from apps.preferences.services import get_preferences
from .brewing import POUR_FIELDS, BrewingCategory
from .models import Recipe, AeropressType
from .serializers import (
    RecipeSerializer,
    RecipeCreateSerializer,
    RecipeListSerializer,
)
from .services import (
    create_recipe,
    update_recipe,
    delete_recipe,
    search_recipes,
    get_most_used_recipes,
    record_recipe_use,
    RecipeNotFoundError,
    InvalidPourSequenceError,
    TooManyPoursError,
)


class RecipeViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Recipe CRUD operations.

    list: Get all recipes, most used first (with filters)
    create: Add a recipe
    retrieve: Get a specific recipe with derived brewing values
    update: Update a recipe
    partial_update: Partially update a recipe
    destroy: Delete a recipe (its notes are kept)
    """

    queryset = Recipe.objects.all()
    serializer_class = RecipeSerializer
    pagination_class = JournalPagination

    def get_queryset(self):
        """
        Filter recipes based on query parameters.

        Filters:
        - search: Search in name and brewing method
        - brewing_method: Exact brewing method
        - category: pour_over, espresso, french_press, aeropress or unknown
        - grinder: Filter by grinder
        """
        params = self.request.query_params
        try:
            return search_recipes(
                search=params.get('search'),
                brewing_method=params.get('brewing_method'),
                category=params.get('category'),
                grinder=params.get('grinder'),
            )
        except ValueError:
            raise ValidationError({'category': f"Unknown category '{params.get('category')}'"})

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'list':
            return RecipeListSerializer
        elif self.action == 'create':
            return RecipeCreateSerializer
        return RecipeSerializer

    def create(self, request, *args, **kwargs):
        """Add a recipe; unset equipment comes from preferences."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        pours = [data.pop(field, None) for field in POUR_FIELDS]

        try:
            recipe = create_recipe(**data, pours=pours, preferences=get_preferences())
        except (InvalidPourSequenceError, TooManyPoursError) as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_400_BAD_REQUEST
            )

        output_serializer = RecipeSerializer(recipe)
        return Response(
            output_serializer.data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update a recipe through the service layer."""
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = RecipeCreateSerializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            recipe = update_recipe(recipe_id=instance.id, data=serializer.validated_data)
        except RecipeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidPourSequenceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(RecipeSerializer(recipe).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a recipe."""
        recipe_id = kwargs.get('pk')

        try:
            delete_recipe(recipe_id=recipe_id)
        except RecipeNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: RecipeSerializer, 404: ErrorResponseSerializer})
    @action(detail=True, methods=['post'])
    def use(self, request, pk=None):
        """Count one more brew with this recipe."""
        try:
            recipe = record_recipe_use(recipe_id=pk)
        except RecipeNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(RecipeSerializer(recipe).data)

    @extend_schema(
        responses=RecipeListSerializer(many=True),
        parameters=[OpenApiParameter('limit', int, description='Number of recipes (default 5)')],
    )
    @action(detail=False, methods=['get'], url_path='most-used')
    def most_used(self, request):
        """Recipes brewed most often."""
        limit = request.query_params.get('limit', '5')
        limit = int(limit) if limit.isdigit() else 5
        recipes = get_most_used_recipes(limit=limit)
        return Response(RecipeListSerializer(recipes, many=True).data)

    @action(detail=False, methods=['get'], url_path='options', url_name='options')
    def form_options(self, request):
        """Choices offered by the recipe form, from equipment preferences."""
        prefs = get_preferences()
        return Response({
            'brewing_methods': prefs.enabled_brewing_methods,
            'grinders': prefs.enabled_grinders,
            'aeropress_types': [value for value, _ in AeropressType.choices],
            'categories': [category.value for category in BrewingCategory],
            'default_water_temp': prefs.default_water_temp,
        })
