from rest_framework import serializers

from apps.common.display import UNKNOWN_GRINDER, UNKNOWN_METHOD
from apps.common.serializers import DisplayDefaultsMixin
from .brewing import POUR_FIELDS, classify_brewing_method, first_invalid_pour
from .models import Recipe

RECIPE_INPUT_FIELDS = [
    'name',
    'brewing_method',
    'grinder',
    'grind_size',
    'water_temp',
    'dose',
    'brew_time',
    *POUR_FIELDS,
    'bloom_time',
    'water_out',
    'aeropress_type',
    'plunge_time',
]


class RecipeSerializer(DisplayDefaultsMixin, serializers.ModelSerializer):
    """Main serializer for recipes, with derived brewing values."""

    display_name = serializers.CharField(read_only=True)
    category = serializers.SerializerMethodField()
    supports_pours = serializers.BooleanField(read_only=True)
    supports_bloom = serializers.BooleanField(read_only=True)
    pour_count = serializers.IntegerField(read_only=True)
    has_valid_pour_sequence = serializers.BooleanField(read_only=True)
    final_weight = serializers.FloatField(read_only=True)
    final_weight_display = serializers.CharField(read_only=True)
    formatted_brewing_method = serializers.CharField(read_only=True)

    class Meta:
        model = Recipe
        fields = [
            'id',
            *RECIPE_INPUT_FIELDS,
            'usage_count',
            'display_name',
            'category',
            'supports_pours',
            'supports_bloom',
            'pour_count',
            'has_valid_pour_sequence',
            'final_weight',
            'final_weight_display',
            'formatted_brewing_method',
            'date_created',
            'updated_at',
        ]
        read_only_fields = ['id', 'usage_count', 'date_created', 'updated_at']
        display_defaults = {
            'brewing_method': UNKNOWN_METHOD,
            'grinder': UNKNOWN_GRINDER,
        }

    def get_category(self, obj) -> str:
        return obj.category.value


class RecipeCreateSerializer(serializers.ModelSerializer):
    """
    Serializer for creating and updating recipes.

    Pours must strictly increase for methods that use a pour schedule.
    """

    brewing_method = serializers.CharField(max_length=100, required=False, allow_blank=True)
    grinder = serializers.CharField(max_length=100, required=False, allow_blank=True)
    water_temp = serializers.IntegerField(required=False, min_value=0, max_value=100)

    class Meta:
        model = Recipe
        fields = RECIPE_INPUT_FIELDS

    def _require_on_update(self, value, label):
        if self.instance is not None and not value.strip():
            raise serializers.ValidationError(f"{label} cannot be blank.")
        return value

    def validate_brewing_method(self, value):
        return self._require_on_update(value, 'Brewing method')

    def validate_grinder(self, value):
        return self._require_on_update(value, 'Grinder')

    def validate(self, attrs):
        method = attrs.get('brewing_method', getattr(self.instance, 'brewing_method', None))
        if not classify_brewing_method(method).supports_pours:
            return attrs

        pours = [
            attrs[field] if field in attrs else getattr(self.instance, field, None)
            for field in POUR_FIELDS
        ]
        position = first_invalid_pour(pours[0], pours[1:])
        if position is not None:
            raise serializers.ValidationError({
                POUR_FIELDS[position]: 'Must be more than the previous pour.'
            })
        return attrs


class RecipeListSerializer(DisplayDefaultsMixin, serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    display_name = serializers.CharField(read_only=True)
    formatted_brewing_method = serializers.CharField(read_only=True)
    final_weight_display = serializers.CharField(read_only=True)

    class Meta:
        model = Recipe
        fields = [
            'id',
            'name',
            'display_name',
            'brewing_method',
            'grinder',
            'grind_size',
            'dose',
            'formatted_brewing_method',
            'final_weight_display',
            'usage_count',
        ]
        read_only_fields = fields
        display_defaults = {
            'brewing_method': UNKNOWN_METHOD,
            'grinder': UNKNOWN_GRINDER,
        }
