from rest_framework import serializers

from .models import BrewingNote, MAX_RATING


class BrewingNoteSerializer(serializers.ModelSerializer):
    """Main serializer for brewing notes."""

    coffee_name = serializers.CharField(read_only=True)
    roaster = serializers.CharField(read_only=True)
    recipe_name = serializers.CharField(read_only=True)
    brewing_method = serializers.CharField(read_only=True)
    rating_stars = serializers.CharField(read_only=True)
    has_rating = serializers.BooleanField(read_only=True)
    has_notes = serializers.BooleanField(read_only=True)
    short_notes = serializers.CharField(read_only=True)

    class Meta:
        model = BrewingNote
        fields = [
            'id',
            'coffee',
            'recipe',
            'coffee_name',
            'roaster',
            'recipe_name',
            'brewing_method',
            'notes',
            'short_notes',
            'has_notes',
            'rating',
            'rating_stars',
            'has_rating',
            'date_created',
            'updated_at',
        ]
        read_only_fields = fields


class BrewingNoteCreateSerializer(serializers.Serializer):
    """Request body for logging or editing a brewing session."""

    coffee_id = serializers.UUIDField(required=False, allow_null=True)
    recipe_id = serializers.UUIDField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    rating = serializers.IntegerField(required=False, min_value=0, max_value=MAX_RATING, default=0)


class BrewingNoteListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    coffee_name = serializers.CharField(read_only=True)
    recipe_name = serializers.CharField(read_only=True)
    brewing_method = serializers.CharField(read_only=True)
    rating_stars = serializers.CharField(read_only=True)
    short_notes = serializers.CharField(read_only=True)

    class Meta:
        model = BrewingNote
        fields = [
            'id',
            'coffee_name',
            'recipe_name',
            'brewing_method',
            'short_notes',
            'rating',
            'rating_stars',
            'date_created',
        ]
        read_only_fields = fields
