from rest_framework import serializers

from apps.common.display import UNKNOWN_ORIGIN, UNKNOWN_PROCESSING, UNKNOWN_ROASTER
from apps.common.serializers import DisplayDefaultsMixin
from .models import Coffee, ProcessingMethod


class CoffeeSerializer(DisplayDefaultsMixin, serializers.ModelSerializer):
    """Main serializer for coffees."""

    display_name = serializers.CharField(read_only=True)
    detail_text = serializers.CharField(read_only=True)
    brewing_notes_count = serializers.IntegerField(read_only=True)
    average_rating = serializers.FloatField(read_only=True)
    has_ratings = serializers.BooleanField(read_only=True)

    class Meta:
        model = Coffee
        fields = [
            'id',
            'name',
            'roaster',
            'processing',
            'roast_level',
            'origin',
            'display_name',
            'detail_text',
            'brewing_notes_count',
            'average_rating',
            'has_ratings',
            'date_added',
            'updated_at',
        ]
        read_only_fields = ['id', 'date_added', 'updated_at']
        display_defaults = {
            'roaster': UNKNOWN_ROASTER,
            'processing': UNKNOWN_PROCESSING,
            'origin': UNKNOWN_ORIGIN,
        }


class CoffeeCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating coffees."""

    class Meta:
        model = Coffee
        fields = [
            'name',
            'roaster',
            'processing',
            'roast_level',
            'origin',
        ]


class CoffeeListSerializer(DisplayDefaultsMixin, serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    display_name = serializers.CharField(read_only=True)

    class Meta:
        model = Coffee
        fields = [
            'id',
            'name',
            'roaster',
            'origin',
            'roast_level',
            'display_name',
            'date_added',
        ]
        read_only_fields = fields
        display_defaults = {
            'roaster': UNKNOWN_ROASTER,
            'origin': UNKNOWN_ORIGIN,
        }


class ProcessingMethodSerializer(serializers.ModelSerializer):

    class Meta:
        model = ProcessingMethod
        fields = ['id', 'name', 'usage_count']
        read_only_fields = fields


class CoffeeRatingSummarySerializer(serializers.Serializer):
    """Response shape of the coffee rating summary."""
    coffee_id = serializers.UUIDField()
    coffee_name = serializers.CharField()
    brewing_notes_count = serializers.IntegerField()
    rated_notes_count = serializers.IntegerField()
    average_rating = serializers.FloatField()
    rating_distribution = serializers.DictField(child=serializers.IntegerField())
