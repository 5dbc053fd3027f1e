from rest_framework import serializers

from .display import or_default


class DisplayDefaultsMixin:
    """
    Fill blank fields with display text on the way out.

    Declare ``display_defaults = {'field': 'Fallback'}`` on the serializer's
    Meta. Stored values are never touched, only the response.
    """

    def to_representation(self, instance):
        data = super().to_representation(instance)
        defaults = getattr(self.Meta, 'display_defaults', {})
        for field, fallback in defaults.items():
            if field in data:
                data[field] = or_default(data[field], fallback)
        return data


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
