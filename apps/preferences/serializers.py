from rest_framework import serializers


class EquipmentPreferencesSerializer(serializers.Serializer):
    """Read shape of EquipmentPreferences."""

    enabled_brewing_methods = serializers.ListField(child=serializers.CharField())
    enabled_grinders = serializers.ListField(child=serializers.CharField())
    custom_brewing_methods = serializers.ListField(child=serializers.CharField())
    custom_grinders = serializers.ListField(child=serializers.CharField())
    all_available_brewing_methods = serializers.ListField(child=serializers.CharField())
    all_available_grinders = serializers.ListField(child=serializers.CharField())
    default_water_temp = serializers.IntegerField()


class PreferencesUpdateSerializer(serializers.Serializer):
    """Fields accepted by PATCH /api/preferences/."""

    enabled_brewing_methods = serializers.ListField(
        child=serializers.CharField(),
        required=False,
        allow_empty=True,
    )
    enabled_grinders = serializers.ListField(
        child=serializers.CharField(),
        required=False,
        allow_empty=True,
    )
    default_water_temp = serializers.IntegerField(required=False, min_value=0, max_value=100)


class EquipmentNameSerializer(serializers.Serializer):
    """Request body naming one brewing method or grinder."""

    name = serializers.CharField(max_length=100, trim_whitespace=False)
