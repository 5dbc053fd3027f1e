"""Where equipment preferences are loaded from and saved to."""

import copy

from .equipment import EquipmentPreferences
from .models import PreferenceSetting

EQUIPMENT_KEY = 'equipment'


class DatabasePreferencesStore:
    """Keeps preferences as a single JSON row in the database."""

    def __init__(self, key=EQUIPMENT_KEY):
        self.key = key

    def load(self) -> EquipmentPreferences:
        setting = PreferenceSetting.objects.filter(key=self.key).first()
        if setting is None:
            return EquipmentPreferences()
        return EquipmentPreferences.from_dict(setting.value)

    def save(self, prefs: EquipmentPreferences) -> None:
        PreferenceSetting.objects.update_or_create(
            key=self.key,
            defaults={'value': prefs.to_dict()},
        )


class InMemoryPreferencesStore:
    """Process-local store, used by tests and scripts."""

    def __init__(self, data=None):
        self.data = copy.deepcopy(data) if data is not None else None

    def load(self) -> EquipmentPreferences:
        if self.data is None:
            return EquipmentPreferences()
        return EquipmentPreferences.from_dict(self.data)

    def save(self, prefs: EquipmentPreferences) -> None:
        self.data = prefs.to_dict()
