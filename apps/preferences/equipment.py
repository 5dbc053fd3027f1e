"""
Equipment preferences: which brewing methods and grinders the user owns.

EquipmentPreferences is a plain configuration object. It does not persist
itself, see ``stores`` for loading and saving.
"""

DEFAULT_BREWING_METHODS = [
    'V60-01',
    'V60-02',
    'Kalita Wave 155',
    'Chemex 6-cup',
    'Espresso (Gaggia Classic Pro)',
    'French Press',
    'Aeropress',
]

DEFAULT_GRINDERS = [
    'Baratza Encore',
    'Turin DF64',
    '1Zpresso J-Ultra',
    'Other',
]

# Chemex is offered but not enabled out of the box
INITIAL_BREWING_METHODS = [m for m in DEFAULT_BREWING_METHODS if m != 'Chemex 6-cup']
INITIAL_GRINDERS = list(DEFAULT_GRINDERS)

FALLBACK_BREWING_METHOD = 'V60-01'
FALLBACK_GRINDER = 'Other'
DEFAULT_WATER_TEMP = 93


class EquipmentList:
    """
    Default plus custom items of one kind, and which of them are enabled.

    At least one item is always enabled; emptying the list brings back the
    fallback item.
    """

    def __init__(self, defaults, fallback, enabled=None, custom=None):
        self.defaults = list(defaults)
        self.fallback = fallback
        self.custom = list(custom or [])
        self._enabled = []
        self.enabled = enabled if enabled is not None else []

    @property
    def enabled(self):
        return list(self._enabled)

    @enabled.setter
    def enabled(self, items):
        seen = []
        for item in items:
            if item not in seen:
                seen.append(item)
        self._enabled = seen or [self.fallback]

    @property
    def available(self):
        return self.defaults + self.custom

    def is_enabled(self, item):
        return item in self._enabled

    def add_custom(self, item):
        """
        Add and enable a custom item.

        Returns False when the trimmed name is empty or already offered.
        """
        name = (item or '').strip()
        if not name or name in self.available:
            return False
        self.custom.append(name)
        self._enabled.append(name)
        return True

    def remove_custom(self, item):
        """Remove a custom item and disable it. Defaults cannot be removed."""
        if item not in self.custom:
            return False
        self.custom.remove(item)
        self.enabled = [i for i in self._enabled if i != item]
        return True

    def toggle(self, item):
        """
        Enable or disable an item.

        Returns False when nothing changed: the item is not offered, or it is
        the last enabled one.
        """
        if item in self._enabled:
            if len(self._enabled) == 1:
                return False
            self._enabled.remove(item)
            return True
        if item not in self.available:
            return False
        self._enabled.append(item)
        return True


class EquipmentPreferences:
    """The user's brewing methods, grinders and default water temperature."""

    def __init__(
        self,
        enabled_brewing_methods=None,
        enabled_grinders=None,
        custom_brewing_methods=None,
        custom_grinders=None,
        default_water_temp=DEFAULT_WATER_TEMP,
    ):
        self.brewing_methods = EquipmentList(
            DEFAULT_BREWING_METHODS,
            FALLBACK_BREWING_METHOD,
            enabled=INITIAL_BREWING_METHODS if enabled_brewing_methods is None else enabled_brewing_methods,
            custom=custom_brewing_methods,
        )
        self.grinders = EquipmentList(
            DEFAULT_GRINDERS,
            FALLBACK_GRINDER,
            enabled=INITIAL_GRINDERS if enabled_grinders is None else enabled_grinders,
            custom=custom_grinders,
        )
        self.default_water_temp = default_water_temp

    @property
    def default_water_temp(self):
        return self._default_water_temp

    @default_water_temp.setter
    def default_water_temp(self, value):
        self._default_water_temp = int(value or 0) or DEFAULT_WATER_TEMP

    # Brewing methods

    @property
    def enabled_brewing_methods(self):
        return self.brewing_methods.enabled

    @enabled_brewing_methods.setter
    def enabled_brewing_methods(self, items):
        self.brewing_methods.enabled = items

    @property
    def custom_brewing_methods(self):
        return list(self.brewing_methods.custom)

    @property
    def all_available_brewing_methods(self):
        return self.brewing_methods.available

    def is_brewing_method_enabled(self, method):
        return self.brewing_methods.is_enabled(method)

    def add_custom_brewing_method(self, method):
        return self.brewing_methods.add_custom(method)

    def remove_custom_brewing_method(self, method):
        return self.brewing_methods.remove_custom(method)

    def toggle_brewing_method(self, method):
        return self.brewing_methods.toggle(method)

    # Grinders

    @property
    def enabled_grinders(self):
        return self.grinders.enabled

    @enabled_grinders.setter
    def enabled_grinders(self, items):
        self.grinders.enabled = items

    @property
    def custom_grinders(self):
        return list(self.grinders.custom)

    @property
    def all_available_grinders(self):
        return self.grinders.available

    def is_grinder_enabled(self, grinder):
        return self.grinders.is_enabled(grinder)

    def add_custom_grinder(self, grinder):
        return self.grinders.add_custom(grinder)

    def remove_custom_grinder(self, grinder):
        return self.grinders.remove_custom(grinder)

    def toggle_grinder(self, grinder):
        return self.grinders.toggle(grinder)

    # Serialization

    def to_dict(self):
        return {
            'enabled_brewing_methods': self.enabled_brewing_methods,
            'enabled_grinders': self.enabled_grinders,
            'custom_brewing_methods': self.custom_brewing_methods,
            'custom_grinders': self.custom_grinders,
            'default_water_temp': self.default_water_temp,
        }

    @classmethod
    def from_dict(cls, data):
        """Rebuild from a stored document; missing keys get defaults."""
        return cls(
            enabled_brewing_methods=data.get('enabled_brewing_methods'),
            enabled_grinders=data.get('enabled_grinders'),
            custom_brewing_methods=data.get('custom_brewing_methods'),
            custom_grinders=data.get('custom_grinders'),
            default_water_temp=data.get('default_water_temp', DEFAULT_WATER_TEMP),
        )
