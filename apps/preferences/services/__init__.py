"""Services for preferences business logic."""

from .exceptions import (
    PreferencesServiceError,
    UnknownEquipmentError,
    LastEnabledItemError,
)
from .preference_management import (
    EQUIPMENT_KINDS,
    get_preferences,
    update_preferences,
    toggle_equipment,
    add_custom_equipment,
    remove_custom_equipment,
)

__all__ = [
    # Exceptions
    'PreferencesServiceError',
    'UnknownEquipmentError',
    'LastEnabledItemError',
    # Preference Management
    'EQUIPMENT_KINDS',
    'get_preferences',
    'update_preferences',
    'toggle_equipment',
    'add_custom_equipment',
    'remove_custom_equipment',
]
