"""Preference management service - read and change equipment preferences."""

import logging
from django.db import transaction
from typing import Dict, Any

from ..equipment import EquipmentPreferences
from ..stores import DatabasePreferencesStore
from .exceptions import UnknownEquipmentError, LastEnabledItemError

logger = logging.getLogger(__name__)

# Equipment kind -> EquipmentPreferences attribute holding that list
EQUIPMENT_KINDS = {
    'brewing_method': 'brewing_methods',
    'grinder': 'grinders',
}


def _resolve_store(store):
    return store if store is not None else DatabasePreferencesStore()


def _equipment_list(prefs: EquipmentPreferences, kind: str):
    try:
        return getattr(prefs, EQUIPMENT_KINDS[kind])
    except KeyError:
        raise UnknownEquipmentError(f"Unknown equipment kind '{kind}'")


def get_preferences(*, store=None) -> EquipmentPreferences:
    """
    Load the current equipment preferences.

    Args:
        store: Object with load()/save(), defaults to the database store

    Returns:
        EquipmentPreferences, defaults when nothing was saved yet
    """
    return _resolve_store(store).load()


@transaction.atomic
def update_preferences(*, changes: Dict[str, Any], store=None) -> EquipmentPreferences:
    """
    Replace enabled equipment lists and/or the default water temperature.

    An empty enabled list falls back to the default item, a water
    temperature of 0 falls back to 93 °C.

    Args:
        changes: Any of enabled_brewing_methods, enabled_grinders,
            default_water_temp
        store: Object with load()/save(), defaults to the database store

    Returns:
        Saved EquipmentPreferences

    Raises:
        UnknownEquipmentError: If an enabled item is not offered
    """
    store = _resolve_store(store)
    prefs = store.load()

    for kind, attr in EQUIPMENT_KINDS.items():
        key = f'enabled_{attr}'
        if key not in changes:
            continue
        equipment = getattr(prefs, attr)
        unknown = [item for item in changes[key] if item not in equipment.available]
        if unknown:
            raise UnknownEquipmentError(f"Unknown {kind.replace('_', ' ')}: {', '.join(unknown)}")
        equipment.enabled = changes[key]

    if 'default_water_temp' in changes:
        prefs.default_water_temp = changes['default_water_temp']

    store.save(prefs)
    logger.info("Updated preferences: %s", ', '.join(sorted(changes)) or 'nothing')
    return prefs


@transaction.atomic
def toggle_equipment(*, kind: str, name: str, store=None) -> EquipmentPreferences:
    """
    Enable or disable a brewing method or grinder.

    Args:
        kind: 'brewing_method' or 'grinder'
        name: Item name
        store: Object with load()/save(), defaults to the database store

    Returns:
        Saved EquipmentPreferences

    Raises:
        UnknownEquipmentError: If the item is not offered
        LastEnabledItemError: If it is the last enabled item of its kind
    """
    store = _resolve_store(store)
    prefs = store.load()
    equipment = _equipment_list(prefs, kind)

    if name not in equipment.available:
        raise UnknownEquipmentError(f"'{name}' is not available")
    if not equipment.toggle(name):
        raise LastEnabledItemError(f"'{name}' is the last enabled {kind.replace('_', ' ')}")

    store.save(prefs)
    logger.info("Toggled %s '%s' (enabled=%s)", kind, name, equipment.is_enabled(name))
    return prefs


@transaction.atomic
def add_custom_equipment(*, kind: str, name: str, store=None) -> EquipmentPreferences:
    """
    Add a custom brewing method or grinder; it starts out enabled.

    Blank names and names already offered are ignored.

    Raises:
        UnknownEquipmentError: If kind is not recognised
    """
    store = _resolve_store(store)
    prefs = store.load()

    if _equipment_list(prefs, kind).add_custom(name):
        store.save(prefs)
        logger.info("Added custom %s '%s'", kind, name.strip())
    return prefs


@transaction.atomic
def remove_custom_equipment(*, kind: str, name: str, store=None) -> EquipmentPreferences:
    """
    Remove a custom brewing method or grinder, disabling it too.

    Raises:
        UnknownEquipmentError: If no custom item has that name
    """
    store = _resolve_store(store)
    prefs = store.load()

    if not _equipment_list(prefs, kind).remove_custom(name):
        raise UnknownEquipmentError(f"'{name}' is not a custom {kind.replace('_', ' ')}")

    store.save(prefs)
    logger.info("Removed custom %s '%s'", kind, name)
    return prefs
