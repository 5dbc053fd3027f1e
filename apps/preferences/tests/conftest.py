import pytest
from rest_framework.test import APIClient

from apps.preferences.equipment import EquipmentPreferences
from apps.preferences.stores import InMemoryPreferencesStore


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def prefs():
    """Fresh preferences with the initial defaults."""
    return EquipmentPreferences()


@pytest.fixture
def store():
    """Preferences kept in memory, starting from defaults."""
    return InMemoryPreferencesStore()
