import pytest

from apps.preferences.models import PreferenceSetting
from apps.preferences.services import (
    get_preferences,
    update_preferences,
    toggle_equipment,
    add_custom_equipment,
    remove_custom_equipment,
    UnknownEquipmentError,
    LastEnabledItemError,
)
from apps.preferences.stores import DatabasePreferencesStore, InMemoryPreferencesStore


@pytest.mark.django_db
class TestInMemoryStore:

    def test_defaults_when_empty(self, store):
        assert get_preferences(store=store).default_water_temp == 93

    def test_update_is_saved(self, store):
        update_preferences(store=store, changes={'default_water_temp': 90})
        assert get_preferences(store=store).default_water_temp == 90

    def test_update_enabled_lists(self, store):
        prefs = update_preferences(
            store=store,
            changes={'enabled_brewing_methods': ['Chemex 6-cup', 'V60-01']},
        )
        assert prefs.enabled_brewing_methods == ['Chemex 6-cup', 'V60-01']

    def test_update_empty_list_falls_back(self, store):
        prefs = update_preferences(store=store, changes={'enabled_grinders': []})
        assert prefs.enabled_grinders == ['Other']

    def test_update_unknown_item(self, store):
        with pytest.raises(UnknownEquipmentError):
            update_preferences(store=store, changes={'enabled_grinders': ['Hand mill']})

    def test_toggle(self, store):
        toggle_equipment(store=store, kind='brewing_method', name='Aeropress')
        assert not get_preferences(store=store).is_brewing_method_enabled('Aeropress')

    def test_toggle_last_enabled(self):
        store = InMemoryPreferencesStore({'enabled_grinders': ['Other']})
        with pytest.raises(LastEnabledItemError):
            toggle_equipment(store=store, kind='grinder', name='Other')

    def test_toggle_unknown_item(self, store):
        with pytest.raises(UnknownEquipmentError):
            toggle_equipment(store=store, kind='grinder', name='Hand mill')

    def test_unknown_kind(self, store):
        with pytest.raises(UnknownEquipmentError):
            toggle_equipment(store=store, kind='kettle', name='Fellow Stagg')

    def test_add_and_remove_custom(self, store):
        add_custom_equipment(store=store, kind='grinder', name='Comandante')
        assert get_preferences(store=store).is_grinder_enabled('Comandante')

        remove_custom_equipment(store=store, kind='grinder', name='Comandante')
        assert 'Comandante' not in get_preferences(store=store).all_available_grinders

    def test_remove_default_rejected(self, store):
        with pytest.raises(UnknownEquipmentError):
            remove_custom_equipment(store=store, kind='grinder', name='Other')


@pytest.mark.django_db
class TestDatabaseStore:

    def test_defaults_without_row(self):
        prefs = DatabasePreferencesStore().load()
        assert prefs.enabled_grinders[0] == 'Baratza Encore'
        assert not PreferenceSetting.objects.exists()

    def test_changes_persist(self):
        add_custom_equipment(kind='brewing_method', name='Origami')

        assert PreferenceSetting.objects.count() == 1
        prefs = get_preferences()
        assert prefs.custom_brewing_methods == ['Origami']
        assert prefs.is_brewing_method_enabled('Origami')
