import pytest
from django.urls import reverse
from rest_framework import status


# =============================================================================
# Preferences API Tests
# =============================================================================

@pytest.mark.django_db
class TestPreferencesDetail:
    """Tests for GET/PATCH /api/preferences/"""

    def test_get_defaults(self, api_client):
        url = reverse('preferences:preferences')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert 'Chemex 6-cup' in response.data['all_available_brewing_methods']
        assert 'Chemex 6-cup' not in response.data['enabled_brewing_methods']
        assert response.data['default_water_temp'] == 93

    def test_patch_water_temp(self, api_client):
        url = reverse('preferences:preferences')
        response = api_client.patch(url, {'default_water_temp': 96}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['default_water_temp'] == 96
        assert api_client.get(url).data['default_water_temp'] == 96

    def test_patch_zero_water_temp_resets(self, api_client):
        url = reverse('preferences:preferences')
        response = api_client.patch(url, {'default_water_temp': 0}, format='json')

        assert response.data['default_water_temp'] == 93

    def test_patch_unknown_grinder(self, api_client):
        url = reverse('preferences:preferences')
        response = api_client.patch(url, {'enabled_grinders': ['Hand mill']}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data


@pytest.mark.django_db
class TestEquipmentActions:
    """Tests for toggle and custom equipment endpoints."""

    def test_toggle_brewing_method(self, api_client):
        url = reverse('preferences:toggle-brewing-method')
        response = api_client.post(url, {'name': 'Chemex 6-cup'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'Chemex 6-cup' in response.data['enabled_brewing_methods']

    def test_toggle_last_grinder(self, api_client):
        api_client.patch(reverse('preferences:preferences'), {'enabled_grinders': ['Other']}, format='json')

        url = reverse('preferences:toggle-grinder')
        response = api_client.post(url, {'name': 'Other'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'last enabled' in response.data['error']

    def test_add_custom_grinder(self, api_client):
        url = reverse('preferences:add-grinder')
        response = api_client.post(url, {'name': ' Comandante '}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['custom_grinders'] == ['Comandante']
        assert 'Comandante' in response.data['enabled_grinders']

    def test_remove_custom_brewing_method(self, api_client):
        api_client.post(reverse('preferences:add-brewing-method'), {'name': 'Origami'}, format='json')

        url = reverse('preferences:remove-brewing-method')
        response = api_client.post(url, {'name': 'Origami'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert 'Origami' not in response.data['all_available_brewing_methods']

    def test_remove_default_not_found(self, api_client):
        url = reverse('preferences:remove-brewing-method')
        response = api_client.post(url, {'name': 'V60-01'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
