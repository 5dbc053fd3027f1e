import pytest
import uuid
from django.urls import reverse
from rest_framework import status

from apps.notes.models import BrewingNote


# =============================================================================
# BrewingNote API Tests
# =============================================================================

@pytest.mark.django_db
class TestBrewingNoteList:
    """Tests for GET /api/notes/"""

    def test_list_notes(self, api_client, note):
        url = reverse('notes:note-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        result = response.data['results'][0]
        assert result['coffee_name'] == 'Blue Mountain'
        assert result['recipe_name'] == 'My V60 Recipe'
        assert result['rating_stars'] == '★★★★☆'

    def test_search(self, api_client, note, coffee):
        BrewingNote.objects.create(coffee=coffee, notes='Chocolate finish')

        url = reverse('notes:note-list')
        response = api_client.get(url, {'search': 'chocolate'})

        assert len(response.data['results']) == 1
        assert response.data['results'][0]['short_notes'] == 'Chocolate finish'

    def test_filter_min_rating(self, api_client, note, coffee):
        BrewingNote.objects.create(coffee=coffee, rating=1)

        url = reverse('notes:note-list')
        response = api_client.get(url, {'min_rating': '3'})

        assert len(response.data['results']) == 1


@pytest.mark.django_db
class TestBrewingNoteCreate:
    """Tests for POST /api/notes/"""

    def test_log_session(self, api_client, coffee, recipe):
        url = reverse('notes:note-list')
        data = {
            'coffee_id': str(coffee.id),
            'recipe_id': str(recipe.id),
            'notes': 'Juicy',
            'rating': 5,
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['rating_stars'] == '★★★★★'
        assert response.data['brewing_method'] == 'V60-01'
        recipe.refresh_from_db()
        assert recipe.usage_count == 6

    def test_rating_out_of_range(self, api_client, coffee):
        url = reverse('notes:note-list')
        response = api_client.post(url, {'coffee_id': str(coffee.id), 'rating': 6}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not BrewingNote.objects.exists()

    def test_unknown_recipe(self, api_client):
        url = reverse('notes:note-list')
        response = api_client.post(url, {'recipe_id': str(uuid.uuid4())}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data


@pytest.mark.django_db
class TestBrewingNoteDetail:
    """Tests for /api/notes/{id}/"""

    def test_retrieve(self, api_client, note):
        url = reverse('notes:note-detail', args=[note.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['roaster'] == 'Blue Bottle Coffee'
        assert response.data['has_notes'] is True

    def test_partial_update(self, api_client, note, recipe):
        url = reverse('notes:note-detail', args=[note.id])
        response = api_client.patch(url, {'rating': 2}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['rating'] == 2
        assert response.data['notes'] == note.notes
        recipe.refresh_from_db()
        assert recipe.usage_count == 5

    def test_delete(self, api_client, note):
        url = reverse('notes:note-detail', args=[note.id])
        response = api_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not BrewingNote.objects.exists()

    def test_not_found(self, api_client, db):
        url = reverse('notes:note-detail', args=[uuid.uuid4()])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_malformed_id(self, api_client, db):
        url = reverse('notes:note-detail', args=['not-a-uuid'])

        assert api_client.get(url).status_code == status.HTTP_404_NOT_FOUND
        assert api_client.delete(url).status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestBrewingNoteFilters:
    """Tests for id filters on GET /api/notes/"""

    @pytest.mark.parametrize('param', ['coffee', 'recipe'])
    def test_malformed_filter_id(self, api_client, note, param):
        url = reverse('notes:note-list')
        response = api_client.get(url, {param: 'abc'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert param in response.data

    def test_filter_by_coffee(self, api_client, note, recipe):
        BrewingNote.objects.create(recipe=recipe)

        url = reverse('notes:note-list')
        response = api_client.get(url, {'coffee': str(note.coffee_id)})

        assert response.status_code == status.HTTP_200_OK
        assert [r['id'] for r in response.data['results']] == [str(note.id)]

    def test_search_fallback_label(self, api_client, note):
        orphan = BrewingNote.objects.create(notes='tasty', rating=3)

        url = reverse('notes:note-list')
        response = api_client.get(url, {'search': 'unknown coffee'})

        assert [r['id'] for r in response.data['results']] == [str(orphan.id)]
