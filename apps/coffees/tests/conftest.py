import pytest
from rest_framework.test import APIClient

from apps.coffees.models import Coffee, RoastLevel
from apps.notes.models import BrewingNote


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def coffee(db):
    """Create and return a test coffee."""
    return Coffee.objects.create(
        name='Blue Mountain',
        roaster='Blue Bottle Coffee',
        processing='Washed',
        roast_level=RoastLevel.MEDIUM,
        origin='Jamaica',
    )


@pytest.fixture
def coffee_light(db):
    """Create and return a light roast coffee."""
    return Coffee.objects.create(
        name='Yirgacheffe Kochere',
        roaster='Square Mile',
        processing='Natural',
        roast_level=RoastLevel.LIGHT,
        origin='Ethiopia',
    )


@pytest.fixture
def rated_notes(coffee):
    """Brewing notes for the test coffee: 4, 5, 4 stars and one unrated."""
    return [
        BrewingNote.objects.create(coffee=coffee, rating=rating, notes=f'Session {i}')
        for i, rating in enumerate([4, 5, 4, 0])
    ]
