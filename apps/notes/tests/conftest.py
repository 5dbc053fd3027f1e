import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from apps.coffees.models import Coffee
from apps.notes.models import BrewingNote
from apps.recipes.models import Recipe


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
        origin='Jamaica',
    )


@pytest.fixture
def recipe(db):
    """Create and return a pour-over recipe."""
    return Recipe.objects.create(
        name='My V60 Recipe',
        brewing_method='V60-01',
        grinder='Baratza Encore',
        dose=Decimal('20.0'),
        usage_count=5,
        bloom_amount=Decimal('40.0'),
        second_pour=Decimal('100.0'),
        third_pour=Decimal('180.0'),
    )


@pytest.fixture
def note(coffee, recipe):
    """Create and return a rated brewing note."""
    return BrewingNote.objects.create(
        coffee=coffee,
        recipe=recipe,
        notes='Great brew today! Sweet and bright with notes of citrus. Perfect extraction.',
        rating=4,
    )
