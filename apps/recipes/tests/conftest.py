import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from apps.recipes.models import Recipe, AeropressType


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def v60_recipe(db):
    """Create and return a pour-over recipe with three pours."""
    return Recipe.objects.create(
        name='My V60 Recipe',
        brewing_method='V60-01',
        grinder='Baratza Encore',
        grind_size=20,
        water_temp=93,
        dose=Decimal('20.0'),
        brew_time=240,
        usage_count=5,
        bloom_amount=Decimal('40.0'),
        bloom_time=30,
        second_pour=Decimal('100.0'),
        third_pour=Decimal('180.0'),
    )


@pytest.fixture
def espresso_recipe(db):
    """Create and return an espresso recipe."""
    return Recipe.objects.create(
        name='Daily Shot',
        brewing_method='Espresso (Gaggia Classic Pro)',
        grinder='Turin DF64',
        grind_size=8,
        dose=Decimal('18.0'),
        brew_time=28,
        water_out=Decimal('36.0'),
        usage_count=2,
    )


@pytest.fixture
def aeropress_recipe(db):
    """Create and return an inverted Aeropress recipe."""
    return Recipe.objects.create(
        brewing_method='Aeropress',
        grinder='1Zpresso J-Ultra',
        dose=Decimal('15.0'),
        aeropress_type=AeropressType.INVERTED,
        plunge_time=30,
        bloom_amount=Decimal('30.0'),
        second_pour=Decimal('200.0'),
    )
