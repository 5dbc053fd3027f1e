import pytest
import uuid
from decimal import Decimal

from apps.preferences.equipment import EquipmentPreferences
from apps.recipes.models import Recipe
from apps.recipes.services import (
    create_recipe,
    update_recipe,
    delete_recipe,
    get_recipe_by_id,
    record_recipe_use,
    search_recipes,
    get_most_used_recipes,
    RecipeNotFoundError,
    InvalidPourSequenceError,
    TooManyPoursError,
)


@pytest.mark.django_db
class TestCreateRecipe:

    def test_create_with_defaults(self):
        recipe = create_recipe()

        assert recipe.brewing_method == 'V60-01'
        assert recipe.grinder == 'Baratza Encore'
        assert recipe.water_temp == 93
        assert recipe.usage_count == 0
        assert Recipe.objects.count() == 1

    def test_create_with_pours(self):
        recipe = create_recipe(
            brewing_method='V60-01',
            pours=[Decimal('40'), Decimal('100'), Decimal('180')],
        )

        recipe.refresh_from_db()
        assert recipe.bloom_amount == Decimal('40')
        assert recipe.third_pour == Decimal('180')
        assert recipe.pour_count == 3

    def test_defaults_from_preferences(self):
        prefs = EquipmentPreferences(
            enabled_brewing_methods=['French Press', 'V60-01'],
            enabled_grinders=['Turin DF64'],
            default_water_temp=96,
        )
        recipe = create_recipe(preferences=prefs)

        assert recipe.brewing_method == 'French Press'
        assert recipe.grinder == 'Turin DF64'
        assert recipe.water_temp == 96

    def test_explicit_values_win_over_preferences(self):
        prefs = EquipmentPreferences(default_water_temp=96)
        recipe = create_recipe(brewing_method='Aeropress', water_temp=85, preferences=prefs)

        assert recipe.brewing_method == 'Aeropress'
        assert recipe.water_temp == 85

    def test_rejects_decreasing_pours(self):
        with pytest.raises(InvalidPourSequenceError):
            create_recipe(brewing_method='V60-01', pours=[40, 120, 100])

        assert Recipe.objects.count() == 0

    def test_rejects_equal_pours(self):
        with pytest.raises(InvalidPourSequenceError):
            create_recipe(brewing_method='V60-01', pours=[40, 60, 60])

    def test_pour_order_not_enforced_when_disabled(self):
        recipe = create_recipe(brewing_method='V60-01', pours=[40, 30], enforce_pour_order=False)
        assert not recipe.has_valid_pour_sequence

    def test_pours_ignored_for_espresso(self):
        recipe = create_recipe(brewing_method='Espresso', pours=[40, 30], water_out=Decimal('36'))
        assert recipe.final_weight == Decimal('36')

    def test_too_many_pours(self):
        with pytest.raises(TooManyPoursError):
            create_recipe(pours=list(range(10, 120, 10)))


@pytest.mark.django_db
class TestUpdateRecipe:

    def test_update_fields(self, v60_recipe):
        recipe = update_recipe(
            recipe_id=v60_recipe.id,
            data={'grind_size': 22, 'fourth_pour': Decimal('250')},
        )

        recipe.refresh_from_db()
        assert recipe.grind_size == 22
        assert recipe.pour_count == 4

    def test_usage_count_not_updatable(self, v60_recipe):
        recipe = update_recipe(recipe_id=v60_recipe.id, data={'usage_count': 100})
        assert recipe.usage_count == 5

    def test_rejects_invalid_pour(self, v60_recipe):
        with pytest.raises(InvalidPourSequenceError):
            update_recipe(recipe_id=v60_recipe.id, data={'third_pour': Decimal('90')})

    def test_not_found(self):
        with pytest.raises(RecipeNotFoundError):
            update_recipe(recipe_id=uuid.uuid4(), data={'name': 'x'})


@pytest.mark.django_db
class TestDeleteAndGetRecipe:

    def test_delete(self, v60_recipe):
        delete_recipe(recipe_id=v60_recipe.id)
        assert not Recipe.objects.filter(id=v60_recipe.id).exists()

    def test_delete_not_found(self):
        with pytest.raises(RecipeNotFoundError):
            delete_recipe(recipe_id=uuid.uuid4())

    def test_get_by_id(self, v60_recipe):
        assert get_recipe_by_id(recipe_id=v60_recipe.id) == v60_recipe

    def test_get_not_found(self):
        with pytest.raises(RecipeNotFoundError):
            get_recipe_by_id(recipe_id=uuid.uuid4())

    @pytest.mark.parametrize('operation', [delete_recipe, get_recipe_by_id, record_recipe_use])
    def test_malformed_id(self, operation):
        with pytest.raises(RecipeNotFoundError):
            operation(recipe_id='not-a-uuid')


@pytest.mark.django_db
class TestRecordRecipeUse:

    def test_increments_by_one(self, v60_recipe):
        recipe = record_recipe_use(recipe_id=v60_recipe.id)

        assert recipe.usage_count == 6
        v60_recipe.refresh_from_db()
        assert v60_recipe.usage_count == 6

    def test_repeated_use(self, espresso_recipe):
        for _ in range(3):
            record_recipe_use(recipe_id=espresso_recipe.id)

        espresso_recipe.refresh_from_db()
        assert espresso_recipe.usage_count == 5

    def test_not_found(self):
        with pytest.raises(RecipeNotFoundError):
            record_recipe_use(recipe_id=uuid.uuid4())


@pytest.mark.django_db
class TestSearchRecipes:

    def test_sorted_by_usage(self, v60_recipe, espresso_recipe, aeropress_recipe):
        results = list(search_recipes())
        assert results == [v60_recipe, espresso_recipe, aeropress_recipe]

    def test_search_name_and_method(self, v60_recipe, espresso_recipe):
        assert list(search_recipes(search='daily')) == [espresso_recipe]
        assert list(search_recipes(search='v60')) == [v60_recipe]

    def test_filter_by_category(self, v60_recipe, espresso_recipe, aeropress_recipe):
        assert list(search_recipes(category='pour_over')) == [v60_recipe]
        assert list(search_recipes(category='espresso')) == [espresso_recipe]
        assert list(search_recipes(category='aeropress')) == [aeropress_recipe]
        assert list(search_recipes(category='french_press')) == []

    def test_category_uses_first_match(self, db):
        mixed = Recipe.objects.create(brewing_method='French Press Espresso')

        assert list(search_recipes(category='espresso')) == [mixed]
        assert list(search_recipes(category='french_press')) == []

    def test_unknown_category(self, v60_recipe):
        moka = Recipe.objects.create(brewing_method='Moka Pot')
        assert list(search_recipes(category='unknown')) == [moka]

    def test_invalid_category(self):
        with pytest.raises(ValueError):
            search_recipes(category='siphon')

    def test_filter_by_grinder(self, v60_recipe, espresso_recipe):
        assert list(search_recipes(grinder='turin df64')) == [espresso_recipe]

    def test_most_used(self, v60_recipe, espresso_recipe, aeropress_recipe):
        assert list(get_most_used_recipes(limit=1)) == [v60_recipe]
        assert list(get_most_used_recipes()) == [v60_recipe, espresso_recipe]
