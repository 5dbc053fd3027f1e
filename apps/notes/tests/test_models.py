import pytest

from apps.coffees.models import Coffee
from apps.notes.models import BrewingNote
from apps.recipes.models import Recipe


class TestRatingStars:

    @pytest.mark.parametrize('rating, stars', [
        (0, '☆☆☆☆☆'),
        (1, '★☆☆☆☆'),
        (4, '★★★★☆'),
        (5, '★★★★★'),
    ])
    def test_stars(self, rating, stars):
        assert BrewingNote(rating=rating).rating_stars == stars

    @pytest.mark.parametrize('rating, stars', [(7, '★★★★★'), (-2, '☆☆☆☆☆')])
    def test_out_of_range_is_clamped(self, rating, stars):
        assert BrewingNote(rating=rating).rating_stars == stars

    def test_has_rating(self):
        assert BrewingNote(rating=3).has_rating
        assert not BrewingNote(rating=0).has_rating


class TestNotesText:

    def test_short_notes_unchanged(self):
        note = BrewingNote(notes='x' * 100)
        assert note.short_notes == 'x' * 100

    def test_short_notes_truncated(self):
        note = BrewingNote(notes='x' * 101)
        assert note.short_notes == 'x' * 100 + '...'

    def test_has_notes(self):
        assert BrewingNote(notes='Fruity').has_notes
        assert not BrewingNote(notes='').has_notes


class TestRelatedNames:

    def test_without_coffee_or_recipe(self):
        note = BrewingNote()
        assert note.coffee_name == 'Unknown Coffee'
        assert note.roaster == 'Unknown Roaster'
        assert note.recipe_name == 'Unknown Recipe'
        assert note.brewing_method == 'Unknown Method'

    def test_with_coffee_and_recipe(self):
        note = BrewingNote(
            coffee=Coffee(name='Blue Mountain', roaster='Blue Bottle Coffee'),
            recipe=Recipe(name='My V60 Recipe', brewing_method='V60-01'),
        )
        assert note.coffee_name == 'Blue Mountain'
        assert note.roaster == 'Blue Bottle Coffee'
        assert note.recipe_name == 'My V60 Recipe'
        assert note.brewing_method == 'V60-01'

    def test_unnamed_recipe_uses_display_name(self):
        note = BrewingNote(recipe=Recipe(name='', brewing_method='V60-01', grinder='Baratza Encore'))
        assert note.recipe_name == 'V60-01 - Baratza Encore'

    def test_blank_roaster(self):
        note = BrewingNote(coffee=Coffee(name='Blue Mountain', roaster=''))
        assert note.roaster == 'Unknown Roaster'


class TestMatchesSearch:

    @pytest.fixture
    def note(self):
        return BrewingNote(
            coffee=Coffee(name='Blue Mountain', roaster='Blue Bottle Coffee'),
            recipe=Recipe(name='Morning', brewing_method='Kalita Wave 155'),
            notes='Citrus and honey',
        )

    @pytest.mark.parametrize('text', ['mountain', 'BOTTLE', 'morning', 'kalita', 'honey', ''])
    def test_matches(self, note, text):
        assert note.matches_search(text)

    def test_no_match(self, note):
        assert not note.matches_search('chocolate')

    def test_matches_fallback_names(self):
        assert BrewingNote().matches_search('unknown')
