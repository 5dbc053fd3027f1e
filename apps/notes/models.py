# ==========================================
# apps/notes/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid

from apps.common.display import (
    or_default,
    UNKNOWN_COFFEE,
    UNKNOWN_METHOD,
    UNKNOWN_RECIPE,
    UNKNOWN_ROASTER,
)

MAX_RATING = 5
SHORT_NOTES_LENGTH = 100


class BrewingNote(models.Model):
    """
    One brewing session: the coffee, the recipe and how it tasted.

    Coffee and recipe are optional and survive as "Unknown ..." when the
    referenced record is deleted. A rating of 0 means unrated.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    coffee = models.ForeignKey(
        'coffees.Coffee',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='brewing_notes'
    )
    recipe = models.ForeignKey(
        'recipes.Recipe',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='brewing_notes'
    )
    notes = models.TextField(blank=True)
    rating = models.PositiveSmallIntegerField(
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(MAX_RATING)]
    )
    date_created = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'brewing_notes'
        indexes = [
            models.Index(fields=['date_created'], name='notes_date_created_idx'),
            models.Index(fields=['rating'], name='notes_rating_idx'),
        ]
        ordering = ['-date_created']

    def __str__(self):
        return f"{self.coffee_name} with {self.recipe_name} ({self.rating_stars})"

    # Rating

    @property
    def has_rating(self):
        return self.rating > 0

    @property
    def rating_stars(self):
        """Always five characters, e.g. "★★★☆☆"."""
        filled = max(0, min(self.rating or 0, MAX_RATING))
        return '★' * filled + '☆' * (MAX_RATING - filled)

    # Notes

    @property
    def has_notes(self):
        return bool(self.notes)

    @property
    def short_notes(self):
        text = self.notes or ''
        if len(text) <= SHORT_NOTES_LENGTH:
            return text
        return text[:SHORT_NOTES_LENGTH] + '...'

    # Related records

    @property
    def coffee_name(self):
        return or_default(self.coffee.name if self.coffee else None, UNKNOWN_COFFEE)

    @property
    def roaster(self):
        return or_default(self.coffee.roaster if self.coffee else None, UNKNOWN_ROASTER)

    @property
    def recipe_name(self):
        if self.recipe is None:
            return UNKNOWN_RECIPE
        return self.recipe.display_name

    @property
    def brewing_method(self):
        return or_default(self.recipe.brewing_method if self.recipe else None, UNKNOWN_METHOD)

    def matches_search(self, text):
        """Case-insensitive match on coffee, roaster, recipe, method or notes."""
        needle = (text or '').lower()
        return any(
            needle in value.lower()
            for value in (
                self.coffee_name,
                self.roaster,
                self.recipe_name,
                self.brewing_method,
                self.notes or '',
            )
        )
