"""Brewing note management service - logging and editing brewing sessions."""

import logging
from django.core.exceptions import ValidationError
from django.db import transaction
from uuid import UUID
from typing import Optional, Dict, Any

from apps.coffees.models import Coffee
from apps.recipes.models import Recipe
from apps.recipes.services import record_recipe_use
from ..models import BrewingNote, MAX_RATING
from .exceptions import (
    BrewingNoteNotFoundError,
    InvalidRatingError,
    CoffeeNotFoundError,
    RecipeNotFoundError,
)

logger = logging.getLogger(__name__)


def _validate_rating(rating: int) -> None:
    if rating is None or not 0 <= rating <= MAX_RATING:
        raise InvalidRatingError(f"Rating must be between 0 and {MAX_RATING}, got {rating}")


def _get_coffee(coffee_id: Optional[UUID]) -> Optional[Coffee]:
    if coffee_id is None:
        return None
    try:
        return Coffee.objects.get(id=coffee_id)
    except (Coffee.DoesNotExist, ValidationError):
        raise CoffeeNotFoundError(f"Coffee {coffee_id} not found")


def _get_recipe(recipe_id: Optional[UUID]) -> Optional[Recipe]:
    if recipe_id is None:
        return None
    try:
        return Recipe.objects.get(id=recipe_id)
    except (Recipe.DoesNotExist, ValidationError):
        raise RecipeNotFoundError(f"Recipe {recipe_id} not found")


@transaction.atomic
def create_brewing_note(
    *,
    coffee_id: Optional[UUID] = None,
    recipe_id: Optional[UUID] = None,
    notes: str = '',
    rating: int = 0,
) -> BrewingNote:
    """
    Log a brewing session.

    Brewing with a recipe counts as a use of it, so the recipe's usage
    count goes up by one in the same transaction.

    Args:
        coffee_id: Coffee UUID
        recipe_id: Recipe UUID
        notes: Free-form tasting notes
        rating: 0 (unrated) to 5 stars

    Returns:
        Created BrewingNote instance

    Raises:
        InvalidRatingError: If rating is outside 0-5
        CoffeeNotFoundError: If coffee doesn't exist
        RecipeNotFoundError: If recipe doesn't exist
    """
    _validate_rating(rating)
    coffee = _get_coffee(coffee_id)
    recipe = _get_recipe(recipe_id)

    note = BrewingNote.objects.create(
        coffee=coffee,
        recipe=recipe,
        notes=notes or '',
        rating=rating,
    )

    if recipe is not None:
        note.recipe = record_recipe_use(recipe_id=recipe.id)

    logger.info(
        "Logged brewing note %s: %s with %s, rating %d",
        note.id, note.coffee_name, note.recipe_name, note.rating
    )
    return note


@transaction.atomic
def update_brewing_note(
    *,
    note_id: UUID,
    data: Dict[str, Any]
) -> BrewingNote:
    """
    Update notes, rating or the linked coffee/recipe of a brewing note.

    Changing the recipe does not change any usage count.

    Args:
        note_id: BrewingNote UUID
        data: Any of notes, rating, coffee_id, recipe_id

    Returns:
        Updated BrewingNote instance

    Raises:
        BrewingNoteNotFoundError: If note doesn't exist
        InvalidRatingError: If rating is outside 0-5
        CoffeeNotFoundError: If coffee doesn't exist
        RecipeNotFoundError: If recipe doesn't exist
    """
    try:
        note = (
            BrewingNote.objects
            .select_for_update()
            .get(id=note_id)
        )
    except (BrewingNote.DoesNotExist, ValidationError):
        raise BrewingNoteNotFoundError(f"Brewing note {note_id} not found")

    if 'rating' in data:
        _validate_rating(data['rating'])
        note.rating = data['rating']
    if 'notes' in data:
        note.notes = data['notes'] or ''
    if 'coffee_id' in data:
        note.coffee = _get_coffee(data['coffee_id'])
    if 'recipe_id' in data:
        note.recipe = _get_recipe(data['recipe_id'])

    note.save()
    logger.info("Updated brewing note %s", note.id)
    return note


@transaction.atomic
def delete_brewing_note(*, note_id: UUID) -> None:
    """
    Delete a brewing note. Recipe usage counts are not decreased.

    Raises:
        BrewingNoteNotFoundError: If note doesn't exist
    """
    try:
        deleted, _ = BrewingNote.objects.filter(id=note_id).delete()
    except ValidationError:
        deleted = 0
    if not deleted:
        raise BrewingNoteNotFoundError(f"Brewing note {note_id} not found")
    logger.info("Deleted brewing note %s", note_id)


def get_brewing_note_by_id(*, note_id: UUID) -> BrewingNote:
    """
    Get brewing note by ID.

    Raises:
        BrewingNoteNotFoundError: If note doesn't exist
    """
    try:
        return (
            BrewingNote.objects
            .select_related('coffee', 'recipe')
            .get(id=note_id)
        )
    except (BrewingNote.DoesNotExist, ValidationError):
        raise BrewingNoteNotFoundError(f"Brewing note {note_id} not found")
