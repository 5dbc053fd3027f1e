"""Recipe management service - CRUD and usage tracking for recipes."""

import logging
from decimal import Decimal
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from uuid import UUID
from typing import Optional, Dict, Any, Sequence

from apps.preferences.equipment import EquipmentPreferences
from .. import brewing
from ..models import Recipe, AeropressType, DEFAULT_BREWING_METHOD, DEFAULT_GRINDER
from .exceptions import (
    RecipeNotFoundError,
    InvalidPourSequenceError,
    TooManyPoursError,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = [
    'name', 'brewing_method', 'grinder', 'grind_size', 'water_temp', 'dose',
    'brew_time', 'bloom_time', 'water_out', 'aeropress_type', 'plunge_time',
    *brewing.POUR_FIELDS,
]


def check_pour_sequence(recipe: Recipe) -> None:
    """
    Reject a pour schedule that does not strictly increase.

    Only pour-capable methods are checked; other methods ignore pours.

    Raises:
        InvalidPourSequenceError: On the first pour not above the previous one
    """
    if not recipe.supports_pours:
        return

    position = brewing.first_invalid_pour(recipe.bloom_amount, recipe.pours[1:])
    if position is not None:
        field = brewing.POUR_FIELDS[position]
        raise InvalidPourSequenceError(
            f"{field.replace('_', ' ').capitalize()} must be more than the previous pour"
        )


@transaction.atomic
def create_recipe(
    *,
    name: str = '',
    brewing_method: Optional[str] = None,
    grinder: Optional[str] = None,
    grind_size: int = 0,
    water_temp: Optional[int] = None,
    dose: Decimal = Decimal('20.0'),
    brew_time: int = 0,
    pours: Optional[Sequence[Optional[Decimal]]] = None,
    bloom_time: int = 0,
    water_out: Optional[Decimal] = None,
    aeropress_type: str = AeropressType.NORMAL,
    plunge_time: int = 0,
    preferences: Optional[EquipmentPreferences] = None,
    enforce_pour_order: bool = True,
) -> Recipe:
    """
    Create a new brewing recipe.

    Method, grinder and water temperature left unset are taken from the
    user's equipment preferences when given, otherwise from project defaults.

    Args:
        name: Display name, blank to use "{method} - {grinder}"
        brewing_method: Free-form method name, e.g. "V60-01"
        grinder: Grinder name
        grind_size: Grinder setting
        water_temp: Water temperature in °C
        dose: Coffee dose in grams
        brew_time: Total brew time in seconds
        pours: Cumulative pour weights, bloom first (up to 10)
        bloom_time: Bloom time in seconds
        water_out: Espresso yield in grams
        aeropress_type: Normal or Inverted
        plunge_time: Aeropress plunge time in seconds
        preferences: Equipment preferences used for defaults
        enforce_pour_order: Reject pours that do not strictly increase

    Returns:
        Created Recipe instance

    Raises:
        TooManyPoursError: If more than ten pours are given
        InvalidPourSequenceError: If enforce_pour_order and pours don't increase
    """
    if preferences is not None:
        brewing_method = brewing_method or preferences.enabled_brewing_methods[0]
        grinder = grinder or preferences.enabled_grinders[0]
        water_temp = water_temp if water_temp is not None else preferences.default_water_temp

    recipe = Recipe(
        name=name,
        brewing_method=brewing_method or DEFAULT_BREWING_METHOD,
        grinder=grinder or DEFAULT_GRINDER,
        grind_size=grind_size,
        water_temp=water_temp if water_temp is not None else settings.DEFAULT_WATER_TEMP,
        dose=dose,
        brew_time=brew_time,
        bloom_time=bloom_time,
        water_out=water_out,
        aeropress_type=aeropress_type,
        plunge_time=plunge_time,
        usage_count=0,
    )

    try:
        recipe.assign_pours(pours or [])
    except ValueError as e:
        raise TooManyPoursError(str(e))

    if enforce_pour_order:
        check_pour_sequence(recipe)

    recipe.save()
    logger.info("Created recipe %s (%s)", recipe.id, recipe.display_name)
    return recipe


@transaction.atomic
def update_recipe(
    *,
    recipe_id: UUID,
    data: Dict[str, Any],
    enforce_pour_order: bool = True,
) -> Recipe:
    """
    Update an existing recipe.

    Usage count is not updatable here, see record_recipe_use.

    Args:
        recipe_id: Recipe UUID
        data: Fields to update
        enforce_pour_order: Reject pours that do not strictly increase

    Returns:
        Updated Recipe instance

    Raises:
        RecipeNotFoundError: If recipe doesn't exist
        InvalidPourSequenceError: If enforce_pour_order and pours don't increase
    """
    try:
        recipe = (
            Recipe.objects
            .select_for_update()
            .get(id=recipe_id)
        )
    except (Recipe.DoesNotExist, ValidationError):
        raise RecipeNotFoundError(f"Recipe {recipe_id} not found")

    for field, value in data.items():
        if field in UPDATABLE_FIELDS:
            setattr(recipe, field, value)

    if enforce_pour_order:
        check_pour_sequence(recipe)

    recipe.save()
    logger.info("Updated recipe %s", recipe.id)
    return recipe


@transaction.atomic
def delete_recipe(*, recipe_id: UUID) -> None:
    """
    Delete a recipe. Brewing notes that used it are kept.

    Raises:
        RecipeNotFoundError: If recipe doesn't exist
    """
    try:
        deleted, _ = Recipe.objects.filter(id=recipe_id).delete()
    except ValidationError:
        deleted = 0
    if not deleted:
        raise RecipeNotFoundError(f"Recipe {recipe_id} not found")
    logger.info("Deleted recipe %s", recipe_id)


def get_recipe_by_id(*, recipe_id: UUID) -> Recipe:
    """
    Get recipe by ID.

    Raises:
        RecipeNotFoundError: If recipe doesn't exist
    """
    try:
        return Recipe.objects.get(id=recipe_id)
    except (Recipe.DoesNotExist, ValidationError):
        raise RecipeNotFoundError(f"Recipe {recipe_id} not found")


@transaction.atomic
def record_recipe_use(*, recipe_id: UUID) -> Recipe:
    """
    Count one more brew with this recipe.

    Uses select_for_update() so two sessions logged at once both count.

    Args:
        recipe_id: Recipe UUID

    Returns:
        Updated Recipe instance

    Raises:
        RecipeNotFoundError: If recipe doesn't exist
    """
    try:
        recipe = (
            Recipe.objects
            .select_for_update()
            .get(id=recipe_id)
        )
    except (Recipe.DoesNotExist, ValidationError):
        raise RecipeNotFoundError(f"Recipe {recipe_id} not found")

    recipe.increment_usage_count()
    recipe.save(update_fields=['usage_count', 'updated_at'])

    logger.debug("Recipe %s used %d times", recipe.id, recipe.usage_count)
    return recipe
