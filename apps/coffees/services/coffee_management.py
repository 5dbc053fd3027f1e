"""Coffee CRUD operations service."""

import logging
from django.core.exceptions import ValidationError
from django.db import transaction
from uuid import UUID
from typing import Dict, Any

from ..models import Coffee, RoastLevel
from .exceptions import CoffeeNotFoundError, InvalidCoffeeError
from .processing_methods import record_processing_method_use

logger = logging.getLogger(__name__)


@transaction.atomic
def create_coffee(
    *,
    name: str,
    roaster: str = '',
    processing: str = '',
    roast_level: str = RoastLevel.MEDIUM,
    origin: str = '',
) -> Coffee:
    """
    Add a coffee to the journal.

    Args:
        name: Coffee name
        roaster: Roaster/brand name
        processing: Processing method name
        roast_level: Roast level
        origin: Country or region of origin

    Returns:
        Created Coffee instance

    Raises:
        InvalidCoffeeError: If name is blank
    """
    name = (name or '').strip()
    if not name:
        raise InvalidCoffeeError("Coffee name is required")

    coffee = Coffee.objects.create(
        name=name,
        roaster=roaster.strip(),
        processing=processing.strip(),
        roast_level=roast_level,
        origin=origin.strip(),
    )

    # Keep the processing picker ranked by how often each method is used
    if coffee.processing:
        record_processing_method_use(name=coffee.processing)

    logger.info("Created coffee %s (%s)", coffee.id, coffee.display_name)
    return coffee


@transaction.atomic
def update_coffee(
    *,
    coffee_id: UUID,
    data: Dict[str, Any]
) -> Coffee:
    """
    Update an existing coffee.

    Args:
        coffee_id: Coffee UUID
        data: Fields to update

    Returns:
        Updated Coffee instance

    Raises:
        CoffeeNotFoundError: If coffee doesn't exist
        InvalidCoffeeError: If name would become blank
    """
    try:
        coffee = (
            Coffee.objects
            .select_for_update()
            .get(id=coffee_id)
        )
    except (Coffee.DoesNotExist, ValidationError):
        raise CoffeeNotFoundError(f"Coffee {coffee_id} not found")

    allowed_fields = ['name', 'roaster', 'processing', 'roast_level', 'origin']

    if 'name' in data and not (data['name'] or '').strip():
        raise InvalidCoffeeError("Coffee name is required")

    previous_processing = coffee.processing
    for field, value in data.items():
        if field in allowed_fields:
            setattr(coffee, field, value)

    coffee.save()

    if coffee.processing and coffee.processing != previous_processing:
        record_processing_method_use(name=coffee.processing)

    logger.info("Updated coffee %s", coffee.id)
    return coffee


@transaction.atomic
def delete_coffee(*, coffee_id: UUID) -> None:
    """
    Delete a coffee. Its brewing notes stay, without a coffee.

    Args:
        coffee_id: Coffee UUID

    Raises:
        CoffeeNotFoundError: If coffee doesn't exist
    """
    try:
        deleted, _ = Coffee.objects.filter(id=coffee_id).delete()
    except ValidationError:
        deleted = 0
    if not deleted:
        raise CoffeeNotFoundError(f"Coffee {coffee_id} not found")
    logger.info("Deleted coffee %s", coffee_id)


def get_coffee_by_id(*, coffee_id: UUID) -> Coffee:
    """
    Get coffee by ID.

    Raises:
        CoffeeNotFoundError: If coffee doesn't exist
    """
    try:
        return Coffee.objects.get(id=coffee_id)
    except (Coffee.DoesNotExist, ValidationError):
        raise CoffeeNotFoundError(f"Coffee {coffee_id} not found")
