"""Processing method catalog, ranked by how often each one is used."""

import logging
from django.db import transaction

from ..models import ProcessingMethod

logger = logging.getLogger(__name__)


def fetch_or_create_processing_method(*, name: str) -> ProcessingMethod:
    """
    Get a processing method by exact name, creating it with zero usage.

    Args:
        name: Processing method name

    Returns:
        ProcessingMethod instance
    """
    method, created = ProcessingMethod.objects.get_or_create(
        name=name.strip(),
        defaults={'usage_count': 0},
    )
    if created:
        logger.info("Created processing method %r", method.name)
    return method


def get_processing_methods_sorted() -> list[ProcessingMethod]:
    """Most used first, ties broken alphabetically."""
    return list(ProcessingMethod.objects.order_by('-usage_count', 'name'))


@transaction.atomic
def seed_default_processing_methods() -> int:
    """
    Make sure every default processing method exists.

    Returns:
        Number of methods that were missing and got created
    """
    existing = set(
        ProcessingMethod.objects
        .filter(name__in=ProcessingMethod.DEFAULT_METHODS)
        .values_list('name', flat=True)
    )
    missing = [name for name in ProcessingMethod.DEFAULT_METHODS if name not in existing]
    ProcessingMethod.objects.bulk_create(
        [ProcessingMethod(name=name) for name in missing]
    )
    logger.info("Seeded %d processing methods", len(missing))
    return len(missing)


@transaction.atomic
def record_processing_method_use(*, name: str) -> ProcessingMethod:
    """
    Count one more use of a processing method, creating it if needed.

    Args:
        name: Processing method name

    Returns:
        Updated ProcessingMethod instance
    """
    entry = fetch_or_create_processing_method(name=name)
    method = ProcessingMethod.objects.select_for_update().get(id=entry.id)
    method.increment_usage_count()
    method.save(update_fields=['usage_count'])
    return method
