"""Coffee search and filtering service."""

from django.db.models import Q, QuerySet
from typing import Optional

from ..models import Coffee

ORDERING_OPTIONS = {
    'name': ('name', 'roaster'),
    'recent': ('-date_added',),
    'roaster': ('roaster', 'name'),
}


def search_coffees(
    *,
    search: Optional[str] = None,
    roaster: Optional[str] = None,
    origin: Optional[str] = None,
    processing: Optional[str] = None,
    roast_level: Optional[str] = None,
    ordering: Optional[str] = None,
) -> QuerySet[Coffee]:
    """
    Search and filter coffees.

    Args:
        search: Search term for name, roaster, origin
        roaster: Filter by roaster name
        origin: Filter by origin
        processing: Filter by processing method
        roast_level: Filter by roast level
        ordering: One of 'name', 'recent', 'roaster' (default: recent)

    Returns:
        Filtered QuerySet of Coffee
    """
    queryset = Coffee.objects.all()

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(roaster__icontains=search) |
            Q(origin__icontains=search)
        )

    if roaster:
        queryset = queryset.filter(roaster__icontains=roaster)

    if origin:
        queryset = queryset.filter(origin__icontains=origin)

    if processing:
        queryset = queryset.filter(processing__iexact=processing)

    if roast_level:
        queryset = queryset.filter(roast_level=roast_level)

    return queryset.order_by(*ORDERING_OPTIONS.get(ordering, ORDERING_OPTIONS['recent']))


def get_all_roasters() -> list[str]:
    """Sorted list of distinct roaster names."""
    roasters = (
        Coffee.objects
        .exclude(roaster='')
        .values_list('roaster', flat=True)
        .distinct()
        .order_by('roaster')
    )
    return list(roasters)
