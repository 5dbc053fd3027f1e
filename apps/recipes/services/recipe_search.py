"""Recipe search and filtering service."""

from django.db.models import Q, QuerySet
from typing import Optional

from ..brewing import BrewingCategory, CATEGORY_KEYWORDS
from ..models import Recipe


def _contains_any(keywords) -> Q:
    query = Q()
    for keyword in keywords:
        query |= Q(brewing_method__icontains=keyword)
    return query


def category_filter(category: BrewingCategory) -> Q:
    """
    Database filter matching ``classify_brewing_method``.

    Classification takes the first category with a matching keyword, so a
    method belongs to a category when it has one of its keywords and none of
    the keywords of the categories checked before it.
    """
    earlier = []
    for candidate, keywords in CATEGORY_KEYWORDS:
        if candidate is category:
            query = _contains_any(keywords)
            if earlier:
                query &= ~_contains_any(earlier)
            return query
        earlier.extend(keywords)
    # UNKNOWN: no keyword at all
    return ~_contains_any(earlier)


def search_recipes(
    *,
    search: Optional[str] = None,
    brewing_method: Optional[str] = None,
    category: Optional[str] = None,
    grinder: Optional[str] = None,
) -> QuerySet[Recipe]:
    """
    Search and filter recipes, most used first.

    Args:
        search: Search term for name and brewing method
        brewing_method: Exact brewing method
        category: BrewingCategory value (pour_over, espresso, ...)
        grinder: Filter by grinder

    Returns:
        Filtered QuerySet of Recipe

    Raises:
        ValueError: If category is not a known BrewingCategory value
    """
    queryset = Recipe.objects.all()

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(brewing_method__icontains=search)
        )

    if brewing_method:
        queryset = queryset.filter(brewing_method__iexact=brewing_method)

    if category:
        queryset = queryset.filter(category_filter(BrewingCategory(category)))

    if grinder:
        queryset = queryset.filter(grinder__iexact=grinder)

    return queryset.order_by('-usage_count', 'name', '-date_created')


def get_most_used_recipes(*, limit: int = 5) -> QuerySet[Recipe]:
    """Recipes ordered by how often they were brewed."""
    return Recipe.objects.filter(usage_count__gt=0).order_by('-usage_count', 'name')[:limit]
