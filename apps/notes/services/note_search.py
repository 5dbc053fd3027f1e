"""Brewing note search and filtering service."""

from django.db.models import QuerySet
from uuid import UUID
from typing import Optional

from ..models import BrewingNote


def search_brewing_notes(
    *,
    search: Optional[str] = None,
    coffee_id: Optional[UUID] = None,
    recipe_id: Optional[UUID] = None,
    min_rating: Optional[int] = None,
) -> QuerySet[BrewingNote]:
    """
    Search and filter brewing notes, newest first.

    Text search goes through BrewingNote.matches_search, so notes without a
    coffee or recipe are found by their "Unknown ..." labels and unnamed
    recipes by their method and grinder.

    Args:
        search: Search term for coffee name, roaster, recipe name,
            brewing method and notes
        coffee_id: Only notes for this coffee
        recipe_id: Only notes brewed with this recipe
        min_rating: Only notes rated at least this many stars

    Returns:
        Filtered QuerySet of BrewingNote
    """
    queryset = BrewingNote.objects.select_related('coffee', 'recipe')

    if coffee_id:
        queryset = queryset.filter(coffee_id=coffee_id)

    if recipe_id:
        queryset = queryset.filter(recipe_id=recipe_id)

    if min_rating:
        queryset = queryset.filter(rating__gte=min_rating)

    if search:
        matching = [note.id for note in queryset if note.matches_search(search)]
        queryset = queryset.filter(id__in=matching)

    return queryset.order_by('-date_created')
