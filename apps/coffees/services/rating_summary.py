"""Rating summary for a coffee, built from its brewing notes."""

from django.core.exceptions import ValidationError
from django.db.models import Avg, Count, Q
from uuid import UUID

from ..models import Coffee
from .exceptions import CoffeeNotFoundError


def get_coffee_rating_summary(*, coffee_id: UUID) -> dict:
    """
    Summarize how a coffee has been rated across brewing sessions.

    Unrated notes (rating 0) count as sessions but are left out of the
    average and the distribution.

    Args:
        coffee_id: Coffee UUID

    Returns:
        Dictionary with:
        - coffee_id: str
        - coffee_name: str - display name
        - brewing_notes_count: int
        - rated_notes_count: int
        - average_rating: float - rounded to 2 decimals, 0.0 when unrated
        - rating_distribution: dict - count per star (1-5)

    Raises:
        CoffeeNotFoundError: If coffee doesn't exist
    """
    try:
        coffee = Coffee.objects.get(id=coffee_id)
    except (Coffee.DoesNotExist, ValidationError):
        raise CoffeeNotFoundError(f"Coffee {coffee_id} not found")

    notes = coffee.brewing_notes.all()
    aggregates = notes.aggregate(
        total=Count('id'),
        rated=Count('id', filter=Q(rating__gt=0)),
        avg=Avg('rating', filter=Q(rating__gt=0)),
    )

    distribution = {str(star): 0 for star in range(1, 6)}
    rows = notes.filter(rating__gte=1, rating__lte=5).order_by().values('rating').annotate(count=Count('id'))
    for row in rows:
        distribution[str(row['rating'])] = row['count']

    return {
        'coffee_id': str(coffee.id),
        'coffee_name': coffee.display_name,
        'brewing_notes_count': aggregates['total'],
        'rated_notes_count': aggregates['rated'],
        'average_rating': round(float(aggregates['avg'] or 0), 2),
        'rating_distribution': distribution,
    }
