"""
Brewing method classification and pour schedule math.

Everything here is a pure function of the values passed in. The Recipe model
exposes these as read-only properties, so derived values are recomputed on
every read and never stored.
"""

from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional, Sequence, Union

Number = Union[int, float, Decimal]

# Water-to-coffee ratio used to estimate yield when nothing better is known
FALLBACK_BREW_RATIO = 15

MAX_POURS = 10

POUR_FIELDS = (
    'bloom_amount',
    'second_pour',
    'third_pour',
    'fourth_pour',
    'fifth_pour',
    'sixth_pour',
    'seventh_pour',
    'eighth_pour',
    'ninth_pour',
    'tenth_pour',
)


class BrewingCategory(Enum):
    POUR_OVER = 'pour_over'
    ESPRESSO = 'espresso'
    FRENCH_PRESS = 'french_press'
    AEROPRESS = 'aeropress'
    UNKNOWN = 'unknown'

    @property
    def supports_pours(self) -> bool:
        return self in (
            BrewingCategory.POUR_OVER,
            BrewingCategory.FRENCH_PRESS,
            BrewingCategory.AEROPRESS,
        )

    @property
    def supports_bloom(self) -> bool:
        return self.supports_pours


# Checked in order; the first category with a matching keyword wins.
CATEGORY_KEYWORDS = (
    (BrewingCategory.POUR_OVER, ('v60', 'kalita', 'chemex')),
    (BrewingCategory.ESPRESSO, ('espresso',)),
    (BrewingCategory.FRENCH_PRESS, ('french press',)),
    (BrewingCategory.AEROPRESS, ('aeropress',)),
)


def classify_brewing_method(method: Optional[str]) -> BrewingCategory:
    """
    Classify a free-form brewing method name.

    Matching is a case-insensitive substring test, so "V60-01" and
    "Hario v60 glass" are both pour-over.

    Args:
        method: Brewing method as entered by the user

    Returns:
        BrewingCategory, UNKNOWN when nothing matches
    """
    lowered = (method or '').lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return BrewingCategory.UNKNOWN


def _is_set(amount: Optional[Number]) -> bool:
    return amount is not None and amount > 0


def recorded_pours(pours: Iterable[Optional[Number]]) -> list:
    """Drop unset and zero pours, keeping order."""
    return [amount for amount in pours if _is_set(amount)]


def count_pours(category: BrewingCategory, pours: Iterable[Optional[Number]]) -> int:
    """
    Count recorded pours for a pour-over schedule.

    Gaps are allowed: bloom, 2nd and 4th set with 3rd empty counts as 3.
    Methods other than pour-over always count 0.
    """
    if category is not BrewingCategory.POUR_OVER:
        return 0
    return len(recorded_pours(pours))


def final_weight(
    category: BrewingCategory,
    *,
    pours: Iterable[Optional[Number]],
    dose: Optional[Number],
    water_out: Optional[Number] = None,
) -> Number:
    """
    Estimate the final beverage weight in grams.

    Espresso uses the measured output. Pour-capable methods use the heaviest
    recorded pour, since pours are cumulative scale readings. Anything else
    falls back to dose times the standard 1:15 ratio.
    """
    if category is BrewingCategory.ESPRESSO:
        return water_out or 0

    recorded = recorded_pours(pours)
    if category.supports_pours and recorded:
        return max(recorded)

    return (dose or 0) * FALLBACK_BREW_RATIO


def format_weight(weight: Optional[Number]) -> str:
    if weight is None or weight <= 0:
        return '—'
    return f"{weight:.0f}g"


def is_valid_pour_sequence(
    bloom: Optional[Number],
    pours: Sequence[Optional[Number]],
) -> bool:
    """
    Check that cumulative pour weights strictly increase.

    Unset or zero entries are treated as absent and skipped, they are never
    compared against. The first set pour is compared with the bloom. Equal
    consecutive pours are invalid.

    Args:
        bloom: Bloom amount, the baseline for the first pour
        pours: Pours after the bloom, in schedule order

    Returns:
        True if the schedule is valid (an empty schedule is valid)
    """
    previous = bloom if _is_set(bloom) else 0
    for amount in recorded_pours(pours):
        if amount <= previous:
            return False
        previous = amount
    return True


def first_invalid_pour(
    bloom: Optional[Number],
    pours: Sequence[Optional[Number]],
) -> Optional[int]:
    """
    Position of the first pour that breaks the schedule.

    Positions follow the field numbering, bloom is 0 and the 2nd pour is 1.
    Returns None for a valid schedule.
    """
    previous = bloom if _is_set(bloom) else 0
    for position, amount in enumerate(pours, start=1):
        if not _is_set(amount):
            continue
        if amount <= previous:
            return position
        previous = amount
    return None


def format_brewing_method(
    method: str,
    *,
    category: BrewingCategory,
    pour_count: int,
    aeropress_type: Optional[str] = None,
) -> str:
    """
    Method label with a short schedule annotation.

    "Aeropress (Inverted)" wins over any pour suffix; pour-over recipes with
    pours get "V60-01 - 3 pours"; everything else is the bare method.
    """
    if category is BrewingCategory.AEROPRESS and aeropress_type == 'Inverted':
        return f"{method} (Inverted)"

    if category is BrewingCategory.POUR_OVER and pour_count > 0:
        noun = 'pour' if pour_count == 1 else 'pours'
        return f"{method} - {pour_count} {noun}"

    return method
