"""Fallback text for blank record fields, resolved when a record is shown."""

from typing import Any, Optional

UNKNOWN_COFFEE = 'Unknown Coffee'
UNKNOWN_ROASTER = 'Unknown Roaster'
UNKNOWN_RECIPE = 'Unknown Recipe'
UNKNOWN_METHOD = 'Unknown Method'
UNKNOWN_GRINDER = 'Unknown Grinder'
UNKNOWN_ORIGIN = 'Unknown Origin'
UNKNOWN_PROCESSING = 'Unknown Processing'
UNKNOWN_ROAST = 'Unknown Roast'


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def or_default(value: Optional[str], default: str) -> str:
    """Return value unless it is None or whitespace."""
    return default if is_blank(value) else value
