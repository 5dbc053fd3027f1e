"""Services for notes business logic."""

from .exceptions import (
    NotesServiceError,
    BrewingNoteNotFoundError,
    InvalidRatingError,
    CoffeeNotFoundError,
    RecipeNotFoundError,
)
from .note_management import (
    create_brewing_note,
    update_brewing_note,
    delete_brewing_note,
    get_brewing_note_by_id,
)
from .note_search import (
    search_brewing_notes,
)

__all__ = [
    # Exceptions
    'NotesServiceError',
    'BrewingNoteNotFoundError',
    'InvalidRatingError',
    'CoffeeNotFoundError',
    'RecipeNotFoundError',
    # Note Management
    'create_brewing_note',
    'update_brewing_note',
    'delete_brewing_note',
    'get_brewing_note_by_id',
    # Note Search
    'search_brewing_notes',
]
