"""Domain exceptions for notes app."""


class NotesServiceError(Exception):
    """Base exception for all notes service errors."""
    pass


class BrewingNoteNotFoundError(NotesServiceError):
    """Brewing note does not exist."""
    pass


class InvalidRatingError(NotesServiceError):
    """Rating must be between 0 (unrated) and 5."""
    pass


class CoffeeNotFoundError(NotesServiceError):
    """Referenced coffee does not exist."""
    pass


class RecipeNotFoundError(NotesServiceError):
    """Referenced recipe does not exist."""
    pass
