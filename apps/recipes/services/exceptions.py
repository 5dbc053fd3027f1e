"""Domain exceptions for recipes app."""


class RecipesServiceError(Exception):
    """Base exception for all recipes service errors."""
    pass


class RecipeNotFoundError(RecipesServiceError):
    """Recipe does not exist."""
    pass


class InvalidPourSequenceError(RecipesServiceError):
    """Pours must strictly increase in cumulative weight."""
    pass


class TooManyPoursError(RecipesServiceError):
    """A recipe holds at most ten pours including the bloom."""
    pass
