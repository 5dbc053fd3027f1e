"""Services for recipes business logic."""

from .exceptions import (
    RecipesServiceError,
    RecipeNotFoundError,
    InvalidPourSequenceError,
    TooManyPoursError,
)
from .recipe_management import (
    check_pour_sequence,
    create_recipe,
    update_recipe,
    delete_recipe,
    get_recipe_by_id,
    record_recipe_use,
)
from .recipe_search import (
    category_filter,
    search_recipes,
    get_most_used_recipes,
)

__all__ = [
    # Exceptions
    'RecipesServiceError',
    'RecipeNotFoundError',
    'InvalidPourSequenceError',
    'TooManyPoursError',
    # Recipe Management
    'check_pour_sequence',
    'create_recipe',
    'update_recipe',
    'delete_recipe',
    'get_recipe_by_id',
    'record_recipe_use',
    # Recipe Search
    'category_filter',
    'search_recipes',
    'get_most_used_recipes',
]
