"""Services for coffees business logic."""

from .exceptions import (
    CoffeesServiceError,
    CoffeeNotFoundError,
    InvalidCoffeeError,
)
from .coffee_management import (
    create_coffee,
    update_coffee,
    delete_coffee,
    get_coffee_by_id,
)
from .coffee_search import (
    search_coffees,
    get_all_roasters,
)
from .processing_methods import (
    fetch_or_create_processing_method,
    get_processing_methods_sorted,
    seed_default_processing_methods,
    record_processing_method_use,
)
from .rating_summary import (
    get_coffee_rating_summary,
)

__all__ = [
    # Exceptions
    'CoffeesServiceError',
    'CoffeeNotFoundError',
    'InvalidCoffeeError',
    # Coffee Management
    'create_coffee',
    'update_coffee',
    'delete_coffee',
    'get_coffee_by_id',
    # Coffee Search
    'search_coffees',
    'get_all_roasters',
    # Processing Methods
    'fetch_or_create_processing_method',
    'get_processing_methods_sorted',
    'seed_default_processing_methods',
    'record_processing_method_use',
    # Rating Summary
    'get_coffee_rating_summary',
]
