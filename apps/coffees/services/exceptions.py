"""Domain-specific exceptions for coffees services."""


class CoffeesServiceError(Exception):
    """Base exception for coffees services."""
    pass


class CoffeeNotFoundError(CoffeesServiceError):
    """Raised when coffee does not exist."""
    pass


class InvalidCoffeeError(CoffeesServiceError):
    """Raised when coffee data is incomplete."""
    pass
