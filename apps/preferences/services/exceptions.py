"""Domain exceptions for preferences app."""


class PreferencesServiceError(Exception):
    """Base exception for all preferences service errors."""
    pass


class UnknownEquipmentError(PreferencesServiceError):
    """Equipment is not among the default or custom items."""
    pass


class LastEnabledItemError(PreferencesServiceError):
    """At least one brewing method and one grinder must stay enabled."""
    pass
