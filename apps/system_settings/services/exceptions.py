"""Domain-specific exceptions for system settings services."""

from apps.core.exceptions import ServiceError


class SettingsServiceError(ServiceError):
    """Base exception for settings services."""
    pass


class InvalidRateError(SettingsServiceError):
    """Raised when a default rate is negative or missing."""
    default_message = 'Default milk rate must be a non-negative number.'
