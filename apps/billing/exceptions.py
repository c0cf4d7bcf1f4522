"""
Domain exceptions for billing app.

Exception Hierarchy:
    BillingServiceError (base)
    └── InvalidPeriodError

Consumer lookups raise ``apps.consumers.services.ConsumerNotFoundError``.
"""

from apps.core.exceptions import ServiceError


class BillingServiceError(ServiceError):
    """Base exception for all billing service errors."""
    pass


class InvalidPeriodError(BillingServiceError):
    """Raised when a billing period cannot be resolved (e.g. start after end)."""
    default_message = 'Invalid billing period'
