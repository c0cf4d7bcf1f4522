"""
Domain-specific exceptions for consumers app.

Exception Hierarchy:
    ConsumersServiceError
    ├── ConsumerNotFoundError (404)
    └── ConsumerInUseError
"""

from apps.core.exceptions import ServiceError, NotFoundError


class ConsumersServiceError(ServiceError):
    """Base exception for all consumers service errors."""
    pass


class ConsumerNotFoundError(NotFoundError, ConsumersServiceError):
    """Raised when a consumer does not exist."""
    default_message = 'Consumer not found'


class ConsumerInUseError(ConsumersServiceError):
    """Raised when deleting a consumer that has recorded deliveries."""
    default_message = 'Consumer has delivery history; deactivate instead of deleting'
