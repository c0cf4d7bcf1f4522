"""
Base exceptions shared by every service layer in the project.

Each app defines its own hierarchy in ``services/exceptions.py`` on top of
these two classes. The DRF exception handler in ``apps.core.handlers`` reads
``status_code`` to turn a service error into an HTTP response, so views stay
thin and never have to catch domain errors themselves.

Exception Hierarchy:
    ServiceError (400)
    └── NotFoundError (404)
"""


class ServiceError(Exception):
    """Base exception for all domain/service errors."""

    status_code = 400
    default_message = 'The request could not be processed.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ServiceError):
    """Raised when a referenced record does not exist."""

    status_code = 404
    default_message = 'Record not found.'
