"""
Domain-specific exceptions for employees app.

These exceptions represent business rule violations; the project-wide
DRF exception handler converts them to HTTP responses.
"""

from apps.core.exceptions import ServiceError, NotFoundError


class EmployeesServiceError(ServiceError):
    """Base exception for all employees service errors."""
    pass


class EmployeeNotFoundError(NotFoundError, EmployeesServiceError):
    """Raised when an employee does not exist."""
    default_message = 'Employee not found'


class DuplicateEmployeeError(EmployeesServiceError):
    """Raised when the mobile number is already registered."""
    default_message = 'An employee with this mobile number already exists'


class EmployeeInUseError(EmployeesServiceError):
    """Raised when deleting an employee that deliveries or allocations reference."""
    default_message = 'Employee has delivery history; deactivate instead of deleting'


class InvalidPasswordError(EmployeesServiceError):
    """Raised when a new password is missing or too weak."""
    default_message = 'Please provide new password'
