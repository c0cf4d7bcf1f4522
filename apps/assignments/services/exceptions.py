"""
Domain-specific exceptions for assignments app.

Exception Hierarchy:
    AssignmentsServiceError
    ├── AssignmentNotFoundError (404)
    └── DuplicateAssignmentError
"""

from apps.core.exceptions import ServiceError, NotFoundError


class AssignmentsServiceError(ServiceError):
    """Base exception for all assignments service errors."""
    pass


class AssignmentNotFoundError(NotFoundError, AssignmentsServiceError):
    """Raised when an assignment does not exist."""
    default_message = 'Assignment not found'


class DuplicateAssignmentError(AssignmentsServiceError):
    """Raised when the employee is already actively assigned to the consumer."""
    default_message = 'This consumer is already assigned to this employee'
