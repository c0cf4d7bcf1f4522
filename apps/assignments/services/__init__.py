"""
Assignments app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions.
"""

from .exceptions import (
    AssignmentsServiceError,
    AssignmentNotFoundError,
    DuplicateAssignmentError,
)

from .assignment_management import (
    get_assignment,
    list_assignments,
    list_employee_assignments,
    create_assignment,
    update_assignment,
    delete_assignment,
)


__all__ = [
    # Exceptions
    'AssignmentsServiceError',
    'AssignmentNotFoundError',
    'DuplicateAssignmentError',

    # Assignment Management
    'get_assignment',
    'list_assignments',
    'list_employee_assignments',
    'create_assignment',
    'update_assignment',
    'delete_assignment',
]
