"""
Employees app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions.
"""

from .exceptions import (
    EmployeesServiceError,
    EmployeeNotFoundError,
    DuplicateEmployeeError,
    EmployeeInUseError,
    InvalidPasswordError,
)

from .employee_management import (
    get_employee,
    list_employees,
    create_employee,
    update_employee,
    deactivate_employee,
    delete_employee,
    reset_employee_password,
)


__all__ = [
    # Exceptions
    'EmployeesServiceError',
    'EmployeeNotFoundError',
    'DuplicateEmployeeError',
    'EmployeeInUseError',
    'InvalidPasswordError',

    # Employee Management
    'get_employee',
    'list_employees',
    'create_employee',
    'update_employee',
    'deactivate_employee',
    'delete_employee',
    'reset_employee_password',
]
