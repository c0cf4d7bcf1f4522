"""
Employee management service.

Keeps the Employee profile and its login account in step: creation,
mobile-number changes, activation and deletion always touch both rows
inside one transaction.
"""

import logging
from typing import Optional
from uuid import UUID

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError
from django.db.models import ProtectedError, Q, QuerySet

from apps.accounts.models import Role
from apps.employees.models import Employee

from .exceptions import (
    EmployeeNotFoundError,
    DuplicateEmployeeError,
    EmployeeInUseError,
    InvalidPasswordError,
)

User = get_user_model()
logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('name', 'mobile_number', 'assigned_area', 'is_active')


def get_employee(*, employee_id: UUID) -> Employee:
    """
    Get an employee by ID.

    Raises:
        EmployeeNotFoundError: If employee doesn't exist
    """
    try:
        return Employee.objects.select_related('user').get(id=employee_id)
    except (Employee.DoesNotExist, ValidationError):
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")


def list_employees(
    *,
    search: Optional[str] = None,
    is_active: Optional[bool] = None
) -> QuerySet[Employee]:
    """
    List employees, newest first.

    Args:
        search: Case-insensitive match on name or mobile number
        is_active: Filter by active flag when given
    """
    queryset = Employee.objects.select_related('user')

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) | Q(mobile_number__icontains=search)
        )
    if is_active is not None:
        queryset = queryset.filter(is_active=is_active)

    return queryset.order_by('-created_at')


@transaction.atomic
def create_employee(
    *,
    name: str,
    mobile_number: str,
    assigned_area: str = '',
    password: Optional[str] = None
) -> Employee:
    """
    Create an employee together with its login account.

    The password defaults to the mobile number when not provided.

    Raises:
        DuplicateEmployeeError: If the mobile number is already taken
        ValidationError: If a field fails model validation
    """
    if Employee.objects.filter(mobile_number=mobile_number).exists() or \
            User.objects.filter(username=mobile_number).exists():
        raise DuplicateEmployeeError()

    employee = Employee(
        name=name,
        mobile_number=mobile_number,
        assigned_area=assigned_area or '',
    )
    # Validate before the login account exists; user is attached below
    employee.full_clean(exclude=['user'])

    try:
        user = User.objects.create_user(
            username=mobile_number,
            password=password or mobile_number,
            name=name,
            role=Role.EMPLOYEE,
        )
        employee.user = user
        employee.save()
    except IntegrityError:
        raise DuplicateEmployeeError()

    logger.info("Created employee %s (%s)", employee.id, employee.mobile_number)
    return employee


@transaction.atomic
def update_employee(*, employee_id: UUID, **fields) -> Employee:
    """
    Update employee details.

    Password is never changed here (see ``reset_employee_password``).
    ``is_active`` and ``mobile_number`` are mirrored onto the login account.

    Raises:
        EmployeeNotFoundError: If employee doesn't exist
        DuplicateEmployeeError: If the new mobile number is taken
        ValidationError: If a field fails model validation
    """
    try:
        employee = (
            Employee.objects
            .select_for_update()
            .select_related('user')
            .get(id=employee_id)
        )
    except (Employee.DoesNotExist, ValidationError):
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")

    changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    for key, value in changes.items():
        setattr(employee, key, value)

    if 'mobile_number' in changes:
        taken = (
            Employee.objects.filter(mobile_number=employee.mobile_number).exclude(pk=employee.pk).exists()
            or User.objects.filter(username=employee.mobile_number).exclude(pk=employee.user_id).exists()
        )
        if taken:
            raise DuplicateEmployeeError()

    employee.full_clean()

    try:
        employee.save()
    except IntegrityError:
        raise DuplicateEmployeeError()

    user = employee.user
    user.username = employee.mobile_number
    user.name = employee.name
    user.is_active = employee.is_active
    user.save(update_fields=['username', 'name', 'is_active'])

    logger.info("Updated employee %s: %s", employee.id, sorted(changes))
    return employee


def deactivate_employee(*, employee_id: UUID) -> Employee:
    """Deactivate an employee (and its login) without touching history."""
    return update_employee(employee_id=employee_id, is_active=False)


@transaction.atomic
def delete_employee(*, employee_id: UUID) -> None:
    """
    Delete an employee and its login account.

    Active assignments are removed with the employee; deliveries and daily
    allocations are protected.

    Raises:
        EmployeeNotFoundError: If employee doesn't exist
        EmployeeInUseError: If deliveries or allocations reference the employee
    """
    employee = get_employee(employee_id=employee_id)
    user = employee.user

    try:
        employee.delete()
    except ProtectedError:
        raise EmployeeInUseError()

    user.delete()
    logger.info("Deleted employee %s", employee_id)


@transaction.atomic
def reset_employee_password(*, employee_id: UUID, new_password: str) -> None:
    """
    Set a new password on the employee's login account.

    Raises:
        EmployeeNotFoundError: If employee doesn't exist
        InvalidPasswordError: If the password is empty or fails validation
    """
    if not new_password:
        raise InvalidPasswordError()

    employee = get_employee(employee_id=employee_id)
    user = employee.user

    try:
        validate_password(new_password, user=user)
    except ValidationError as e:
        raise InvalidPasswordError(' '.join(e.messages))

    user.set_password(new_password)
    user.save(update_fields=['password'])
    logger.info("Password reset for employee %s", employee_id)
