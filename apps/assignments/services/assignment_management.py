"""
Assignment management service.

Keeps ``Consumer.assigned_employee`` in step with the consumer's active
assignment. Every write locks the assignment row and the consumer row.
"""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError
from django.db.models import QuerySet
from django.utils import timezone

from apps.assignments.models import Assignment
from apps.consumers.models import Consumer
from apps.consumers.services import ConsumerNotFoundError
from apps.employees.models import Employee
from apps.employees.services import EmployeeNotFoundError

from .exceptions import AssignmentNotFoundError, DuplicateAssignmentError

logger = logging.getLogger(__name__)


def _lock_consumer(consumer_id) -> Consumer:
    try:
        return Consumer.objects.select_for_update().get(id=consumer_id)
    except (Consumer.DoesNotExist, ValidationError):
        raise ConsumerNotFoundError(f"Consumer with ID {consumer_id} not found")


def _lock_assignment(assignment_id) -> Assignment:
    try:
        return (
            Assignment.objects
            .select_for_update()
            .select_related('employee', 'consumer')
            .get(id=assignment_id)
        )
    except (Assignment.DoesNotExist, ValidationError):
        raise AssignmentNotFoundError(f"Assignment with ID {assignment_id} not found")


def _link_consumer(consumer: Consumer, employee: Employee) -> None:
    consumer.assigned_employee = employee
    consumer.save(update_fields=['assigned_employee'])


def _unlink_consumer(consumer: Consumer, employee: Employee) -> None:
    """Clear the back-reference only if it still points at ``employee``."""
    if consumer.assigned_employee_id == employee.id:
        consumer.assigned_employee = None
        consumer.save(update_fields=['assigned_employee'])


def get_assignment(*, assignment_id: UUID) -> Assignment:
    """
    Raises:
        AssignmentNotFoundError: If assignment doesn't exist
    """
    try:
        return Assignment.objects.select_related('employee', 'consumer').get(id=assignment_id)
    except (Assignment.DoesNotExist, ValidationError):
        raise AssignmentNotFoundError(f"Assignment with ID {assignment_id} not found")


def list_assignments(
    *,
    employee_id: Optional[UUID] = None,
    consumer_id: Optional[UUID] = None,
    is_active: Optional[bool] = None
) -> QuerySet[Assignment]:
    """List assignments, most recently assigned first."""
    queryset = Assignment.objects.select_related('employee', 'consumer')

    if employee_id:
        queryset = queryset.filter(employee_id=employee_id)
    if consumer_id:
        queryset = queryset.filter(consumer_id=consumer_id)
    if is_active is not None:
        queryset = queryset.filter(is_active=is_active)

    return queryset.order_by('-assigned_date', 'consumer__full_name')


def list_employee_assignments(*, employee: Employee) -> QuerySet[Assignment]:
    """Active assignments of one employee, ordered by consumer area and name."""
    return (
        Assignment.objects
        .filter(employee=employee, is_active=True)
        .select_related('consumer')
        .order_by('consumer__area', 'consumer__full_name')
    )


@transaction.atomic
def create_assignment(
    *,
    employee_id: UUID,
    consumer_id: UUID,
    daily_milk_quota: Decimal = Decimal('0')
) -> Assignment:
    """
    Assign a consumer to an employee.

    An inactive assignment for the same pair is reactivated in place with
    the new quota and today's date.

    Raises:
        EmployeeNotFoundError: If employee doesn't exist
        ConsumerNotFoundError: If consumer doesn't exist
        DuplicateAssignmentError: If the pair is already actively assigned
    """
    try:
        employee = Employee.objects.get(id=employee_id)
    except (Employee.DoesNotExist, ValidationError):
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")

    consumer = _lock_consumer(consumer_id)

    assignment = (
        Assignment.objects
        .select_for_update()
        .filter(employee=employee, consumer=consumer)
        .first()
    )

    if assignment is not None:
        if assignment.is_active:
            raise DuplicateAssignmentError()

        assignment.is_active = True
        assignment.daily_milk_quota = daily_milk_quota
        assignment.assigned_date = timezone.localdate()
        assignment.full_clean()
        assignment.save()
        logger.info("Reactivated assignment %s (%s -> %s)", assignment.id, employee.id, consumer.id)
    else:
        assignment = Assignment(
            employee=employee,
            consumer=consumer,
            daily_milk_quota=daily_milk_quota,
        )
        assignment.full_clean(validate_constraints=False)
        try:
            assignment.save()
        except IntegrityError:
            raise DuplicateAssignmentError()
        logger.info("Created assignment %s (%s -> %s)", assignment.id, employee.id, consumer.id)

    _link_consumer(consumer, employee)
    return assignment


@transaction.atomic
def update_assignment(
    *,
    assignment_id: UUID,
    daily_milk_quota: Optional[Decimal] = None,
    is_active: Optional[bool] = None
) -> Assignment:
    """
    Change an assignment's quota or active flag.

    Deactivating unlinks the consumer from the employee; reactivating
    links it again.

    Raises:
        AssignmentNotFoundError: If assignment doesn't exist
    """
    assignment = _lock_assignment(assignment_id)
    consumer = _lock_consumer(assignment.consumer_id)

    if daily_milk_quota is not None:
        assignment.daily_milk_quota = daily_milk_quota

    if is_active is not None and is_active != assignment.is_active:
        assignment.is_active = is_active
        if is_active:
            _link_consumer(consumer, assignment.employee)
        else:
            _unlink_consumer(consumer, assignment.employee)

    assignment.full_clean(validate_constraints=False)
    assignment.save()

    logger.info("Updated assignment %s (active=%s)", assignment.id, assignment.is_active)
    return assignment


@transaction.atomic
def delete_assignment(*, assignment_id: UUID) -> None:
    """
    Delete an assignment and clear the consumer's back-reference.

    Raises:
        AssignmentNotFoundError: If assignment doesn't exist
    """
    assignment = _lock_assignment(assignment_id)
    consumer = _lock_consumer(assignment.consumer_id)

    _unlink_consumer(consumer, assignment.employee)
    assignment.delete()

    logger.info("Deleted assignment %s", assignment_id)
