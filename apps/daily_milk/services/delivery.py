"""
Delivery recording.

A delivery is recorded once per consumer per date, only by an employee
actively assigned to that consumer, and is charged against the employee's
remaining allocation for the date when one exists. The allocation row is
locked for the duration of the write so concurrent deliveries by the same
employee cannot overdraw it.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.assignments.models import Assignment
from apps.consumers.models import Consumer
from apps.consumers.services import ConsumerNotFoundError
from apps.daily_milk.models import DailyMilkEntry, Delivery, EmployeeAllocation
from apps.employees.models import Employee
from apps.employees.services import EmployeeNotFoundError

from .exceptions import (
    DuplicateDeliveryError,
    NotAssignedError,
    QuotaExceededError,
    DailyEntryNotFoundError,
    AllocationNotFoundError,
)

logger = logging.getLogger(__name__)


def _principal_employee_id(principal) -> UUID:
    """Employee id of an employee principal."""
    try:
        return principal.employee_profile.id
    except Employee.DoesNotExist:
        raise EmployeeNotFoundError('No employee profile for this account')


@transaction.atomic
def record_delivery(
    *,
    consumer_id: UUID,
    employee_id: Optional[UUID],
    delivery_date: date,
    quantity: Decimal,
    principal
) -> Delivery:
    """
    Record a delivery to a consumer.

    Employee principals always record as themselves; ``employee_id`` is
    only honoured for admins.

    Checks, in order: consumer exists, employee exists, an active
    assignment links them, no delivery yet for (consumer, date), and the
    quantity fits the employee's remaining allocation for the date. A date
    without an entry, or an entry without an allocation for the employee,
    skips the quota check.

    Raises:
        ConsumerNotFoundError
        EmployeeNotFoundError
        NotAssignedError
        DuplicateDeliveryError
        ValidationError: If the quantity is negative or malformed
        QuotaExceededError
    """
    if principal.is_employee:
        employee_id = _principal_employee_id(principal)

    try:
        consumer = Consumer.objects.get(id=consumer_id)
    except (Consumer.DoesNotExist, ValidationError):
        raise ConsumerNotFoundError(f"Consumer with ID {consumer_id} not found")

    try:
        employee = Employee.objects.get(id=employee_id)
    except (Employee.DoesNotExist, ValidationError, ValueError):
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")

    if not Assignment.objects.filter(employee=employee, consumer=consumer, is_active=True).exists():
        raise NotAssignedError()

    if Delivery.objects.filter(consumer=consumer, delivery_date=delivery_date).exists():
        raise DuplicateDeliveryError()

    fields = {
        'consumer': consumer,
        'employee': employee,
        'delivery_date': delivery_date,
        'quantity_delivered': quantity,
        'per_liter_rate': consumer.per_liter_rate,
    }
    # Must pass before the allocation is touched
    Delivery(**fields).full_clean(validate_unique=False, validate_constraints=False)

    allocation = (
        EmployeeAllocation.objects
        .select_for_update()
        .filter(entry__entry_date=delivery_date, employee=employee)
        .first()
    )

    if allocation is not None:
        if quantity > allocation.remaining_quantity:
            logger.warning(
                "Quota exceeded for employee %s on %s: remaining %s, attempted %s",
                employee.id, delivery_date, allocation.remaining_quantity, quantity
            )
            raise QuotaExceededError(allocation.remaining_quantity, quantity)

        allocation.remaining_quantity -= quantity
        allocation.delivered_quantity += quantity
        allocation.save(update_fields=['remaining_quantity', 'delivered_quantity'])
    else:
        logger.info("No allocation for employee %s on %s; recording without quota check", employee.id, delivery_date)

    try:
        with transaction.atomic():
            delivery = Delivery.objects.create(**fields)
    except IntegrityError:
        # Outer transaction rolls back the allocation decrement
        raise DuplicateDeliveryError()

    logger.info(
        "Recorded delivery %s: %sL to consumer %s by employee %s on %s",
        delivery.id, quantity, consumer.id, employee.id, delivery_date
    )
    return delivery


def list_deliveries(
    *,
    principal,
    employee_id: Optional[UUID] = None,
    consumer_id: Optional[UUID] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None
) -> QuerySet[Delivery]:
    """
    Deliveries visible to ``principal``, newest first.

    Employees only ever see their own deliveries; ``employee_id`` is
    ignored for them.
    """
    queryset = Delivery.objects.select_related('consumer', 'employee')

    if principal.is_employee:
        queryset = queryset.filter(employee_id=_principal_employee_id(principal))
    elif employee_id:
        queryset = queryset.filter(employee_id=employee_id)

    if consumer_id:
        queryset = queryset.filter(consumer_id=consumer_id)
    if start_date:
        queryset = queryset.filter(delivery_date__gte=start_date)
    if end_date:
        queryset = queryset.filter(delivery_date__lte=end_date)

    return queryset.order_by('-delivery_date', '-recorded_at')


def get_employee_quota(*, employee: Employee, quota_date: date) -> dict:
    """
    The employee's allocation figures for a date.

    Raises:
        DailyEntryNotFoundError: If no entry exists for the date
        AllocationNotFoundError: If the employee has no allocation that day
    """
    allocation = (
        EmployeeAllocation.objects
        .select_related('entry')
        .filter(entry__entry_date=quota_date, employee=employee)
        .first()
    )

    if allocation is None:
        if not DailyMilkEntry.objects.filter(entry_date=quota_date).exists():
            raise DailyEntryNotFoundError()
        raise AllocationNotFoundError('No allocation found for you on this date')

    return {
        'date': quota_date,
        'allocated_quantity': allocation.allocated_quantity,
        'delivered_quantity': allocation.delivered_quantity,
        'remaining_quantity': allocation.remaining_quantity,
        'is_verified': allocation.is_verified,
    }
