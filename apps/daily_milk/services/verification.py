"""End-of-day verification of an employee's allocation."""

import logging
from datetime import date
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.daily_milk.models import DailyMilkEntry, EmployeeAllocation

from .exceptions import DailyEntryNotFoundError, AllocationNotFoundError

logger = logging.getLogger(__name__)


@transaction.atomic
def verify_employee_day(*, entry_date: date, employee_id: UUID) -> EmployeeAllocation:
    """
    Mark an employee's allocation for a date as verified.

    Verification only flags the allocation; later deliveries are still
    accepted against the remaining quantity. Verifying again refreshes
    ``verified_at``.

    Raises:
        DailyEntryNotFoundError: If no entry exists for the date
        AllocationNotFoundError: If the employee has no allocation that day
    """
    try:
        entry = DailyMilkEntry.objects.get(entry_date=entry_date)
    except DailyMilkEntry.DoesNotExist:
        raise DailyEntryNotFoundError(f"No entry found for {entry_date}")

    try:
        allocation = (
            EmployeeAllocation.objects
            .select_for_update()
            .select_related('employee')
            .get(entry=entry, employee_id=employee_id)
        )
    except EmployeeAllocation.DoesNotExist:
        raise AllocationNotFoundError()

    allocation.is_verified = True
    allocation.verified_at = timezone.now()
    allocation.save(update_fields=['is_verified', 'verified_at'])

    logger.info(
        "Verified employee %s for %s (delivered %s, remaining %s)",
        employee_id, entry_date, allocation.delivered_quantity, allocation.remaining_quantity
    )
    return allocation
