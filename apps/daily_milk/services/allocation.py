"""
Daily milk allocation.

Records how much milk was collected on a date and how it is split
across employees. The split may leave milk unallocated but never
allocate more than was collected.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from django.db import transaction, IntegrityError
from django.db.models import Prefetch, QuerySet

from apps.daily_milk.models import DailyMilkEntry, EmployeeAllocation
from apps.employees.models import Employee
from apps.employees.services import EmployeeNotFoundError

from .exceptions import DuplicateEntryError, OverAllocationError, DailyEntryNotFoundError

logger = logging.getLogger(__name__)


def _with_allocations(queryset: QuerySet) -> QuerySet:
    return queryset.prefetch_related(
        Prefetch(
            'allocations',
            queryset=EmployeeAllocation.objects.select_related('employee').order_by('position'),
        )
    )


@transaction.atomic
def create_daily_entry(
    *,
    entry_date: date,
    total_milk_collected: Decimal,
    employee_allocations: Iterable[Mapping]
) -> DailyMilkEntry:
    """
    Create the entry for a date with its per-employee split.

    Args:
        entry_date: Collection date (one entry per date)
        total_milk_collected: Litres collected
        employee_allocations: Items with ``employee_id`` and ``allocated_quantity``

    Raises:
        DuplicateEntryError: If the date already has an entry or an employee repeats
        EmployeeNotFoundError: If a referenced employee doesn't exist
        OverAllocationError: If the split exceeds the collected total
        ValidationError: If a quantity is negative or malformed
    """
    if DailyMilkEntry.objects.filter(entry_date=entry_date).exists():
        raise DuplicateEntryError()

    allocations = list(employee_allocations)

    employee_ids = [item['employee_id'] for item in allocations]
    if len(set(employee_ids)) != len(employee_ids):
        raise DuplicateEntryError('An employee can only be allocated once per day')

    employees = Employee.objects.in_bulk(employee_ids)
    for employee_id in employee_ids:
        if employee_id not in employees:
            raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")

    DailyMilkEntry(
        entry_date=entry_date,
        total_milk_collected=total_milk_collected,
    ).full_clean(validate_unique=False, validate_constraints=False)

    rows = [
        EmployeeAllocation(
            employee=employees[item['employee_id']],
            allocated_quantity=item['allocated_quantity'],
            remaining_quantity=item['allocated_quantity'],
            position=position,
        )
        for position, item in enumerate(allocations)
    ]
    # Entry is attached after insert
    for row in rows:
        row.full_clean(exclude=['entry'], validate_unique=False, validate_constraints=False)

    total_allocated = sum((item['allocated_quantity'] for item in allocations), Decimal('0'))
    if total_allocated > total_milk_collected:
        logger.warning(
            "Rejected entry for %s: allocated %s > collected %s",
            entry_date, total_allocated, total_milk_collected
        )
        raise OverAllocationError(total_allocated, total_milk_collected)

    try:
        with transaction.atomic():
            entry = DailyMilkEntry.objects.create(
                entry_date=entry_date,
                total_milk_collected=total_milk_collected,
            )
    except IntegrityError:
        raise DuplicateEntryError()

    for row in rows:
        row.entry = entry
    EmployeeAllocation.objects.bulk_create(rows)

    logger.info(
        "Created daily entry %s: collected %s, allocated %s across %d employees",
        entry_date, total_milk_collected, total_allocated, len(allocations)
    )
    return get_entry_by_date(entry_date=entry_date)


def get_entry_by_date(*, entry_date: date) -> DailyMilkEntry:
    """
    Raises:
        DailyEntryNotFoundError: If no entry exists for the date
    """
    try:
        return _with_allocations(DailyMilkEntry.objects).get(entry_date=entry_date)
    except DailyMilkEntry.DoesNotExist:
        raise DailyEntryNotFoundError(f"No entry found for {entry_date}")


def list_entries(
    *,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None
) -> QuerySet[DailyMilkEntry]:
    """Entries within an inclusive date range, newest first."""
    queryset = DailyMilkEntry.objects.all()

    if start_date:
        queryset = queryset.filter(entry_date__gte=start_date)
    if end_date:
        queryset = queryset.filter(entry_date__lte=end_date)

    return _with_allocations(queryset).order_by('-entry_date')
