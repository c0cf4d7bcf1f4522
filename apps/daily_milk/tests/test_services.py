"""
Service layer tests for the daily milk workflow.

Tests cover:
- Allocation limits and one entry per date
- Delivery preconditions, quota boundary and duplicate protection
- Verification
- The full day from allocation to verification
"""

from datetime import date
from decimal import Decimal
from unittest.mock import patch
from uuid import uuid4

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from apps.assignments.services import create_assignment, update_assignment
from apps.consumers.services import ConsumerNotFoundError
from apps.daily_milk.models import DailyMilkEntry, Delivery, EmployeeAllocation
from apps.daily_milk.services import (
    create_daily_entry,
    get_entry_by_date,
    list_entries,
    record_delivery,
    list_deliveries,
    get_employee_quota,
    verify_employee_day,
)
from apps.daily_milk.services.exceptions import (
    DailyEntryNotFoundError,
    AllocationNotFoundError,
    DuplicateEntryError,
    OverAllocationError,
    DuplicateDeliveryError,
    NotAssignedError,
    QuotaExceededError,
)
from apps.employees.services import EmployeeNotFoundError


def _alloc(employee, quantity):
    return {'employee_id': employee.id, 'allocated_quantity': Decimal(quantity)}


# =============================================================================
# Allocation Engine
# =============================================================================

@pytest.mark.django_db
class TestCreateDailyEntry:

    def test_allocation_within_total(self, employee, other_employee, entry_date):
        entry = create_daily_entry(
            entry_date=entry_date,
            total_milk_collected=Decimal('100'),
            employee_allocations=[_alloc(employee, '60'), _alloc(other_employee, '40')],
        )

        allocations = list(entry.allocations.all())
        assert [a.employee_id for a in allocations] == [employee.id, other_employee.id]
        assert allocations[0].remaining_quantity == Decimal('60')
        assert allocations[0].delivered_quantity == Decimal('0')
        assert entry.is_fully_allocated

    def test_over_allocation_rejected(self, employee, other_employee, entry_date):
        with pytest.raises(OverAllocationError) as exc_info:
            create_daily_entry(
                entry_date=entry_date,
                total_milk_collected=Decimal('100'),
                employee_allocations=[_alloc(employee, '60'), _alloc(other_employee, '50')],
            )

        assert '110' in exc_info.value.message
        assert '100' in exc_info.value.message
        assert not EmployeeAllocation.objects.exists()

    def test_partial_allocation_allowed(self, employee, entry_date):
        entry = create_daily_entry(
            entry_date=entry_date,
            total_milk_collected=Decimal('100'),
            employee_allocations=[_alloc(employee, '30')],
        )

        assert entry.total_allocated == Decimal('30')
        assert not entry.is_fully_allocated

    def test_second_entry_same_date_rejected(self, entry, employee, entry_date):
        with pytest.raises(DuplicateEntryError):
            create_daily_entry(
                entry_date=entry_date,
                total_milk_collected=Decimal('1'),
                employee_allocations=[_alloc(employee, '1')],
            )

    def test_concurrent_insert_maps_to_duplicate(self, employee, entry_date):
        """A unique-key race on insert surfaces as DuplicateEntryError."""
        with patch.object(
            DailyMilkEntry.objects, 'create',
            side_effect=IntegrityError('duplicate key'),
        ):
            with pytest.raises(DuplicateEntryError):
                create_daily_entry(
                    entry_date=entry_date,
                    total_milk_collected=Decimal('10'),
                    employee_allocations=[_alloc(employee, '10')],
                )

    def test_employee_listed_twice(self, employee, entry_date):
        with pytest.raises(DuplicateEntryError):
            create_daily_entry(
                entry_date=entry_date,
                total_milk_collected=Decimal('100'),
                employee_allocations=[_alloc(employee, '10'), _alloc(employee, '20')],
            )

    def test_unknown_employee(self, entry_date):
        with pytest.raises(EmployeeNotFoundError):
            create_daily_entry(
                entry_date=entry_date,
                total_milk_collected=Decimal('100'),
                employee_allocations=[{'employee_id': uuid4(), 'allocated_quantity': Decimal('10')}],
            )

    def test_negative_allocation_rejected(self, employee, other_employee, entry_date):
        """A negative share cannot offset another one past the collected total."""
        with pytest.raises(ValidationError):
            create_daily_entry(
                entry_date=entry_date,
                total_milk_collected=Decimal('50'),
                employee_allocations=[_alloc(employee, '-10'), _alloc(other_employee, '60')],
            )

        assert not DailyMilkEntry.objects.exists()
        assert not EmployeeAllocation.objects.exists()

    def test_negative_total_rejected(self, employee, entry_date):
        with pytest.raises(ValidationError):
            create_daily_entry(
                entry_date=entry_date,
                total_milk_collected=Decimal('-1'),
                employee_allocations=[],
            )

        assert not DailyMilkEntry.objects.exists()

    def test_get_entry_by_date(self, entry, entry_date):
        assert get_entry_by_date(entry_date=entry_date) == entry

        with pytest.raises(DailyEntryNotFoundError):
            get_entry_by_date(entry_date=date(2024, 1, 16))

    def test_allocations_by_employee(self, entry, employee, other_employee):
        by_employee = entry.allocations_by_employee()

        assert list(by_employee) == [employee.id, other_employee.id]
        assert by_employee[other_employee.id].allocated_quantity == Decimal('40')

    def test_list_entries_date_range(self, employee):
        for day in (10, 11, 12):
            create_daily_entry(
                entry_date=date(2024, 1, day),
                total_milk_collected=Decimal('5'),
                employee_allocations=[_alloc(employee, '5')],
            )

        entries = list_entries(start_date=date(2024, 1, 11))

        assert [e.entry_date.day for e in entries] == [12, 11]


# =============================================================================
# Delivery Recorder
# =============================================================================

@pytest.mark.django_db
class TestRecordDelivery:

    def _deliver(self, principal, consumer, employee, quantity, delivery_date=date(2024, 1, 15)):
        return record_delivery(
            consumer_id=consumer.id,
            employee_id=employee.id if employee else None,
            delivery_date=delivery_date,
            quantity=Decimal(quantity),
            principal=principal,
        )

    def test_delivery_decrements_allocation(self, admin_user, entry, employee, consumer, assignment):
        delivery = self._deliver(admin_user, consumer, employee, '20')

        allocation = EmployeeAllocation.objects.get(entry=entry, employee=employee)
        assert allocation.delivered_quantity == Decimal('20')
        assert allocation.remaining_quantity == Decimal('40')
        assert delivery.per_liter_rate == consumer.per_liter_rate

    def test_quota_boundary_exact(self, admin_user, employee, consumer, assignment, entry_date):
        create_daily_entry(
            entry_date=entry_date,
            total_milk_collected=Decimal('10'),
            employee_allocations=[_alloc(employee, '10')],
        )

        self._deliver(admin_user, consumer, employee, '10')

        allocation = EmployeeAllocation.objects.get(employee=employee)
        assert allocation.remaining_quantity == Decimal('0')

    def test_quota_boundary_exceeded(self, admin_user, employee, consumer, assignment, entry_date):
        create_daily_entry(
            entry_date=entry_date,
            total_milk_collected=Decimal('10'),
            employee_allocations=[_alloc(employee, '10')],
        )

        with pytest.raises(QuotaExceededError) as exc_info:
            self._deliver(admin_user, consumer, employee, '10.01')

        assert exc_info.value.remaining == Decimal('10')
        assert exc_info.value.attempted == Decimal('10.01')
        assert not Delivery.objects.exists()

    def test_negative_quantity_leaves_quota_untouched(
        self, admin_user, employee, consumer, assignment, entry_date
    ):
        create_daily_entry(
            entry_date=entry_date,
            total_milk_collected=Decimal('10'),
            employee_allocations=[_alloc(employee, '10')],
        )

        with pytest.raises(ValidationError):
            self._deliver(admin_user, consumer, employee, '-5')

        allocation = EmployeeAllocation.objects.get(employee=employee)
        assert allocation.remaining_quantity == Decimal('10')
        assert allocation.delivered_quantity == Decimal('0')
        assert not Delivery.objects.exists()

    def test_duplicate_delivery_same_consumer_and_date(
        self, admin_user, entry, employee, other_employee, consumer, assignment
    ):
        create_assignment(employee_id=other_employee.id, consumer_id=consumer.id)
        self._deliver(admin_user, consumer, employee, '2')

        with pytest.raises(DuplicateDeliveryError):
            self._deliver(admin_user, consumer, other_employee, '1')

        assert Delivery.objects.count() == 1

    def test_duplicate_insert_race_rolls_back_decrement(self, admin_user, entry, employee, consumer, assignment):
        """A unique-key race on insert leaves the allocation untouched."""
        with patch.object(
            Delivery.objects, 'create',
            side_effect=IntegrityError('duplicate key'),
        ):
            with pytest.raises(DuplicateDeliveryError):
                self._deliver(admin_user, consumer, employee, '5')

        allocation = EmployeeAllocation.objects.get(entry=entry, employee=employee)
        assert allocation.remaining_quantity == Decimal('60')

    def test_not_assigned(self, admin_user, entry, other_employee, consumer, assignment):
        with pytest.raises(NotAssignedError):
            self._deliver(admin_user, consumer, other_employee, '1')

    def test_inactive_assignment_not_accepted(self, admin_user, entry, employee, consumer, assignment):
        update_assignment(assignment_id=assignment.id, is_active=False)

        with pytest.raises(NotAssignedError):
            self._deliver(admin_user, consumer, employee, '1')

    def test_unknown_consumer_checked_first(self, admin_user):
        with pytest.raises(ConsumerNotFoundError):
            record_delivery(
                consumer_id=uuid4(),
                employee_id=uuid4(),
                delivery_date=date(2024, 1, 15),
                quantity=Decimal('1'),
                principal=admin_user,
            )

    def test_unknown_employee(self, admin_user, consumer):
        with pytest.raises(EmployeeNotFoundError):
            record_delivery(
                consumer_id=consumer.id,
                employee_id=uuid4(),
                delivery_date=date(2024, 1, 15),
                quantity=Decimal('1'),
                principal=admin_user,
            )

    def test_no_entry_records_without_quota(self, admin_user, employee, consumer, assignment):
        delivery = self._deliver(admin_user, consumer, employee, '500', delivery_date=date(2024, 2, 1))

        assert delivery.quantity_delivered == Decimal('500')

    def test_no_allocation_for_employee_records_without_quota(
        self, admin_user, employee, other_employee, consumer, entry_date
    ):
        create_daily_entry(
            entry_date=entry_date,
            total_milk_collected=Decimal('10'),
            employee_allocations=[_alloc(employee, '10')],
        )
        create_assignment(employee_id=other_employee.id, consumer_id=consumer.id)

        delivery = self._deliver(admin_user, consumer, other_employee, '25')

        assert delivery.employee == other_employee
        assert EmployeeAllocation.objects.get(employee=employee).remaining_quantity == Decimal('10')

    def test_employee_principal_records_as_self(
        self, entry, employee, other_employee, consumer, assignment
    ):
        """The supplied employee id is ignored for employee callers."""
        delivery = self._deliver(employee.user, consumer, other_employee, '5')

        assert delivery.employee == employee

    def test_delivery_after_verification_still_checked(
        self, admin_user, entry, employee, consumer, assignment, entry_date
    ):
        verify_employee_day(entry_date=entry_date, employee_id=employee.id)

        self._deliver(admin_user, consumer, employee, '60')

        allocation = EmployeeAllocation.objects.get(entry=entry, employee=employee)
        assert allocation.remaining_quantity == Decimal('0')
        assert allocation.is_verified


@pytest.mark.django_db
class TestListDeliveries:

    def test_employee_sees_only_own(
        self, admin_user, employee, other_employee, consumer, other_consumer, assignment
    ):
        create_assignment(employee_id=other_employee.id, consumer_id=other_consumer.id)
        record_delivery(
            consumer_id=consumer.id, employee_id=employee.id,
            delivery_date=date(2024, 1, 15), quantity=Decimal('2'), principal=admin_user,
        )
        record_delivery(
            consumer_id=other_consumer.id, employee_id=other_employee.id,
            delivery_date=date(2024, 1, 15), quantity=Decimal('3'), principal=admin_user,
        )

        own = list_deliveries(principal=employee.user, employee_id=other_employee.id)
        assert [d.employee_id for d in own] == [employee.id]

        assert list_deliveries(principal=admin_user).count() == 2
        assert list_deliveries(principal=admin_user, employee_id=other_employee.id).count() == 1

    def test_date_range(self, admin_user, employee, consumer, assignment):
        for day in (1, 2, 3):
            record_delivery(
                consumer_id=consumer.id, employee_id=employee.id,
                delivery_date=date(2024, 3, day), quantity=Decimal('1'), principal=admin_user,
            )

        deliveries = list_deliveries(
            principal=admin_user, start_date=date(2024, 3, 2), end_date=date(2024, 3, 3)
        )

        assert [d.delivery_date.day for d in deliveries] == [3, 2]


@pytest.mark.django_db
class TestEmployeeQuota:

    def test_quota(self, entry, employee, entry_date):
        quota = get_employee_quota(employee=employee, quota_date=entry_date)

        assert quota['allocated_quantity'] == Decimal('60')
        assert quota['remaining_quantity'] == Decimal('60')
        assert quota['is_verified'] is False

    def test_no_entry(self, employee):
        with pytest.raises(DailyEntryNotFoundError):
            get_employee_quota(employee=employee, quota_date=date(2030, 1, 1))

    def test_no_allocation(self, employee, other_employee, entry_date):
        create_daily_entry(
            entry_date=entry_date,
            total_milk_collected=Decimal('10'),
            employee_allocations=[_alloc(employee, '10')],
        )

        with pytest.raises(AllocationNotFoundError):
            get_employee_quota(employee=other_employee, quota_date=entry_date)


# =============================================================================
# Verification
# =============================================================================

@pytest.mark.django_db
class TestVerification:

    def test_verify(self, entry, employee, entry_date):
        allocation = verify_employee_day(entry_date=entry_date, employee_id=employee.id)

        assert allocation.is_verified
        assert allocation.verified_at is not None

    def test_verify_twice_refreshes_timestamp(self, entry, employee, entry_date):
        first = verify_employee_day(entry_date=entry_date, employee_id=employee.id).verified_at
        second = verify_employee_day(entry_date=entry_date, employee_id=employee.id).verified_at

        assert second >= first

    def test_verify_no_entry(self, employee):
        with pytest.raises(DailyEntryNotFoundError):
            verify_employee_day(entry_date=date(2030, 1, 1), employee_id=employee.id)

    def test_verify_not_allocated(self, entry, entry_date):
        with pytest.raises(AllocationNotFoundError):
            verify_employee_day(entry_date=entry_date, employee_id=uuid4())


# =============================================================================
# Full day
# =============================================================================

@pytest.mark.django_db
class TestFullDay:

    def test_allocate_deliver_verify(self, admin_user, employee, consumer, other_consumer, assignment, other_assignment):
        day = date(2024, 1, 15)
        create_daily_entry(
            entry_date=day,
            total_milk_collected=Decimal('50'),
            employee_allocations=[_alloc(employee, '50')],
        )

        record_delivery(
            consumer_id=consumer.id, employee_id=employee.id,
            delivery_date=day, quantity=Decimal('20'), principal=admin_user,
        )
        quota = get_employee_quota(employee=employee, quota_date=day)
        assert quota['delivered_quantity'] == Decimal('20')
        assert quota['remaining_quantity'] == Decimal('30')

        with pytest.raises(QuotaExceededError):
            record_delivery(
                consumer_id=other_consumer.id, employee_id=employee.id,
                delivery_date=day, quantity=Decimal('35'), principal=admin_user,
            )

        allocation = verify_employee_day(entry_date=day, employee_id=employee.id)
        assert allocation.is_verified is True
        assert allocation.remaining_quantity == Decimal('30')


@pytest.mark.django_db
class TestSampleDataCommand:

    def test_creates_consistent_data(self):
        from django.core.management import call_command

        call_command('create_sample_data', '--days', '2')

        assert DailyMilkEntry.objects.count() == 2
        for allocation in EmployeeAllocation.objects.all():
            assert allocation.remaining_quantity >= 0
            assert allocation.delivered_quantity + allocation.remaining_quantity == allocation.allocated_quantity

    def test_rerun_is_harmless(self):
        from django.core.management import call_command

        call_command('create_sample_data', '--days', '1')
        call_command('create_sample_data', '--days', '1')

        assert DailyMilkEntry.objects.count() == 1
