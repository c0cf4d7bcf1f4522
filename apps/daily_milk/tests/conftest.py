from decimal import Decimal

import pytest

from apps.assignments.services import create_assignment
from apps.daily_milk.services import create_daily_entry


@pytest.fixture
def entry(employee, other_employee, entry_date):
    """Entry for 2024-01-15: 100L split 60 / 40."""
    return create_daily_entry(
        entry_date=entry_date,
        total_milk_collected=Decimal('100'),
        employee_allocations=[
            {'employee_id': employee.id, 'allocated_quantity': Decimal('60')},
            {'employee_id': other_employee.id, 'allocated_quantity': Decimal('40')},
        ],
    )


@pytest.fixture
def other_assignment(employee, other_consumer):
    """Active assignment: employee -> other_consumer."""
    return create_assignment(employee_id=employee.id, consumer_id=other_consumer.id)
