"""
Shared fixtures for all app test suites.

Per-app ``tests/conftest.py`` files build on these.
"""

from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User
from apps.assignments.services import create_assignment
from apps.consumers.services import create_consumer
from apps.employees.services import create_employee


def _authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    return User.objects.create_admin(
        username='admin',
        password='AdminPass123',
        name='Administrator',
    )


@pytest.fixture
def employee(db):
    """Delivery employee A (login: 9876543210 / 9876543210)."""
    return create_employee(name='Ravi Kumar', mobile_number='9876543210', assigned_area='North')


@pytest.fixture
def other_employee(db):
    """Delivery employee B."""
    return create_employee(name='Suresh Patel', mobile_number='9123456789', assigned_area='South')


@pytest.fixture
def consumer(db):
    return create_consumer(
        full_name='Anita Sharma',
        mobile_number='9988776655',
        address='12 MG Road',
        area='North',
        per_liter_rate=Decimal('60.00'),
        daily_milk_quota=Decimal('2.00'),
    )


@pytest.fixture
def other_consumer(db):
    return create_consumer(
        full_name='Vikram Singh',
        mobile_number='8877665544',
        address='4 Lake View',
        area='South',
        per_liter_rate=Decimal('55.00'),
    )


@pytest.fixture
def assignment(employee, consumer):
    """Active assignment: employee -> consumer."""
    return create_assignment(
        employee_id=employee.id,
        consumer_id=consumer.id,
        daily_milk_quota=Decimal('2.00'),
    )


@pytest.fixture
def admin_client(api_client, admin_user):
    """API client authenticated as admin."""
    return _authenticate(api_client, admin_user)


@pytest.fixture
def employee_client(employee):
    """API client authenticated as ``employee``."""
    return _authenticate(APIClient(), employee.user)


@pytest.fixture
def other_employee_client(other_employee):
    return _authenticate(APIClient(), other_employee.user)


@pytest.fixture
def entry_date():
    return date(2024, 1, 15)
