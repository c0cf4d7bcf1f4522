"""
Tests for billing aggregations and endpoints.

Deliveries are recorded through the delivery service so rates are
snapshotted exactly as in production.
"""

from datetime import date
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from apps.billing.billing import BillingQueries, resolve_period
from apps.billing.exceptions import InvalidPeriodError
from apps.consumers.services import ConsumerNotFoundError, update_consumer
from apps.daily_milk.services import record_delivery


@pytest.fixture
def january_deliveries(admin_user, employee, consumer, assignment):
    """2L, 3L and 5L to ``consumer`` at 60/L in January 2024."""
    for day, quantity in ((3, '2'), (10, '3'), (20, '5')):
        record_delivery(
            consumer_id=consumer.id,
            employee_id=employee.id,
            delivery_date=date(2024, 1, day),
            quantity=Decimal(quantity),
            principal=admin_user,
        )


class TestResolvePeriod:

    def test_month(self):
        period = resolve_period(month=2, year=2024)

        assert period.start_date == date(2024, 2, 1)
        assert period.end_date == date(2024, 2, 29)

    def test_explicit_range_wins(self):
        period = resolve_period(month=2, year=2024, start_date=date(2024, 1, 5), end_date=date(2024, 1, 9))

        assert (period.start_date, period.end_date) == (date(2024, 1, 5), date(2024, 1, 9))
        assert period.month == 1

    def test_start_after_end(self):
        with pytest.raises(InvalidPeriodError):
            resolve_period(start_date=date(2024, 2, 1), end_date=date(2024, 1, 1))

    def test_invalid_month(self):
        with pytest.raises(InvalidPeriodError):
            resolve_period(month=13, year=2024)


@pytest.mark.django_db
class TestConsumerBilling:

    def test_totals(self, consumer, january_deliveries):
        bill = BillingQueries.consumer_monthly_billing(consumer.id, resolve_period(month=1, year=2024))

        assert bill['total_quantity'] == Decimal('10')
        assert bill['total_amount'] == Decimal('600')
        assert bill['delivery_count'] == 3
        assert [d['delivery_date'].day for d in bill['deliveries']] == [3, 10, 20]

    def test_other_month_empty(self, consumer, january_deliveries):
        bill = BillingQueries.consumer_monthly_billing(consumer.id, resolve_period(month=2, year=2024))

        assert bill['total_quantity'] == Decimal('0')
        assert bill['total_amount'] == Decimal('0')

    def test_current_rate_applies_retroactively(self, consumer, january_deliveries):
        update_consumer(consumer_id=consumer.id, per_liter_rate=Decimal('70'))

        bill = BillingQueries.consumer_monthly_billing(consumer.id, resolve_period(month=1, year=2024))

        assert bill['total_amount'] == Decimal('700')

    def test_snapshot_rate_mode(self, settings, consumer, january_deliveries):
        settings.MILK_BILLING_RATE_MODE = 'snapshot'
        update_consumer(consumer_id=consumer.id, per_liter_rate=Decimal('70'))

        bill = BillingQueries.consumer_monthly_billing(consumer.id, resolve_period(month=1, year=2024))

        assert bill['total_amount'] == Decimal('600')

    def test_consumer_not_found(self):
        from uuid import uuid4

        with pytest.raises(ConsumerNotFoundError):
            BillingQueries.consumer_monthly_billing(uuid4(), resolve_period(month=1, year=2024))


@pytest.mark.django_db
class TestReports:

    def _second_consumer_delivery(self, admin_user, employee, other_consumer):
        from apps.assignments.services import create_assignment

        create_assignment(employee_id=employee.id, consumer_id=other_consumer.id)
        record_delivery(
            consumer_id=other_consumer.id,
            employee_id=employee.id,
            delivery_date=date(2024, 1, 5),
            quantity=Decimal('4'),
            principal=admin_user,
        )

    def test_monthly_report(self, admin_user, employee, other_consumer, january_deliveries):
        self._second_consumer_delivery(admin_user, employee, other_consumer)

        report = BillingQueries.monthly_report(resolve_period(month=1, year=2024))

        assert report['summary']['total_consumers'] == 2
        assert report['summary']['grand_total_quantity'] == Decimal('14')
        # 10 x 60 + 4 x 55
        assert report['summary']['grand_total_amount'] == Decimal('820')

    def test_outstanding_sorted_and_filtered(
        self, admin_user, employee, consumer, other_consumer, january_deliveries
    ):
        self._second_consumer_delivery(admin_user, employee, other_consumer)
        from apps.consumers.services import create_consumer

        create_consumer(
            full_name='No Deliveries', mobile_number='7777777777', address='-', area='North',
        )

        result = BillingQueries.outstanding(resolve_period(month=1, year=2024))

        assert result['consumer_count'] == 2
        assert [item['consumer']['id'] for item in result['outstanding_list']] == [consumer.id, other_consumer.id]
        assert result['total_outstanding'] == Decimal('820')

    def test_outstanding_skips_inactive(self, consumer, january_deliveries):
        update_consumer(consumer_id=consumer.id, is_active=False)

        result = BillingQueries.outstanding(resolve_period(month=1, year=2024))

        assert result['consumer_count'] == 0


@pytest.mark.django_db
class TestBillingAPI:

    def test_consumer_monthly(self, admin_client, consumer, january_deliveries):
        url = reverse('billing:consumer-monthly', args=[consumer.id])
        response = admin_client.get(url, {'month': 1, 'year': 2024})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['success'] is True
        assert Decimal(response.data['data']['total_amount']) == Decimal('600')
        assert response.data['data']['delivery_count'] == 3

    def test_date_range(self, admin_client, consumer, january_deliveries):
        url = reverse('billing:consumer-monthly', args=[consumer.id])
        response = admin_client.get(url, {'start_date': '2024-01-01', 'end_date': '2024-01-10'})

        assert Decimal(response.data['data']['total_quantity']) == Decimal('5')

    def test_invalid_month(self, admin_client, consumer):
        url = reverse('billing:consumer-monthly', args=[consumer.id])
        response = admin_client.get(url, {'month': 13})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_reversed_range(self, admin_client):
        response = admin_client.get(
            reverse('billing:report'), {'start_date': '2024-02-01', 'end_date': '2024-01-01'}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_report_and_outstanding(self, admin_client, january_deliveries):
        report = admin_client.get(reverse('billing:report'), {'month': 1, 'year': 2024})
        outstanding = admin_client.get(reverse('billing:outstanding'), {'month': 1, 'year': 2024})

        assert report.status_code == status.HTTP_200_OK
        assert report.data['data']['summary']['total_consumers'] == 1
        assert outstanding.data['data']['consumer_count'] == 1

    def test_employee_forbidden(self, employee_client):
        response = employee_client.get(reverse('billing:report'))

        assert response.status_code == status.HTTP_403_FORBIDDEN
