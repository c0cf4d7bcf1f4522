"""
Billing Module
==============

Read-only period totals computed from recorded deliveries.

Classes:
    BillingPeriod: Resolved inclusive date range plus its month/year label.
    BillingQueries: Static methods for consumer bills, the monthly report
        and outstanding amounts.

Rate policy:
    ``settings.MILK_BILLING_RATE_MODE`` selects how litres are priced.

    - ``current`` (default): every delivery in the period is priced at the
      consumer's rate at query time, so a rate change re-prices past
      deliveries.
    - ``snapshot``: each delivery is priced at the rate stored on it when
      it was recorded.

Example::

    from apps.billing.billing import BillingQueries, resolve_period

    period = resolve_period(month=1, year=2024)
    bill = BillingQueries.consumer_monthly_billing(consumer_id, period)
    print(bill['total_quantity'], bill['total_amount'])
"""

import calendar
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db.models import Count, DecimalField, ExpressionWrapper, F, Q, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from apps.consumers.models import Consumer
from apps.consumers.services import ConsumerNotFoundError
from apps.daily_milk.models import Delivery

from .exceptions import InvalidPeriodError

RATE_MODE_CURRENT = 'current'
RATE_MODE_SNAPSHOT = 'snapshot'

CENT = Decimal('0.01')
ZERO = Decimal('0')

_decimal = DecimalField(max_digits=14, decimal_places=4)


@dataclass(frozen=True)
class BillingPeriod:
    start_date: date
    end_date: date
    month: int
    year: int

    def as_dict(self):
        return {
            'month': self.month,
            'year': self.year,
            'start_date': self.start_date,
            'end_date': self.end_date,
        }


def resolve_period(
    month: Optional[int] = None,
    year: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> BillingPeriod:
    """
    Resolve query parameters to an inclusive date range.

    An explicit ``start_date`` + ``end_date`` pair wins; otherwise the
    calendar month ``month``/``year`` is used, each defaulting to today's.

    Raises:
        InvalidPeriodError: If start is after end or the month is out of range
    """
    if start_date and end_date:
        if start_date > end_date:
            raise InvalidPeriodError('start_date must not be after end_date')
        return BillingPeriod(start_date, end_date, start_date.month, start_date.year)

    today = timezone.localdate()
    month = month or today.month
    year = year or today.year

    if not 1 <= month <= 12:
        raise InvalidPeriodError(f"Invalid month: {month}")

    last_day = calendar.monthrange(year, month)[1]
    return BillingPeriod(date(year, month, 1), date(year, month, last_day), month, year)


def _rate_mode():
    return getattr(settings, 'MILK_BILLING_RATE_MODE', RATE_MODE_CURRENT)


def _money(value) -> Decimal:
    return Decimal(value).quantize(CENT)


def _consumer_summary(consumer, include_rate=True):
    summary = {
        'id': consumer.id,
        'full_name': consumer.full_name,
        'mobile_number': consumer.mobile_number,
        'address': consumer.address,
        'area': consumer.area,
    }
    if include_rate:
        summary['per_liter_rate'] = consumer.per_liter_rate
    return summary


def _delivery_row(delivery):
    return {
        'id': delivery.id,
        'delivery_date': delivery.delivery_date,
        'quantity_delivered': delivery.quantity_delivered,
        'per_liter_rate': delivery.per_liter_rate,
        'employee': {
            'id': delivery.employee_id,
            'name': delivery.employee.name,
        },
    }


def _price(deliveries, consumer) -> Decimal:
    """Amount for ``deliveries`` of one consumer under the configured rate mode."""
    if _rate_mode() == RATE_MODE_SNAPSHOT:
        return _money(sum(
            (d.quantity_delivered * d.per_liter_rate for d in deliveries), ZERO
        ))
    total_quantity = sum((d.quantity_delivered for d in deliveries), ZERO)
    return _money(total_quantity * consumer.per_liter_rate)


class BillingQueries:
    """
    Billing aggregations over the Delivery table.

    Methods:
        consumer_monthly_billing: One consumer's bill for a period.
        monthly_report: Every billed consumer for a period with grand totals.
        outstanding: Active consumers with a non-zero amount, largest first.

    Note:
        All methods return plain dictionaries suitable for JSON responses.
    """

    @staticmethod
    def consumer_monthly_billing(consumer_id, period: BillingPeriod):
        """
        Bill one consumer for ``period``.

        Returns:
            dict: ``consumer``, ``period``, ``deliveries`` (oldest first),
            ``total_quantity``, ``total_amount`` and ``delivery_count``.

        Raises:
            ConsumerNotFoundError: If consumer doesn't exist
        """
        try:
            consumer = Consumer.objects.get(id=consumer_id)
        except (Consumer.DoesNotExist, ValidationError):
            raise ConsumerNotFoundError(f"Consumer with ID {consumer_id} not found")

        deliveries = list(
            Delivery.objects
            .filter(
                consumer=consumer,
                delivery_date__gte=period.start_date,
                delivery_date__lte=period.end_date,
            )
            .select_related('employee')
            .order_by('delivery_date')
        )

        return {
            'consumer': _consumer_summary(consumer),
            'period': period.as_dict(),
            'deliveries': [_delivery_row(d) for d in deliveries],
            'total_quantity': sum((d.quantity_delivered for d in deliveries), ZERO),
            'total_amount': _price(deliveries, consumer),
            'delivery_count': len(deliveries),
        }

    @staticmethod
    def monthly_report(period: BillingPeriod):
        """
        Bill every consumer with deliveries in ``period``.

        Returns:
            dict: ``period``, ``consumer_billing`` (one group per consumer,
            ordered by name) and ``summary`` with ``total_consumers``,
            ``grand_total_quantity`` and ``grand_total_amount``.
        """
        deliveries = (
            Delivery.objects
            .filter(delivery_date__gte=period.start_date, delivery_date__lte=period.end_date)
            .select_related('consumer', 'employee')
            .order_by('consumer__full_name', 'consumer_id', 'delivery_date')
        )

        grouped = {}
        for delivery in deliveries:
            grouped.setdefault(delivery.consumer_id, (delivery.consumer, []))[1].append(delivery)

        report = []
        for consumer, rows in grouped.values():
            report.append({
                'consumer': _consumer_summary(consumer),
                'deliveries': [_delivery_row(d) for d in rows],
                'total_quantity': sum((d.quantity_delivered for d in rows), ZERO),
                'total_amount': _price(rows, consumer),
                'delivery_count': len(rows),
            })

        return {
            'period': period.as_dict(),
            'consumer_billing': report,
            'summary': {
                'total_consumers': len(report),
                'grand_total_quantity': sum((item['total_quantity'] for item in report), ZERO),
                'grand_total_amount': sum((item['total_amount'] for item in report), ZERO),
            },
        }

    @staticmethod
    def outstanding(period: BillingPeriod):
        """
        Amount due per active consumer for ``period``.

        Consumers with a zero amount are left out.

        Returns:
            dict: ``period``, ``outstanding_list`` (largest amount first),
            ``total_outstanding`` and ``consumer_count``.
        """
        in_period = Q(
            deliveries__delivery_date__gte=period.start_date,
            deliveries__delivery_date__lte=period.end_date,
        )

        consumers = Consumer.objects.filter(is_active=True).annotate(
            total_quantity=Coalesce(
                Sum('deliveries__quantity_delivered', filter=in_period),
                Value(ZERO),
                output_field=_decimal,
            ),
            snapshot_amount=Coalesce(
                Sum(
                    ExpressionWrapper(
                        F('deliveries__quantity_delivered') * F('deliveries__per_liter_rate'),
                        output_field=_decimal,
                    ),
                    filter=in_period,
                ),
                Value(ZERO),
                output_field=_decimal,
            ),
            delivery_count=Count('deliveries', filter=in_period),
        )

        snapshot = _rate_mode() == RATE_MODE_SNAPSHOT
        outstanding_list = []
        for consumer in consumers:
            if snapshot:
                amount = _money(consumer.snapshot_amount)
            else:
                amount = _money(consumer.total_quantity * consumer.per_liter_rate)

            if amount > 0:
                outstanding_list.append({
                    'consumer': _consumer_summary(consumer, include_rate=False),
                    'total_quantity': _money(consumer.total_quantity),
                    'total_amount': amount,
                    'delivery_count': consumer.delivery_count,
                })

        outstanding_list.sort(key=lambda item: item['total_amount'], reverse=True)

        return {
            'period': period.as_dict(),
            'outstanding_list': outstanding_list,
            'total_outstanding': sum((item['total_amount'] for item in outstanding_list), ZERO),
            'consumer_count': len(outstanding_list),
        }
