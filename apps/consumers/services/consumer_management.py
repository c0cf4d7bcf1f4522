"""
Consumer management service.

Handles consumer CRUD; new consumers inherit the system default rate
when no rate is given.
"""

import logging
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import ProtectedError, Q, QuerySet

from apps.consumers.models import Consumer
from apps.system_settings.services import get_default_milk_rate

from .exceptions import ConsumerNotFoundError, ConsumerInUseError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    'full_name',
    'mobile_number',
    'address',
    'area',
    'per_liter_rate',
    'daily_milk_quota',
    'is_active',
)


def get_consumer(*, consumer_id: UUID) -> Consumer:
    """
    Get a consumer by ID.

    Raises:
        ConsumerNotFoundError: If consumer doesn't exist
    """
    try:
        return Consumer.objects.select_related('assigned_employee').get(id=consumer_id)
    except (Consumer.DoesNotExist, ValidationError):
        raise ConsumerNotFoundError(f"Consumer with ID {consumer_id} not found")


def list_consumers(
    *,
    search: Optional[str] = None,
    area: Optional[str] = None,
    is_active: Optional[bool] = None
) -> QuerySet[Consumer]:
    """
    List consumers, newest first.

    Args:
        search: Case-insensitive match on name, mobile number or address
        area: Exact (case-insensitive) area match
        is_active: Filter by active flag when given
    """
    queryset = Consumer.objects.select_related('assigned_employee')

    if search:
        queryset = queryset.filter(
            Q(full_name__icontains=search) |
            Q(mobile_number__icontains=search) |
            Q(address__icontains=search)
        )
    if area:
        queryset = queryset.filter(area__iexact=area)
    if is_active is not None:
        queryset = queryset.filter(is_active=is_active)

    return queryset.order_by('-created_at')


def list_areas() -> List[str]:
    """Distinct consumer areas, sorted."""
    return list(
        Consumer.objects
        .exclude(area='')
        .order_by('area')
        .values_list('area', flat=True)
        .distinct()
    )


@transaction.atomic
def create_consumer(
    *,
    full_name: str,
    mobile_number: str,
    address: str,
    area: str,
    per_liter_rate: Optional[Decimal] = None,
    daily_milk_quota: Decimal = Decimal('0')
) -> Consumer:
    """
    Create a consumer.

    A missing or zero ``per_liter_rate`` falls back to the system default rate.

    Raises:
        ValidationError: If a field fails model validation
    """
    if not per_liter_rate:
        per_liter_rate = get_default_milk_rate()

    consumer = Consumer(
        full_name=full_name,
        mobile_number=mobile_number,
        address=address,
        area=area,
        per_liter_rate=per_liter_rate,
        daily_milk_quota=daily_milk_quota or Decimal('0'),
    )
    consumer.full_clean()
    consumer.save()

    logger.info("Created consumer %s in %s at %s/L", consumer.id, consumer.area, consumer.per_liter_rate)
    return consumer


@transaction.atomic
def update_consumer(*, consumer_id: UUID, **fields) -> Consumer:
    """
    Update consumer details.

    ``assigned_employee`` is not editable here; it follows assignments.

    Raises:
        ConsumerNotFoundError: If consumer doesn't exist
        ValidationError: If a field fails model validation
    """
    try:
        consumer = Consumer.objects.select_for_update().get(id=consumer_id)
    except (Consumer.DoesNotExist, ValidationError):
        raise ConsumerNotFoundError(f"Consumer with ID {consumer_id} not found")

    changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
    for key, value in changes.items():
        setattr(consumer, key, value)

    consumer.full_clean()
    consumer.save()

    logger.info("Updated consumer %s: %s", consumer.id, sorted(changes))
    return consumer


@transaction.atomic
def delete_consumer(*, consumer_id: UUID) -> None:
    """
    Delete a consumer along with its assignments.

    Raises:
        ConsumerNotFoundError: If consumer doesn't exist
        ConsumerInUseError: If deliveries reference the consumer
    """
    consumer = get_consumer(consumer_id=consumer_id)

    try:
        consumer.delete()
    except ProtectedError:
        raise ConsumerInUseError()

    logger.info("Deleted consumer %s", consumer_id)
