from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from django.core.exceptions import ValidationError

from apps.consumers.models import Consumer
from apps.consumers.services import (
    get_consumer,
    list_consumers,
    list_areas,
    create_consumer,
    update_consumer,
    delete_consumer,
)
from apps.consumers.services.exceptions import ConsumerNotFoundError, ConsumerInUseError
from apps.daily_milk.services import record_delivery
from apps.system_settings.services import update_settings


@pytest.mark.django_db
class TestConsumerManagement:

    def _create(self, **overrides):
        fields = {
            'full_name': 'Meena Joshi',
            'mobile_number': '9000011111',
            'address': '7 Park Street',
            'area': 'East',
        }
        fields.update(overrides)
        return create_consumer(**fields)

    def test_rate_defaults_to_system_rate(self):
        consumer = self._create()

        assert consumer.per_liter_rate == Decimal('60')

    def test_rate_follows_updated_system_rate(self):
        update_settings(default_milk_rate=Decimal('65.50'))

        consumer = self._create(per_liter_rate=Decimal('0'))

        assert consumer.per_liter_rate == Decimal('65.50')

    def test_explicit_rate_kept(self):
        consumer = self._create(per_liter_rate=Decimal('58.00'))

        assert consumer.per_liter_rate == Decimal('58.00')

    def test_mobile_number_not_unique(self, consumer):
        twin = self._create(mobile_number=consumer.mobile_number)

        assert twin.mobile_number == consumer.mobile_number

    def test_invalid_mobile_number(self):
        with pytest.raises(ValidationError):
            self._create(mobile_number='5000011111')

    def test_negative_quota_rejected(self):
        with pytest.raises(ValidationError):
            self._create(daily_milk_quota=Decimal('-1'))

    def test_get_not_found(self):
        with pytest.raises(ConsumerNotFoundError):
            get_consumer(consumer_id=uuid4())

    def test_list_filters(self, consumer, other_consumer):
        assert list(list_consumers(area='north')) == [consumer]
        assert list(list_consumers(search='lake')) == [other_consumer]

        update_consumer(consumer_id=consumer.id, is_active=False)
        assert list(list_consumers(is_active=True)) == [other_consumer]

    def test_list_areas(self, consumer, other_consumer):
        self._create(area='North')

        assert list_areas() == ['North', 'South']

    def test_update_consumer(self, consumer):
        updated = update_consumer(consumer_id=consumer.id, per_liter_rate=Decimal('62.00'))

        assert updated.per_liter_rate == Decimal('62.00')

    def test_delete_consumer(self, consumer):
        delete_consumer(consumer_id=consumer.id)

        assert not Consumer.objects.filter(id=consumer.id).exists()

    def test_delete_consumer_with_deliveries_refused(self, admin_user, employee, consumer, assignment):
        record_delivery(
            consumer_id=consumer.id,
            employee_id=employee.id,
            delivery_date=date(2024, 1, 15),
            quantity=Decimal('2'),
            principal=admin_user,
        )

        with pytest.raises(ConsumerInUseError):
            delete_consumer(consumer_id=consumer.id)
