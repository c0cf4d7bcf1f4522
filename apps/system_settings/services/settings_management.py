"""System settings service (lazy singleton)."""

import logging
from decimal import Decimal

from django.conf import settings as django_settings
from django.db import transaction

from apps.system_settings.models import SystemSettings

from .exceptions import InvalidRateError

logger = logging.getLogger(__name__)


def get_settings() -> SystemSettings:
    """
    Return the settings singleton, creating it with the fallback rate if absent.

    The fallback comes from ``settings.DEFAULT_MILK_RATE``.
    """
    instance = SystemSettings.objects.order_by('pk').first()
    if instance is None:
        instance = SystemSettings.objects.create(
            default_milk_rate=django_settings.DEFAULT_MILK_RATE
        )
        logger.info("Initialized system settings with default rate %s", instance.default_milk_rate)
    return instance


def get_default_milk_rate() -> Decimal:
    return get_settings().default_milk_rate


@transaction.atomic
def update_settings(*, default_milk_rate: Decimal) -> SystemSettings:
    """
    Update the default milk rate.

    Raises:
        InvalidRateError: If the rate is missing or negative
    """
    if default_milk_rate is None or default_milk_rate < 0:
        raise InvalidRateError()

    instance = get_settings()
    instance.default_milk_rate = default_milk_rate
    instance.full_clean()
    instance.save(update_fields=['default_milk_rate', 'updated_at'])

    logger.info("Default milk rate changed to %s", default_milk_rate)
    return instance
