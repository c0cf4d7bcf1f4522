from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class SystemSettings(models.Model):
    """
    Singleton holding system-wide defaults.

    Only ``default_milk_rate`` exists today; it pre-fills the rate of newly
    created consumers. Always accessed through
    ``apps.system_settings.services.get_settings``.
    """

    default_milk_rate = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        default=Decimal('60.00'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'system_settings'
        verbose_name = 'system settings'
        verbose_name_plural = 'system settings'

    def __str__(self):
        return f"Default rate: {self.default_milk_rate}/L"
