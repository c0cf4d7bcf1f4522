from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
import uuid

from apps.core.validators import mobile_number_validator


class Consumer(models.Model):
    """
    Household or shop receiving a daily milk delivery.

    ``assigned_employee`` mirrors the employee of the consumer's active
    assignment and is maintained by the assignments service.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    full_name = models.CharField(max_length=100)
    mobile_number = models.CharField(max_length=10, validators=[mobile_number_validator])
    address = models.TextField()
    area = models.CharField(max_length=100)

    per_liter_rate = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    daily_milk_quota = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )

    is_active = models.BooleanField(default=True)

    assigned_employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='consumers'
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'consumers'
        indexes = [
            models.Index(fields=['area'], name='consumers_area_idx'),
            models.Index(fields=['is_active'], name='consumers_active_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.full_name} ({self.area})"
