from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
import uuid


class Assignment(models.Model):
    """
    Links a delivery employee to a consumer.

    One row per (employee, consumer) pair regardless of ``is_active``;
    ending an assignment deactivates the row and re-assigning the same
    pair reactivates it.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.CASCADE,
        related_name='assignments'
    )
    consumer = models.ForeignKey(
        'consumers.Consumer',
        on_delete=models.CASCADE,
        related_name='assignments'
    )

    daily_milk_quota = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    assigned_date = models.DateField(default=timezone.localdate)
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'assignments'
        constraints = [
            models.UniqueConstraint(
                fields=['employee', 'consumer'],
                name='unique_employee_consumer'
            )
        ]
        indexes = [
            models.Index(fields=['employee', 'is_active'], name='assign_employee_active_idx'),
        ]
        ordering = ['-assigned_date']

    def __str__(self):
        return f"{self.employee.name} -> {self.consumer.full_name}"
