from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
import uuid


class DailyMilkEntry(models.Model):
    """
    Milk collected on one calendar date and its split across employees.

    Exactly one entry per date. The split lives in ``allocations``
    (EmployeeAllocation rows owned by the entry).
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    entry_date = models.DateField(unique=True)
    total_milk_collected = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'daily_milk_entries'
        ordering = ['-entry_date']
        verbose_name_plural = 'daily milk entries'

    def __str__(self):
        return f"{self.entry_date}: {self.total_milk_collected}L"

    @property
    def total_allocated(self) -> Decimal:
        return sum(
            (allocation.allocated_quantity for allocation in self.allocations.all()),
            Decimal('0')
        )

    @property
    def is_fully_allocated(self) -> bool:
        return self.total_allocated == self.total_milk_collected

    def allocations_by_employee(self):
        """Map employee id to allocation, in allocation order."""
        return {allocation.employee_id: allocation for allocation in self.allocations.all()}


class EmployeeAllocation(models.Model):
    """
    One employee's share of a day's milk.

    ``remaining_quantity`` starts at ``allocated_quantity`` and is decremented
    by each delivery the employee records for that date.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    entry = models.ForeignKey(
        DailyMilkEntry,
        on_delete=models.CASCADE,
        related_name='allocations'
    )
    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.PROTECT,
        related_name='allocations'
    )

    allocated_quantity = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    delivered_quantity = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    remaining_quantity = models.DecimalField(max_digits=10, decimal_places=2)

    is_verified = models.BooleanField(default=False)
    verified_at = models.DateTimeField(null=True, blank=True)

    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'employee_allocations'
        constraints = [
            models.UniqueConstraint(
                fields=['entry', 'employee'],
                name='unique_entry_employee'
            )
        ]
        ordering = ['position']

    def __str__(self):
        return f"{self.employee_id} on {self.entry_id}: {self.remaining_quantity}/{self.allocated_quantity}L"

    def save(self, *args, **kwargs):
        if self._state.adding and self.remaining_quantity is None:
            self.remaining_quantity = self.allocated_quantity
        super().save(*args, **kwargs)


class Delivery(models.Model):
    """
    Milk delivered to one consumer on one date.

    At most one row per (consumer, delivery_date). Rows are never edited;
    ``per_liter_rate`` keeps the consumer's rate at the time of delivery.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    consumer = models.ForeignKey(
        'consumers.Consumer',
        on_delete=models.PROTECT,
        related_name='deliveries'
    )
    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.PROTECT,
        related_name='deliveries'
    )

    delivery_date = models.DateField()
    quantity_delivered = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))]
    )
    per_liter_rate = models.DecimalField(max_digits=8, decimal_places=2)

    recorded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'deliveries'
        constraints = [
            models.UniqueConstraint(
                fields=['consumer', 'delivery_date'],
                name='unique_consumer_delivery_date'
            )
        ]
        indexes = [
            models.Index(fields=['employee', 'delivery_date'], name='delivery_employee_date_idx'),
            models.Index(fields=['delivery_date'], name='delivery_date_idx'),
        ]
        ordering = ['-delivery_date', '-recorded_at']
        verbose_name_plural = 'deliveries'

    def __str__(self):
        return f"{self.consumer_id} {self.delivery_date}: {self.quantity_delivered}L"

    @property
    def amount(self) -> Decimal:
        return self.quantity_delivered * self.per_liter_rate
