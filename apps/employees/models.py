from django.conf import settings
from django.db import models
import uuid

from apps.core.validators import mobile_number_validator


class Employee(models.Model):
    """
    Delivery employee.

    The login credentials (hashed password, role) live on the linked
    ``accounts.User``; its username is the employee's mobile number.
    Deliveries and allocations reference employees with PROTECT, so an
    employee with history can only be deactivated, never deleted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='employee_profile'
    )

    name = models.CharField(max_length=100)
    mobile_number = models.CharField(
        max_length=10,
        unique=True,
        validators=[mobile_number_validator]
    )
    assigned_area = models.CharField(max_length=100, blank=True)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'employees'
        indexes = [
            models.Index(fields=['is_active'], name='employees_active_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.mobile_number})"
