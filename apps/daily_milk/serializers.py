from decimal import Decimal

from django.utils import timezone
from rest_framework import serializers

from apps.consumers.serializers import ConsumerMinimalSerializer
from apps.employees.serializers import EmployeeMinimalSerializer
from .models import DailyMilkEntry, EmployeeAllocation, Delivery


# =============================================================================
# Input Serializers
# =============================================================================

class DateRangeFilterSerializer(serializers.Serializer):
    """
    Validate an optional inclusive date range.

    Query Parameters:
        start_date (date): First day (YYYY-MM-DD)
        end_date (date): Last day (YYYY-MM-DD)
    """

    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')
        if start_date and end_date and start_date > end_date:
            raise serializers.ValidationError({'end_date': 'end_date must not be before start_date'})
        return attrs


class DeliveryFilterSerializer(DateRangeFilterSerializer):
    employee_id = serializers.UUIDField(required=False)
    consumer_id = serializers.UUIDField(required=False)


class DateParamSerializer(serializers.Serializer):
    date = serializers.DateField()


class AllocationInputSerializer(serializers.Serializer):
    employee_id = serializers.UUIDField()
    allocated_quantity = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0')
    )


class DailyEntryCreateSerializer(serializers.Serializer):
    """
    Request body for a new daily entry.

    Example::

        {
            "entry_date": "2024-01-15",
            "total_milk_collected": "100.00",
            "employee_allocations": [
                {"employee_id": "...", "allocated_quantity": "60.00"},
                {"employee_id": "...", "allocated_quantity": "40.00"}
            ]
        }
    """

    entry_date = serializers.DateField()
    total_milk_collected = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0')
    )
    employee_allocations = AllocationInputSerializer(many=True)


class MyDeliveryCreateSerializer(serializers.Serializer):
    """Delivery recorded by an employee for themselves."""

    consumer_id = serializers.UUIDField()
    delivery_date = serializers.DateField(default=timezone.localdate)
    quantity_delivered = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0')
    )


class DeliveryCreateSerializer(MyDeliveryCreateSerializer):
    """Delivery recorded by an admin on behalf of an employee."""

    employee_id = serializers.UUIDField()


# =============================================================================
# Output Serializers
# =============================================================================

class EmployeeAllocationSerializer(serializers.ModelSerializer):
    employee = EmployeeMinimalSerializer(read_only=True)

    class Meta:
        model = EmployeeAllocation
        fields = [
            'employee',
            'allocated_quantity',
            'delivered_quantity',
            'remaining_quantity',
            'is_verified',
            'verified_at',
        ]
        read_only_fields = fields


class DailyMilkEntrySerializer(serializers.ModelSerializer):
    employee_allocations = EmployeeAllocationSerializer(source='allocations', many=True, read_only=True)
    total_allocated = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    is_fully_allocated = serializers.BooleanField(read_only=True)

    class Meta:
        model = DailyMilkEntry
        fields = [
            'id',
            'entry_date',
            'total_milk_collected',
            'total_allocated',
            'is_fully_allocated',
            'employee_allocations',
            'created_at',
        ]
        read_only_fields = fields


class DeliverySerializer(serializers.ModelSerializer):
    consumer = ConsumerMinimalSerializer(read_only=True)
    employee = EmployeeMinimalSerializer(read_only=True)

    class Meta:
        model = Delivery
        fields = [
            'id',
            'consumer',
            'employee',
            'delivery_date',
            'quantity_delivered',
            'per_liter_rate',
            'recorded_at',
        ]
        read_only_fields = fields


class QuotaSerializer(serializers.Serializer):
    date = serializers.DateField()
    allocated_quantity = serializers.DecimalField(max_digits=10, decimal_places=2)
    delivered_quantity = serializers.DecimalField(max_digits=10, decimal_places=2)
    remaining_quantity = serializers.DecimalField(max_digits=10, decimal_places=2)
    is_verified = serializers.BooleanField()
