from decimal import Decimal

from rest_framework import serializers

from apps.consumers.serializers import ConsumerMinimalSerializer
from apps.employees.serializers import EmployeeMinimalSerializer
from .models import Assignment


# =============================================================================
# Input Serializers
# =============================================================================

class AssignmentFilterSerializer(serializers.Serializer):
    employee_id = serializers.UUIDField(required=False)
    consumer_id = serializers.UUIDField(required=False)
    is_active = serializers.BooleanField(required=False, allow_null=True, default=None)


class AssignmentCreateSerializer(serializers.Serializer):
    employee_id = serializers.UUIDField()
    consumer_id = serializers.UUIDField()
    daily_milk_quota = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0'),
        required=False, default=Decimal('0')
    )


class AssignmentUpdateSerializer(serializers.Serializer):
    daily_milk_quota = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0'), required=False
    )
    is_active = serializers.BooleanField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class AssignmentSerializer(serializers.ModelSerializer):
    employee = EmployeeMinimalSerializer(read_only=True)
    consumer = ConsumerMinimalSerializer(read_only=True)

    class Meta:
        model = Assignment
        fields = [
            'id',
            'employee',
            'consumer',
            'daily_milk_quota',
            'assigned_date',
            'is_active',
        ]
        read_only_fields = fields


class MyAssignmentSerializer(serializers.ModelSerializer):
    """Assignment as seen by the employee on their route."""

    consumer = ConsumerMinimalSerializer(read_only=True)

    class Meta:
        model = Assignment
        fields = ['id', 'consumer', 'daily_milk_quota', 'assigned_date']
        read_only_fields = fields
