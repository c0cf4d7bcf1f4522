from decimal import Decimal

from rest_framework import serializers

from apps.core.validators import mobile_number_validator
from apps.employees.serializers import EmployeeMinimalSerializer
from .models import Consumer


# =============================================================================
# Input Serializers
# =============================================================================

class ConsumerFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for consumer listing.

    Query Parameters:
        search (str): Match on name, mobile number or address
        area (str): Exact area
        is_active (bool): Filter by active flag
    """

    search = serializers.CharField(required=False, allow_blank=True)
    area = serializers.CharField(required=False, allow_blank=True)
    is_active = serializers.BooleanField(required=False, allow_null=True, default=None)


class ConsumerCreateSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=100)
    mobile_number = serializers.CharField(max_length=10, validators=[mobile_number_validator])
    address = serializers.CharField()
    area = serializers.CharField(max_length=100)
    per_liter_rate = serializers.DecimalField(
        max_digits=8, decimal_places=2, min_value=Decimal('0'),
        required=False, allow_null=True
    )
    daily_milk_quota = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0'),
        required=False, default=Decimal('0')
    )


class ConsumerUpdateSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=100, required=False)
    mobile_number = serializers.CharField(max_length=10, required=False, validators=[mobile_number_validator])
    address = serializers.CharField(required=False)
    area = serializers.CharField(max_length=100, required=False)
    per_liter_rate = serializers.DecimalField(
        max_digits=8, decimal_places=2, min_value=Decimal('0'), required=False
    )
    daily_milk_quota = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal('0'), required=False
    )
    is_active = serializers.BooleanField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class ConsumerMinimalSerializer(serializers.ModelSerializer):
    """Minimal consumer info for nested serialization."""

    class Meta:
        model = Consumer
        fields = ['id', 'full_name', 'mobile_number', 'address', 'area', 'per_liter_rate']
        read_only_fields = fields


class ConsumerSerializer(serializers.ModelSerializer):
    assigned_employee = EmployeeMinimalSerializer(read_only=True)

    class Meta:
        model = Consumer
        fields = [
            'id',
            'full_name',
            'mobile_number',
            'address',
            'area',
            'per_liter_rate',
            'daily_milk_quota',
            'is_active',
            'assigned_employee',
            'created_at',
        ]
        read_only_fields = fields
