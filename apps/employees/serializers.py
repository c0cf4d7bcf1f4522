from rest_framework import serializers

from apps.core.validators import mobile_number_validator
from .models import Employee


# =============================================================================
# Input Serializers
# =============================================================================

class EmployeeFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for employee listing.

    Query Parameters:
        search (str): Match on name or mobile number
        is_active (bool): Filter by active flag
    """

    search = serializers.CharField(required=False, allow_blank=True)
    is_active = serializers.BooleanField(required=False, allow_null=True, default=None)


class EmployeeCreateSerializer(serializers.Serializer):
    """Input for creating an employee; password defaults to the mobile number."""

    name = serializers.CharField(max_length=100)
    mobile_number = serializers.CharField(max_length=10, validators=[mobile_number_validator])
    assigned_area = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    password = serializers.CharField(
        min_length=6,
        required=False,
        write_only=True,
        style={'input_type': 'password'}
    )


class EmployeeUpdateSerializer(serializers.Serializer):
    """Input for updating an employee. Password is ignored on this path."""

    name = serializers.CharField(max_length=100, required=False)
    mobile_number = serializers.CharField(max_length=10, required=False, validators=[mobile_number_validator])
    assigned_area = serializers.CharField(max_length=100, required=False, allow_blank=True)
    is_active = serializers.BooleanField(required=False)


class ResetPasswordSerializer(serializers.Serializer):
    new_password = serializers.CharField(style={'input_type': 'password'})


# =============================================================================
# Output Serializers
# =============================================================================

class EmployeeMinimalSerializer(serializers.ModelSerializer):
    """Minimal employee info for nested serialization."""

    class Meta:
        model = Employee
        fields = ['id', 'name', 'mobile_number']
        read_only_fields = fields


class EmployeeSerializer(serializers.ModelSerializer):

    class Meta:
        model = Employee
        fields = [
            'id',
            'name',
            'mobile_number',
            'assigned_area',
            'is_active',
            'created_at',
        ]
        read_only_fields = fields
