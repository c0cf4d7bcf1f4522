from decimal import Decimal

from rest_framework import serializers

from .models import SystemSettings


class SystemSettingsSerializer(serializers.ModelSerializer):

    class Meta:
        model = SystemSettings
        fields = ['default_milk_rate', 'updated_at']
        read_only_fields = ['updated_at']


class UpdateSettingsSerializer(serializers.Serializer):
    default_milk_rate = serializers.DecimalField(
        max_digits=8,
        decimal_places=2,
        min_value=Decimal('0')
    )
