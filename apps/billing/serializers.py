from rest_framework import serializers


# =============================================================================
# Input Serializers
# =============================================================================

class PeriodQuerySerializer(serializers.Serializer):
    """
    Validate billing period query parameters.

    Query Parameters:
        month (int): 1-12, defaults to the current month
        year (int): defaults to the current year
        start_date (date): With end_date, overrides month/year (YYYY-MM-DD)
        end_date (date): With start_date, overrides month/year (YYYY-MM-DD)
    """

    month = serializers.IntegerField(required=False, min_value=1, max_value=12)
    year = serializers.IntegerField(required=False, min_value=2000, max_value=9999)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)


# =============================================================================
# Response Serializers (schema only)
# =============================================================================

class PeriodSerializer(serializers.Serializer):
    month = serializers.IntegerField()
    year = serializers.IntegerField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()


class BilledConsumerSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    full_name = serializers.CharField()
    mobile_number = serializers.CharField()
    address = serializers.CharField()
    area = serializers.CharField()
    per_liter_rate = serializers.DecimalField(max_digits=8, decimal_places=2, required=False)


class BilledDeliverySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    delivery_date = serializers.DateField()
    quantity_delivered = serializers.DecimalField(max_digits=10, decimal_places=2)
    per_liter_rate = serializers.DecimalField(max_digits=8, decimal_places=2)
    employee = serializers.DictField()


class ConsumerBillSerializer(serializers.Serializer):
    consumer = BilledConsumerSerializer()
    period = PeriodSerializer(required=False)
    deliveries = BilledDeliverySerializer(many=True)
    total_quantity = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    delivery_count = serializers.IntegerField()


class ReportSummarySerializer(serializers.Serializer):
    total_consumers = serializers.IntegerField()
    grand_total_quantity = serializers.DecimalField(max_digits=12, decimal_places=2)
    grand_total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)


class MonthlyReportSerializer(serializers.Serializer):
    period = PeriodSerializer()
    consumer_billing = ConsumerBillSerializer(many=True)
    summary = ReportSummarySerializer()


class OutstandingItemSerializer(serializers.Serializer):
    consumer = BilledConsumerSerializer()
    total_quantity = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    delivery_count = serializers.IntegerField()


class OutstandingSerializer(serializers.Serializer):
    period = PeriodSerializer()
    outstanding_list = OutstandingItemSerializer(many=True)
    total_outstanding = serializers.DecimalField(max_digits=14, decimal_places=2)
    consumer_count = serializers.IntegerField()
