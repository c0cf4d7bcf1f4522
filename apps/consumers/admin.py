from django.contrib import admin
from apps.consumers.models import Consumer


@admin.register(Consumer)
class ConsumerAdmin(admin.ModelAdmin):
    """Admin interface for consumers."""

    list_display = [
        'full_name',
        'mobile_number',
        'area',
        'per_liter_rate',
        'daily_milk_quota',
        'assigned_employee',
        'is_active',
    ]
    list_filter = ['is_active', 'area']
    search_fields = ['full_name', 'mobile_number', 'address']
    readonly_fields = ['assigned_employee', 'created_at']
    ordering = ['-created_at']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('assigned_employee')
