from django.contrib import admin
from apps.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    """Admin interface for delivery employees."""

    list_display = ['name', 'mobile_number', 'assigned_area', 'is_active', 'created_at']
    list_filter = ['is_active', 'assigned_area', 'created_at']
    search_fields = ['name', 'mobile_number', 'assigned_area']
    readonly_fields = ['user', 'created_at']
    ordering = ['-created_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user')
