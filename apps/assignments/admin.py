from django.contrib import admin
from apps.assignments.models import Assignment


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ['employee', 'consumer', 'daily_milk_quota', 'assigned_date', 'is_active']
    list_filter = ['is_active', 'assigned_date']
    search_fields = ['employee__name', 'consumer__full_name', 'consumer__area']
    ordering = ['-assigned_date']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('employee', 'consumer')
