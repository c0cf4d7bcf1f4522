from django.contrib import admin
from apps.system_settings.models import SystemSettings


@admin.register(SystemSettings)
class SystemSettingsAdmin(admin.ModelAdmin):
    """Admin interface for the settings singleton."""

    list_display = ['default_milk_rate', 'updated_at']
    readonly_fields = ['updated_at']

    def has_add_permission(self, request):
        """Only one settings row may exist."""
        return not SystemSettings.objects.exists()
