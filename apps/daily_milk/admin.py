from django.contrib import admin
from apps.daily_milk.models import DailyMilkEntry, EmployeeAllocation, Delivery


class EmployeeAllocationInline(admin.TabularInline):
    model = EmployeeAllocation
    extra = 0
    fields = [
        'employee',
        'allocated_quantity',
        'delivered_quantity',
        'remaining_quantity',
        'is_verified',
        'verified_at',
    ]
    readonly_fields = ['delivered_quantity', 'remaining_quantity', 'verified_at']


@admin.register(DailyMilkEntry)
class DailyMilkEntryAdmin(admin.ModelAdmin):
    """Daily entries with their allocations inline."""

    list_display = ['entry_date', 'total_milk_collected', 'total_allocated', 'created_at']
    date_hierarchy = 'entry_date'
    ordering = ['-entry_date']
    inlines = [EmployeeAllocationInline]


@admin.register(Delivery)
class DeliveryAdmin(admin.ModelAdmin):
    """Deliveries are read-only; they are recorded through the API."""

    list_display = ['delivery_date', 'consumer', 'employee', 'quantity_delivered', 'per_liter_rate']
    list_filter = ['delivery_date']
    search_fields = ['consumer__full_name', 'employee__name']
    date_hierarchy = 'delivery_date'
    ordering = ['-delivery_date']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('consumer', 'employee')

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
