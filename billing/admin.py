from django.contrib import admin
from .models import Bill


@admin.register(Bill)
class BillAdmin(admin.ModelAdmin):
    list_display = ['tenant', 'room_no', 'type', 'month', 'year', 'amount', 'status', 'due_date']
    list_filter = ['type', 'status', 'year', 'month']
    search_fields = ['tenant__name', 'room_no', 'transaction_ref']
    readonly_fields = ['order_id', 'transaction_ref', 'paid_at', 'created_at', 'updated_at']
    date_hierarchy = 'due_date'

    fieldsets = (
        ('Tenant', {
            'fields': ('tenant', 'room_no')
        }),
        ('Bill Information', {
            'fields': ('type', 'month', 'year', 'amount', 'due_date', 'status')
        }),
        ('Payment', {
            'fields': ('order_id', 'transaction_ref', 'paid_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('tenant')
