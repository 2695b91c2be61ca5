from django.contrib import admin
from .models import RentProof


@admin.register(RentProof)
class RentProofAdmin(admin.ModelAdmin):
    list_display = ['tenant', 'month', 'year', 'amount', 'status', 'created_at']
    list_filter = ['status', 'year', 'month']
    search_fields = ['tenant__name', 'tenant__room_no']
    readonly_fields = ['created_at', 'updated_at']

    fieldsets = (
        ('Tenant', {
            'fields': ('tenant',)
        }),
        ('Payment', {
            'fields': ('month', 'year', 'amount', 'proof_url', 'status')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('tenant')
