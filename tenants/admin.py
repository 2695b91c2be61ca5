from django.contrib import admin
from .models import Tenant


@admin.register(Tenant)
class TenantAdmin(admin.ModelAdmin):
    list_display = ['name', 'phone', 'email', 'room_no', 'created_at']
    list_filter = ['room_no', 'created_at']
    search_fields = ['name', 'phone', 'email', 'id_number']
    readonly_fields = ['room_no', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('user', 'name', 'phone', 'email')
        }),
        ('Room', {
            'fields': ('room_no', 'deposit')
        }),
        ('Identity', {
            'fields': ('id_type', 'id_number', 'id_proof', 'profile_photo')
        }),
        ('Dates', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
