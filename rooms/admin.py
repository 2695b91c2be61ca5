from django.contrib import admin
from .models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ['room_no', 'floor', 'occupant_count', 'capacity', 'status', 'price']
    list_filter = ['status', 'floor']
    search_fields = ['room_no']
    readonly_fields = ['capacity', 'current_tenants', 'occupant_count', 'status', 'created_at', 'updated_at']

    fieldsets = (
        ('Room', {
            'fields': ('room_no', 'floor', 'capacity', 'price')
        }),
        ('Occupancy', {
            'fields': ('current_tenants', 'occupant_count', 'status')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_delete_permission(self, request, obj=None):
        return False
