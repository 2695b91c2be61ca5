from django.contrib import admin
from .models import PastTenant


@admin.register(PastTenant)
class PastTenantAdmin(admin.ModelAdmin):
    list_display = ['name', 'room_no', 'phone', 'email', 'joined_at', 'left_at']
    list_filter = ['left_at']
    search_fields = ['name', 'email', 'phone', 'room_no']
    date_hierarchy = 'left_at'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
