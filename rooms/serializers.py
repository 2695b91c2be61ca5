from rest_framework import serializers
from .models import Room


class RoomSerializer(serializers.ModelSerializer):
    """Serializer for Room with occupant names"""
    occupants = serializers.SerializerMethodField()
    effective_price = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)
    vacant_beds = serializers.ReadOnlyField()

    class Meta:
        model = Room
        fields = [
            'id', 'room_no', 'floor', 'capacity', 'current_tenants', 'occupants',
            'occupant_count', 'status', 'vacant_beds', 'price', 'effective_price',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_occupants(self, obj):
        """Names of the tenants listed on the room"""
        names = self.context.get('tenant_names')
        if names is None:
            from tenants.models import Tenant
            names = dict(Tenant.objects.filter(id__in=obj.current_tenants or []).values_list('id', 'name'))
        return [
            {'id': tenant_id, 'name': names[tenant_id]}
            for tenant_id in obj.current_tenants or [] if tenant_id in names
        ]
