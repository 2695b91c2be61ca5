from rest_framework import serializers
from .models import PastTenant


class PastTenantSerializer(serializers.ModelSerializer):
    """Read-only serializer for archived tenants"""

    class Meta:
        model = PastTenant
        fields = [
            'id', 'original_id', 'name', 'email', 'phone', 'room_no',
            'id_type', 'id_number', 'id_proof', 'profile_photo',
            'deposit', 'joined_at', 'left_at', 'reason_for_leaving'
        ]
        read_only_fields = fields
