from rest_framework import serializers
from .models import Complaint


class ComplaintSerializer(serializers.ModelSerializer):
    """Serializer for Complaint"""
    tenant_name = serializers.CharField(source='tenant.name', read_only=True, default=None)

    class Meta:
        model = Complaint
        fields = [
            'id', 'tenant', 'tenant_name', 'room_no', 'description', 'image_url',
            'status', 'resolved_at', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'tenant', 'room_no', 'resolved_at', 'created_at', 'updated_at']
