from rest_framework import serializers
from .models import Tenant


class TenantSerializer(serializers.ModelSerializer):
    """Serializer for Tenant"""
    joined_at = serializers.DateTimeField(read_only=True)

    class Meta:
        model = Tenant
        fields = [
            'id', 'name', 'email', 'phone', 'room_no', 'deposit',
            'id_type', 'id_number', 'id_proof', 'profile_photo',
            'joined_at', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'email', 'room_no', 'id_type', 'id_number', 'id_proof',
                            'joined_at', 'created_at', 'updated_at']


class TenantListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""

    class Meta:
        model = Tenant
        fields = ['id', 'name', 'phone', 'email', 'room_no', 'created_at']


class TenantCreateSerializer(serializers.Serializer):
    """
    Onboarding input. Only shapes are checked here; required fields and
    business rules are enforced by TenantService.onboard.
    """
    name = serializers.CharField(required=False, allow_blank=True, default='')
    email = serializers.EmailField(required=False, allow_blank=True, default='')
    phone = serializers.CharField(required=False, allow_blank=True, default='')
    room_no = serializers.CharField(required=False, allow_blank=True, default='')
    deposit = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0, required=False, default=0)
    id_type = serializers.CharField(required=False, allow_blank=True, default='')
    id_number = serializers.CharField(required=False, allow_blank=True, default='')
    id_proof = serializers.URLField(required=False, allow_blank=True, default='')
    profile_photo = serializers.URLField(required=False, allow_blank=True, default='')

    def validate_id_type(self, value):
        return value.lower() if value else value


class ChangeRoomSerializer(serializers.Serializer):
    new_room_no = serializers.CharField(required=False, allow_blank=True, default='')


class CheckoutSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default='')
