from rest_framework import serializers
from core.constants import RentProofStatus
from .models import RentProof


class RentProofSerializer(serializers.ModelSerializer):
    """Serializer for manual rent proofs"""
    tenant_name = serializers.CharField(source='tenant.name', read_only=True, default=None)
    room_no = serializers.CharField(source='tenant.room_no', read_only=True, default=None)

    class Meta:
        model = RentProof
        fields = [
            'id', 'tenant', 'tenant_name', 'room_no', 'month', 'year', 'amount',
            'proof_url', 'status', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class RentProofReviewSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=RentProofStatus.CHOICES)


class ReportRowSerializer(serializers.Serializer):
    """One line of the rent tracking report"""
    tenant_id = serializers.IntegerField()
    name = serializers.CharField()
    room_no = serializers.CharField()
    phone = serializers.CharField()
    status = serializers.CharField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    record_id = serializers.IntegerField(allow_null=True)
    proof_url = serializers.CharField(allow_null=True)
