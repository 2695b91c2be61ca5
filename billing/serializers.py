from rest_framework import serializers
from .models import Bill


class BillSerializer(serializers.ModelSerializer):
    """Serializer for Bill"""
    tenant_name = serializers.CharField(source='tenant.name', read_only=True, default=None)

    class Meta:
        model = Bill
        fields = [
            'id', 'tenant', 'tenant_name', 'room_no', 'month', 'year', 'amount',
            'type', 'status', 'due_date', 'transaction_ref', 'paid_at',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class ElectricityBillSerializer(serializers.Serializer):
    """Input for splitting an electricity charge across tenants"""
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    tenant_ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=True)
    month = serializers.CharField(required=False, allow_blank=True)
    year = serializers.IntegerField(required=False, allow_null=True)


class GenerateRentSerializer(serializers.Serializer):
    """Optional date for a manual rent generation run"""
    date = serializers.DateField(required=False, allow_null=True)
