from rest_framework import serializers


class CreateOrderSerializer(serializers.Serializer):
    bill_id = serializers.IntegerField()


class VerifyPaymentSerializer(serializers.Serializer):
    """Fields posted back by the checkout widget"""
    razorpay_order_id = serializers.CharField()
    razorpay_payment_id = serializers.CharField()
    razorpay_signature = serializers.CharField()
    bill_id = serializers.IntegerField()
