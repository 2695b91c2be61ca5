from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from django.conf import settings

from billing.serializers import BillSerializer
from .serializers import CreateOrderSerializer, VerifyPaymentSerializer
from .services import PaymentService


class CreateOrderView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = PaymentService().create_order(serializer.validated_data["bill_id"], request.user)
        return Response(
            {"order": order, "key_id": settings.RAZORPAY_KEY_ID},
            status=status.HTTP_201_CREATED,
        )


class VerifyPaymentView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = VerifyPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        bill = PaymentService().verify_and_settle(
            data["razorpay_order_id"],
            data["razorpay_payment_id"],
            data["razorpay_signature"],
            data["bill_id"],
            request.user,
        )
        return Response({"detail": "Payment successful!", "bill": BillSerializer(bill).data})
