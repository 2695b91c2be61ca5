"""
Razorpay adapter - order creation and payment signature verification.
"""
import hashlib
import hmac
from decimal import Decimal

import razorpay
from django.conf import settings


def to_paise(amount) -> int:
    return int(Decimal(str(amount)).quantize(Decimal("0.01")) * 100)


class PaymentGateway:
    """Thin wrapper over the razorpay client using the keys from settings"""

    def __init__(self, key_id=None, key_secret=None):
        self.key_id = key_id if key_id is not None else settings.RAZORPAY_KEY_ID
        self.key_secret = key_secret if key_secret is not None else settings.RAZORPAY_KEY_SECRET
        self._client = None

    @property
    def client(self):
        if self._client is None:
            self._client = razorpay.Client(auth=(self.key_id, self.key_secret))
        return self._client

    def create_order(self, amount, receipt: str) -> dict:
        """Create an INR order; returns the gateway's order payload (id, amount, currency...)"""
        return self.client.order.create({
            "amount": to_paise(amount),
            "currency": "INR",
            "receipt": receipt,
        })

    def verify_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        """HMAC-SHA256 of "order_id|payment_id" with the key secret, compared in constant time"""
        if not (order_id and payment_id and signature):
            return False
        expected = hmac.new(
            self.key_secret.encode(),
            f"{order_id}|{payment_id}".encode(),
            hashlib.sha256,
        ).hexdigest()
        return hmac.compare_digest(expected, signature)
