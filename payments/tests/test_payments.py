import hashlib
import hmac
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock, patch

from django.core import mail
from django.test import TestCase, override_settings
from rest_framework import status
from rest_framework.test import APITestCase

from billing.models import Bill
from common.tests.factories import make_admin, make_room, make_tenant
from core.constants import BillStatus, BillType
from core.exceptions import PermissionDeniedError, SignatureMismatchError, ValidationError
from payments.gateway import PaymentGateway, to_paise
from payments.services import PaymentService

SECRET = "test_secret"


def sign(order_id, payment_id, secret=SECRET):
    return hmac.new(secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256).hexdigest()


class PaymentGatewayTest(TestCase):
    def setUp(self):
        self.gateway = PaymentGateway(key_id="rzp_test", key_secret=SECRET)

    def test_valid_signature(self):
        self.assertTrue(self.gateway.verify_signature("order_1", "pay_1", sign("order_1", "pay_1")))

    def test_tampered_signature(self):
        self.assertFalse(self.gateway.verify_signature("order_1", "pay_2", sign("order_1", "pay_1")))
        self.assertFalse(self.gateway.verify_signature("order_1", "pay_1", ""))

    def test_amount_in_paise(self):
        self.assertEqual(to_paise(Decimal("333.33")), 33333)
        self.assertEqual(to_paise(1500), 150000)

    @patch("payments.gateway.razorpay.Client")
    def test_create_order(self, mock_client):
        mock_client.return_value.order.create.return_value = {"id": "order_1", "amount": 150000}

        order = self.gateway.create_order(Decimal("1500"), receipt="bill_1")

        self.assertEqual(order["id"], "order_1")
        mock_client.assert_called_once_with(auth=("rzp_test", SECRET))
        mock_client.return_value.order.create.assert_called_once_with(
            {"amount": 150000, "currency": "INR", "receipt": "bill_1"}
        )


class PaymentServiceTest(TestCase):
    def setUp(self):
        room = make_room("101")
        self.asha = make_tenant("Asha", room=room)
        self.bina = make_tenant("Bina", room=room)
        self.bill = Bill.objects.create(tenant=self.asha, room_no="101", month="January", year=2025,
                                        amount=1500, due_date=date(2025, 1, 5), order_id="order_1")
        self.gateway = PaymentGateway(key_id="rzp_test", key_secret=SECRET)
        self.gateway.create_order = MagicMock(return_value={"id": "order_1"})
        self.service = PaymentService(gateway=self.gateway)

    def test_create_order_for_own_bill(self):
        order = self.service.create_order(self.bill.pk, self.asha.user)

        self.assertEqual(order["id"], "order_1")
        self.gateway.create_order.assert_called_once_with(Decimal("1500.00"), receipt=f"bill_{self.bill.pk}")

    def test_create_order_for_other_tenants_bill(self):
        with self.assertRaises(PermissionDeniedError):
            self.service.create_order(self.bill.pk, self.bina.user)

    def test_create_order_for_paid_bill(self):
        Bill.objects.filter(pk=self.bill.pk).update(status=BillStatus.PAID)

        with self.assertRaises(ValidationError):
            self.service.create_order(self.bill.pk, self.asha.user)

    def test_bad_signature_records_nothing(self):
        with self.assertRaises(SignatureMismatchError):
            self.service.verify_and_settle("order_1", "pay_1", "forged", self.bill.pk, self.asha.user)

        self.bill.refresh_from_db()
        self.assertEqual(self.bill.status, BillStatus.UNPAID)

    def test_good_signature_settles_bill_and_sends_receipt(self):
        with self.captureOnCommitCallbacks(execute=True):
            bill = self.service.verify_and_settle("order_1", "pay_1", sign("order_1", "pay_1"),
                                                  self.bill.pk, self.asha.user)

        self.assertEqual(bill.status, BillStatus.PAID)
        self.assertEqual(bill.transaction_ref, "pay_1")
        self.assertEqual(len(mail.outbox), 1)
        self.assertIn("pay_1", mail.outbox[0].body)

    def test_create_order_is_remembered_on_bill(self):
        self.gateway.create_order.return_value = {"id": "order_2"}

        self.service.create_order(self.bill.pk, self.asha.user)

        self.bill.refresh_from_db()
        self.assertEqual(self.bill.order_id, "order_2")

    def test_order_for_another_bill_settles_nothing(self):
        power = Bill.objects.create(tenant=self.asha, room_no="101", month="January", year=2025,
                                    amount=100, type=BillType.ELECTRICITY, due_date=date(2025, 1, 12),
                                    order_id="order_small")

        with self.assertRaises(ValidationError) as ctx:
            self.service.verify_and_settle("order_small", "pay_1", sign("order_small", "pay_1"),
                                           self.bill.pk, self.asha.user)

        self.assertEqual(ctx.exception.code, "ORDER_MISMATCH")
        self.bill.refresh_from_db()
        power.refresh_from_db()
        self.assertEqual(self.bill.status, BillStatus.UNPAID)
        self.assertEqual(power.status, BillStatus.UNPAID)

    def test_payment_cannot_settle_a_second_bill(self):
        self.service.verify_and_settle("order_1", "pay_1", sign("order_1", "pay_1"), self.bill.pk, self.asha.user)
        power = Bill.objects.create(tenant=self.asha, room_no="101", month="January", year=2025,
                                    amount=100, type=BillType.ELECTRICITY, due_date=date(2025, 1, 12),
                                    order_id="order_1")

        with self.assertRaises(ValidationError) as ctx:
            self.service.verify_and_settle("order_1", "pay_1", sign("order_1", "pay_1"), power.pk, self.asha.user)

        self.assertEqual(ctx.exception.code, "PAYMENT_REUSED")
        power.refresh_from_db()
        self.assertEqual(power.status, BillStatus.UNPAID)

    def test_bill_without_order_is_not_settled(self):
        Bill.objects.filter(pk=self.bill.pk).update(order_id="")

        with self.assertRaises(ValidationError):
            self.service.verify_and_settle("order_1", "pay_1", sign("order_1", "pay_1"), self.bill.pk, self.asha.user)

        self.bill.refresh_from_db()
        self.assertEqual(self.bill.status, BillStatus.UNPAID)


@override_settings(RAZORPAY_KEY_ID="rzp_test", RAZORPAY_KEY_SECRET=SECRET)
class PaymentViewsTest(APITestCase):
    def setUp(self):
        self.admin = make_admin()
        self.asha = make_tenant("Asha", room=make_room("101"))
        self.bill = Bill.objects.create(tenant=self.asha, room_no="101", month="January", year=2025,
                                        amount=1500, due_date=date(2025, 1, 5), order_id="order_1")

    @patch("payments.gateway.PaymentGateway.create_order", return_value={"id": "order_1", "amount": 150000})
    def test_create_order(self, mock_create_order):
        self.client.force_authenticate(user=self.asha.user)

        response = self.client.post("/api/payments/create-order/", {"bill_id": self.bill.pk}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["order"]["id"], "order_1")
        self.assertEqual(response.data["key_id"], "rzp_test")

    def test_create_order_unknown_bill(self):
        self.client.force_authenticate(user=self.asha.user)

        response = self.client.post("/api/payments/create-order/", {"bill_id": 4242}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def verify(self, signature):
        return self.client.post("/api/payments/verify/", {
            "razorpay_order_id": "order_1",
            "razorpay_payment_id": "pay_1",
            "razorpay_signature": signature,
            "bill_id": self.bill.pk,
        }, format="json")

    def test_verify_success(self):
        self.client.force_authenticate(user=self.asha.user)

        response = self.verify(sign("order_1", "pay_1"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["bill"]["status"], BillStatus.PAID)

    def test_verify_bad_signature(self):
        self.client.force_authenticate(user=self.asha.user)

        response = self.verify("forged")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "SIGNATURE_MISMATCH")
        self.bill.refresh_from_db()
        self.assertEqual(self.bill.status, BillStatus.UNPAID)

    def test_verify_twice_is_a_noop(self):
        self.client.force_authenticate(user=self.asha.user)
        self.verify(sign("order_1", "pay_1"))

        response = self.verify(sign("order_1", "pay_1"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["code"], "ALREADY_PAID")
        self.assertFalse(response.data["changed"])

    def test_verify_with_order_of_another_bill(self):
        Bill.objects.create(tenant=self.asha, room_no="101", month="January", year=2025, amount=100,
                            type=BillType.ELECTRICITY, due_date=date(2025, 1, 12), order_id="order_small")
        self.client.force_authenticate(user=self.asha.user)

        response = self.client.post("/api/payments/verify/", {
            "razorpay_order_id": "order_small",
            "razorpay_payment_id": "pay_1",
            "razorpay_signature": sign("order_small", "pay_1"),
            "bill_id": self.bill.pk,
        }, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["code"], "ORDER_MISMATCH")
        self.bill.refresh_from_db()
        self.assertEqual(self.bill.status, BillStatus.UNPAID)
