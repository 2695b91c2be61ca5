"""
Payment service - online bill payment through the gateway.

Each bill remembers the last gateway order opened for it, and a verified
payment only settles the bill its order was opened for.
"""
from django.db import transaction
from core.services import BaseService
from core.constants import BillStatus
from core.exceptions import PermissionDeniedError, ValidationError, SignatureMismatchError
from api.permissions import is_pg_admin, get_tenant
from billing.repositories import BillRepository
from billing.services import BillingService
from common.notifications import notify_after_commit, receipt_message
from .gateway import PaymentGateway


class PaymentService(BaseService):
    """Creates gateway orders for bills and settles them once the gateway confirms"""

    def __init__(self, gateway: PaymentGateway = None):
        super().__init__()
        self.gateway = gateway or PaymentGateway()
        self.bill_repo = BillRepository()
        self.billing = BillingService()

    def create_order(self, bill_id, user) -> dict:
        """
        Open a gateway order for the full amount of a bill.

        Raises:
            NotFoundError: bill does not exist
            PermissionDeniedError: bill belongs to another tenant
            ValidationError: bill is already paid
        """
        bill = self._get_owned_bill(bill_id, user)
        if bill.is_paid:
            raise ValidationError(
                message="Bill is already paid",
                code="ALREADY_PAID",
                details={"bill_id": bill.pk}
            )

        order = self.gateway.create_order(bill.amount, receipt=f"bill_{bill.pk}")
        # A newer order replaces the previous one
        self.bill_repo.get_all(pk=bill.pk, status=BillStatus.UNPAID).update(order_id=order["id"])
        self.log_info("Payment order created", bill_id=bill.pk, order_id=order["id"])
        return order

    def verify_and_settle(self, order_id, payment_id, signature, bill_id, user):
        """
        Check the gateway signature and mark the bill paid.

        Nothing is recorded when the signature does not match, when the order
        was opened for a different bill, or when the payment already settled
        another bill.

        Raises:
            SignatureMismatchError: signature does not verify
            ValidationError: order does not belong to the bill, or payment reused
            NotFoundError, PermissionDeniedError: as for create_order
            AlreadyPaidError: bill was settled before
        """
        bill = self._get_owned_bill(bill_id, user)
        if not self.gateway.verify_signature(order_id, payment_id, signature):
            self.log_warning("Payment signature mismatch", bill_id=bill.pk, order_id=order_id)
            raise SignatureMismatchError(details={"order_id": order_id})

        if not bill.order_id or bill.order_id != order_id:
            self.log_warning("Payment order does not match bill", bill_id=bill.pk, order_id=order_id)
            raise ValidationError(
                message="Payment order does not belong to this bill",
                code="ORDER_MISMATCH",
                details={"razorpay_order_id": order_id, "bill_id": bill.pk}
            )

        with transaction.atomic():
            if self.bill_repo.get_all(transaction_ref=payment_id).exclude(pk=bill.pk).exists():
                self.log_warning("Payment already used for another bill", bill_id=bill.pk, payment_id=payment_id)
                raise ValidationError(
                    message="Payment has already been recorded for another bill",
                    code="PAYMENT_REUSED",
                    details={"razorpay_payment_id": payment_id}
                )

            bill = self.billing.mark_paid(bill.pk, transaction_ref=payment_id)
            if bill.tenant is not None:
                subject, body = receipt_message(bill.tenant, bill)
                notify_after_commit(bill.tenant.email, subject, body)

        self.log_info("Payment settled", bill_id=bill.pk, payment_id=payment_id)
        return bill

    def _get_owned_bill(self, bill_id, user):
        bill = self.bill_repo.get_by_id_or_raise(bill_id)
        if not is_pg_admin(user):
            tenant = get_tenant(user)
            if tenant is None or bill.tenant_id != tenant.pk:
                raise PermissionDeniedError(message="This bill does not belong to you")
        return bill
