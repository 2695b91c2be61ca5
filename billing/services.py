"""
Billing service - generates rent and electricity bills without duplicates.

Duplicate prevention has two layers: an existence check keeps re-runs quiet,
and the (tenant, month, year, type) unique constraint is the authoritative
guard when two runs race.
"""
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional
from django.db import transaction
from django.utils import timezone
from core.services import BaseService
from core.constants import MONTHS, BillType, BillStatus, DefaultLimits
from core.dto import BillingRunResult
from core.exceptions import NotFoundError, AlreadyPaidError, DuplicateError, ValidationError
from core.validators import AmountValidator, PeriodValidator
from common.notifications import send_notification, bill_message
from rooms.models import default_room_price
from rooms.repositories import RoomRepository
from tenants.repositories import TenantRepository
from .models import Bill
from .repositories import BillRepository


def billing_period(as_of: date):
    """(month name, year) for a date"""
    return MONTHS[as_of.month - 1], as_of.year


def rent_due_date(as_of: date) -> date:
    return as_of.replace(day=DefaultLimits.RENT_DUE_DAY)


def split_amount(total: Decimal, parts: int) -> Decimal:
    """
    Equal share rounded to 2 decimals. The shares may not add up to the
    total exactly (1000 / 3 -> 333.33 each).
    """
    return (Decimal(total) / parts).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


class BillingService(BaseService):
    """Service for bill generation and settlement"""

    def __init__(self):
        super().__init__()
        self.bill_repo = BillRepository()
        self.room_repo = RoomRepository()
        self.tenant_repo = TenantRepository()

    def generate_monthly_rent(self, as_of: Optional[date] = None, dry_run: bool = False) -> BillingRunResult:
        """
        Raise one Rent bill per housed tenant for the month of as_of.

        Safe to call any number of times per month: tenants that already have
        a Rent bill for the period are skipped.
        """
        as_of = as_of or timezone.localdate()
        month, year = billing_period(as_of)
        due_date = rent_due_date(as_of)
        result = BillingRunResult(month=month, year=year)

        tenants = list(self.tenant_repo.get_housed())
        if not tenants:
            self.log_info("No tenants found to bill", month=month, year=year)
            return result

        rooms = {room.room_no: room for room in self.room_repo.get_all(
            room_no__in={tenant.room_no for tenant in tenants})}

        for tenant in tenants:
            room = rooms.get(tenant.room_no)
            amount = room.effective_price if room is not None else default_room_price()

            if self.bill_repo.exists_for_period(tenant.id, month, year, BillType.RENT):
                result.skipped += 1
                self.log_info("Skipping tenant, bill already exists", tenant_id=tenant.id, month=month, year=year)
                continue

            if dry_run:
                result.created.append(Bill(tenant=tenant, room_no=tenant.room_no, month=month, year=year,
                                           amount=amount, type=BillType.RENT, due_date=due_date))
                continue

            try:
                bill = self.bill_repo.create_unique(
                    tenant=tenant,
                    room_no=tenant.room_no,
                    amount=amount,
                    month=month,
                    year=year,
                    due_date=due_date,
                    type=BillType.RENT,
                    status=BillStatus.UNPAID,
                )
            except DuplicateError:
                result.skipped += 1
                self.log_info("Skipping tenant, bill created concurrently", tenant_id=tenant.id)
                continue

            result.created.append(bill)
            self.log_info(f"Generated bill for {tenant.name} ({tenant.room_no}): {amount}",
                          bill_id=bill.id, month=month, year=year)
            subject, body = bill_message(tenant, bill)
            send_notification(tenant.email, subject, body)

        self.log_info("Bill generation complete", month=month, year=year,
                      created=result.created_count, skipped=result.skipped)
        return result

    def create_electricity_split(self, total_amount, tenant_ids: Iterable, month: Optional[str] = None,
                                 year=None) -> List[Bill]:
        """
        Split an electricity charge equally across tenants.

        Tenants that do not exist or already have an Electricity bill for the
        period are skipped; the bills actually created are returned.

        Raises:
            ValidationError: empty tenant list, non-positive amount or bad period
        """
        tenant_ids = list(tenant_ids or [])
        if not tenant_ids:
            raise ValidationError(message="At least one tenant is required", code="MISSING_TENANTS",
                                  details={"tenant_ids": "At least one tenant is required."})
        total = AmountValidator.validate_positive_amount(total_amount)

        today = timezone.localdate()
        bill_month = PeriodValidator.validate_month(month) if month else billing_period(today)[0]
        bill_year = PeriodValidator.validate_year(year) if year else today.year
        share = split_amount(total, len(tenant_ids))
        due_date = today + timedelta(days=DefaultLimits.ELECTRICITY_DUE_DAYS)

        created = []
        for tenant_id in tenant_ids:
            tenant = self._find_tenant(tenant_id)
            if tenant is None:
                self.log_warning("Electricity bill skipped, tenant not found", tenant_id=tenant_id)
                continue
            if self.bill_repo.exists_for_period(tenant.id, bill_month, bill_year, BillType.ELECTRICITY):
                continue

            try:
                bill = self.bill_repo.create_unique(
                    tenant=tenant,
                    room_no=tenant.room_no or 'N/A',
                    amount=share,
                    month=bill_month,
                    year=bill_year,
                    due_date=due_date,
                    type=BillType.ELECTRICITY,
                    status=BillStatus.UNPAID,
                )
            except DuplicateError:
                continue
            created.append(bill)

            subject, body = bill_message(tenant, bill)
            send_notification(tenant.email, subject, body)

        self.log_info("Electricity bills created", month=bill_month, year=bill_year,
                      share=str(share), requested=len(tenant_ids), created=len(created))
        return created

    def mark_paid(self, bill_id: int, transaction_ref: str = "") -> Bill:
        """
        Flip a bill to Paid. The caller must have verified the payment first.

        Raises:
            NotFoundError: bill does not exist
            AlreadyPaidError: bill is already paid
        """
        with transaction.atomic():
            bill = self.bill_repo.get_for_update(id=bill_id)
            if bill is None:
                raise NotFoundError(resource_type="Bill", resource_id=bill_id)
            if bill.status == BillStatus.PAID:
                raise AlreadyPaidError(details={"bill_id": bill_id, "transaction_ref": bill.transaction_ref})

            bill.status = BillStatus.PAID
            bill.transaction_ref = transaction_ref or ''
            bill.paid_at = timezone.now()
            bill.save(update_fields=['status', 'transaction_ref', 'paid_at', 'updated_at'])

        self.log_info("Bill marked paid", bill_id=bill_id, transaction_ref=transaction_ref)
        return bill

    def _find_tenant(self, tenant_id):
        try:
            return self.tenant_repo.get_by_id(int(tenant_id))
        except (TypeError, ValueError):
            return None
