"""
Rent tracking report.

Merges manual rent proofs and system bills into one payment-state row per
tenant for a billing period. A manual proof always wins over a bill, a paid
bill over an unpaid one.
"""
import calendar
from datetime import datetime
from decimal import Decimal
from typing import Dict, List
from django.utils import timezone
from core.constants import MONTHS, BillType, BillStatus, ReportStatus
from core.dto import ReportRow
from core.services import BaseService
from core.validators import PeriodValidator
from billing.models import Bill
from tenants.repositories import TenantRepository
from .models import RentProof


def period_cutoff(month: str, year: int) -> datetime:
    """Last instant of the month, in the project time zone"""
    month_number = MONTHS.index(month) + 1
    last_day = calendar.monthrange(year, month_number)[1]
    return timezone.make_aware(
        datetime(year, month_number, last_day, 23, 59, 59, 999999),
        timezone.get_current_timezone()
    )


class RentReportMerger(BaseService):
    """Builds the per-tenant rent tracking report for a month"""

    def __init__(self):
        super().__init__()
        self.tenant_repo = TenantRepository()

    def build(self, month, year) -> List[ReportRow]:
        """
        One row per tenant that had a room and had moved in by the end of the
        period, ordered by room then name.

        Raises:
            ValidationError: malformed month or year
        """
        month, year = PeriodValidator.validate_period(month, year)
        cutoff = period_cutoff(month, year)

        tenants = list(self.tenant_repo.get_housed_joined_by(cutoff).order_by('room_no', 'name'))
        tenant_ids = [tenant.id for tenant in tenants]

        proofs = self._latest_proofs(tenant_ids, month, year)
        bills = self._bills_by_tenant(tenant_ids, month, year)

        rows = [self._row_for(tenant, proofs.get(tenant.id), bills.get(tenant.id)) for tenant in tenants]
        self.log_info("Rent report built", month=month, year=year, rows=len(rows))
        return rows

    def _latest_proofs(self, tenant_ids, month, year) -> Dict[int, RentProof]:
        latest = {}
        queryset = RentProof.objects.filter(
            tenant_id__in=tenant_ids, month=month, year=year
        ).order_by('-created_at', '-id')
        for proof in queryset:
            latest.setdefault(proof.tenant_id, proof)
        return latest

    def _bills_by_tenant(self, tenant_ids, month, year) -> Dict[int, Bill]:
        """Rent bill of each tenant, or its Electricity bill when there is no Rent bill"""
        chosen = {}
        for bill in Bill.objects.filter(tenant_id__in=tenant_ids, month=month, year=year):
            current = chosen.get(bill.tenant_id)
            if current is None or (bill.type == BillType.RENT and current.type != BillType.RENT):
                chosen[bill.tenant_id] = bill
        return chosen

    @staticmethod
    def _row_for(tenant, proof, bill) -> ReportRow:
        row = ReportRow(
            tenant_id=tenant.id,
            name=tenant.name,
            room_no=tenant.room_no,
            phone=tenant.phone,
        )
        if proof is not None:
            row.status = proof.status
            row.amount = proof.amount
            row.record_id = proof.id
            row.proof_url = proof.proof_url
        elif bill is not None:
            row.status = ReportStatus.PAID_ONLINE if bill.status == BillStatus.PAID else ReportStatus.UNPAID
            row.amount = bill.amount
            row.record_id = bill.id
        else:
            row.status = ReportStatus.NOT_PAID
            row.amount = Decimal('0')
        return row
