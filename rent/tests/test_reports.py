from datetime import date, datetime
from decimal import Decimal

from django.test import TestCase
from django.utils import timezone

from billing.models import Bill
from common.tests.factories import make_room, make_tenant
from core.constants import BillStatus, BillType, ReportStatus, RentProofStatus
from core.exceptions import ValidationError
from rent.models import RentProof
from rent.reports import RentReportMerger, period_cutoff
from tenants.models import Tenant


def joined(tenant, year, month, day, hour=12):
    moment = timezone.make_aware(datetime(year, month, day, hour), timezone.get_current_timezone())
    Tenant.objects.filter(pk=tenant.pk).update(created_at=moment)


class RentReportMergerTest(TestCase):
    def setUp(self):
        self.room = make_room("101")
        self.tenant = make_tenant("Asha", room=self.room)
        joined(self.tenant, 2025, 1, 2)

    def bill(self, tenant=None, bill_type=BillType.RENT, bill_status=BillStatus.UNPAID, amount=1500):
        return Bill.objects.create(tenant=tenant or self.tenant, room_no="101", month="January", year=2025,
                                   amount=amount, type=bill_type, status=bill_status,
                                   due_date=date(2025, 1, 5))

    def proof(self, proof_status=RentProofStatus.PENDING, amount=1500):
        return RentProof.objects.create(tenant=self.tenant, month="January", year=2025, amount=amount,
                                        proof_url="https://docs.example.com/proof.png", status=proof_status)

    def build(self):
        return RentReportMerger().build("January", 2025)

    def test_unpaid_bill(self):
        bill = self.bill()

        rows = self.build()

        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0].status, ReportStatus.UNPAID)
        self.assertEqual(rows[0].amount, Decimal("1500"))
        self.assertEqual(rows[0].record_id, bill.id)
        self.assertIsNone(rows[0].proof_url)

    def test_paid_bill(self):
        self.bill(bill_status=BillStatus.PAID)

        self.assertEqual(self.build()[0].status, ReportStatus.PAID_ONLINE)

    def test_manual_proof_takes_precedence_over_bill(self):
        self.bill()
        proof = self.proof(amount=1400)

        row = self.build()[0]

        self.assertEqual(row.status, RentProofStatus.PENDING)
        self.assertEqual(row.amount, Decimal("1400"))
        self.assertEqual(row.record_id, proof.id)
        self.assertEqual(row.proof_url, "https://docs.example.com/proof.png")

    def test_most_recent_proof_wins(self):
        self.proof(proof_status=RentProofStatus.REJECTED)
        latest = self.proof(proof_status=RentProofStatus.APPROVED)

        row = self.build()[0]

        self.assertEqual(row.status, RentProofStatus.APPROVED)
        self.assertEqual(row.record_id, latest.id)

    def test_no_records(self):
        row = self.build()[0]

        self.assertEqual(row.status, ReportStatus.NOT_PAID)
        self.assertEqual(row.amount, Decimal("0"))
        self.assertIsNone(row.record_id)

    def test_rent_bill_preferred_over_electricity(self):
        self.bill(bill_type=BillType.ELECTRICITY, bill_status=BillStatus.PAID, amount=300)
        rent = self.bill()

        row = self.build()[0]

        self.assertEqual(row.record_id, rent.id)
        self.assertEqual(row.status, ReportStatus.UNPAID)

    def test_electricity_bill_used_when_no_rent_bill(self):
        electricity = self.bill(bill_type=BillType.ELECTRICITY, amount=300)

        row = self.build()[0]

        self.assertEqual(row.record_id, electricity.id)
        self.assertEqual(row.amount, Decimal("300"))

    def test_tenant_who_joined_next_month_is_excluded(self):
        late = make_tenant("Bina", room=self.room)
        joined(late, 2025, 2, 1, hour=0)

        rows = self.build()

        self.assertEqual([row.tenant_id for row in rows], [self.tenant.pk])

    def test_tenant_who_joined_on_last_day_is_included(self):
        late = make_tenant("Bina", room=self.room)
        joined(late, 2025, 1, 31, hour=23)

        self.assertEqual(len(self.build()), 2)

    def test_tenant_without_room_is_excluded(self):
        roomless = make_tenant("Chitra")
        joined(roomless, 2025, 1, 2)

        self.assertEqual(len(self.build()), 1)

    def test_rows_ordered_by_room_then_name(self):
        other_room = make_room("102")
        zara = make_tenant("Zara", room=other_room)
        bina = make_tenant("Bina", room=self.room)
        for tenant in (zara, bina):
            joined(tenant, 2025, 1, 3)

        names = [row.name for row in self.build()]

        self.assertEqual(names, ["Asha", "Bina", "Zara"])

    def test_proofs_of_other_periods_ignored(self):
        RentProof.objects.create(tenant=self.tenant, month="February", year=2025, amount=1500,
                                 proof_url="https://docs.example.com/feb.png")

        self.assertEqual(self.build()[0].status, ReportStatus.NOT_PAID)

    def test_bad_period(self):
        with self.assertRaises(ValidationError):
            RentReportMerger().build("Smarch", 2025)

    def test_cutoff_is_last_instant_of_month(self):
        cutoff = period_cutoff("February", 2024)

        local = timezone.localtime(cutoff)
        self.assertEqual((local.month, local.day, local.hour, local.minute), (2, 29, 23, 59))
