from datetime import date, timedelta
from decimal import Decimal
from io import StringIO
from unittest.mock import patch

from django.core import mail
from django.core.management import call_command
from django.test import TestCase, override_settings
from django.utils import timezone

from billing.models import Bill
from billing.repositories import BillRepository
from billing.services import BillingService, split_amount
from common.scheduler import generate_monthly_rent_job
from common.tests.factories import make_room, make_tenant
from core.constants import BillStatus, BillType
from core.exceptions import AlreadyPaidError, DuplicateError, NotFoundError, ValidationError


class GenerateMonthlyRentTest(TestCase):
    def setUp(self):
        self.service = BillingService()
        self.room = make_room("101")
        self.priced_room = make_room("102", price=Decimal("2200"))
        self.asha = make_tenant("Asha", room=self.room)
        self.bina = make_tenant("Bina", room=self.priced_room)
        self.roomless = make_tenant("Chitra")

    def test_one_bill_per_housed_tenant(self):
        result = self.service.generate_monthly_rent(as_of=date(2025, 1, 1))

        self.assertEqual(result.created_count, 2)
        self.assertEqual(result.month, "January")
        bill = Bill.objects.get(tenant=self.asha)
        self.assertEqual(bill.amount, Decimal("1500"))
        self.assertEqual(bill.type, BillType.RENT)
        self.assertEqual(bill.status, BillStatus.UNPAID)
        self.assertEqual(bill.due_date, date(2025, 1, 5))
        self.assertEqual(Bill.objects.get(tenant=self.bina).amount, Decimal("2200"))
        self.assertFalse(Bill.objects.filter(tenant=self.roomless).exists())

    def test_running_twice_creates_no_duplicates(self):
        self.service.generate_monthly_rent(as_of=date(2025, 1, 1))
        second = self.service.generate_monthly_rent(as_of=date(2025, 1, 15))

        self.assertEqual(second.created_count, 0)
        self.assertEqual(second.skipped, 2)
        self.assertEqual(Bill.objects.filter(tenant=self.asha, month="January", year=2025).count(), 1)

    def test_new_month_gets_new_bills(self):
        self.service.generate_monthly_rent(as_of=date(2025, 1, 1))
        self.service.generate_monthly_rent(as_of=date(2025, 2, 1))

        self.assertEqual(Bill.objects.filter(tenant=self.asha).count(), 2)

    def test_race_lost_to_unique_constraint_counts_as_skipped(self):
        Bill.objects.create(tenant=self.asha, room_no="101", month="March", year=2025,
                            amount=1500, due_date=date(2025, 3, 5))
        with patch.object(self.service.bill_repo, "exists_for_period", return_value=False):
            result = self.service.generate_monthly_rent(as_of=date(2025, 3, 1))

        self.assertEqual(result.created_count, 1)
        self.assertEqual(result.skipped, 1)
        self.assertEqual(Bill.objects.filter(tenant=self.asha, month="March").count(), 1)

    def test_dry_run_writes_nothing(self):
        result = self.service.generate_monthly_rent(as_of=date(2025, 1, 1), dry_run=True)

        self.assertEqual(result.created_count, 2)
        self.assertFalse(Bill.objects.exists())

    def test_each_new_bill_is_notified(self):
        self.service.generate_monthly_rent(as_of=date(2025, 1, 1))

        self.assertEqual(sorted(m.to[0] for m in mail.outbox), ["asha@pg.test", "bina@pg.test"])

    @patch("billing.services.send_notification", return_value=False)
    def test_notification_failure_is_not_fatal(self, mock_send):
        result = self.service.generate_monthly_rent(as_of=date(2025, 1, 1))

        self.assertEqual(result.created_count, 2)
        self.assertEqual(mock_send.call_count, 2)


class ElectricitySplitTest(TestCase):
    def setUp(self):
        self.service = BillingService()
        room = make_room("101")
        self.tenants = [make_tenant(name, room=room if i < 2 else None)
                        for i, name in enumerate(["Asha", "Bina", "Chitra"])]

    def test_split_rounds_to_paise(self):
        self.assertEqual(split_amount(Decimal("1000"), 3), Decimal("333.33"))
        self.assertEqual(split_amount(Decimal("100"), 8), Decimal("12.50"))

    def test_three_way_split(self):
        bills = self.service.create_electricity_split(1000, [t.pk for t in self.tenants],
                                                      month="May", year=2025)

        self.assertEqual(len(bills), 3)
        for bill in bills:
            self.assertEqual(bill.amount, Decimal("333.33"))
            self.assertEqual(bill.type, BillType.ELECTRICITY)
            self.assertEqual(bill.due_date, timezone.localdate() + timedelta(days=7))

    def test_empty_tenant_list(self):
        with self.assertRaises(ValidationError):
            self.service.create_electricity_split(1000, [])

    def test_non_positive_amount(self):
        with self.assertRaises(ValidationError):
            self.service.create_electricity_split(0, [self.tenants[0].pk])

    def test_unknown_tenant_skipped(self):
        bills = self.service.create_electricity_split(900, [self.tenants[0].pk, 4242],
                                                      month="May", year=2025)

        self.assertEqual(len(bills), 1)
        self.assertEqual(bills[0].amount, Decimal("450.00"))

    def test_repeat_split_does_not_duplicate(self):
        ids = [self.tenants[0].pk]
        self.service.create_electricity_split(500, ids, month="May", year=2025)
        again = self.service.create_electricity_split(500, ids, month="May", year=2025)

        self.assertEqual(again, [])
        self.assertEqual(Bill.objects.filter(type=BillType.ELECTRICITY).count(), 1)

    def test_bad_month(self):
        with self.assertRaises(ValidationError):
            self.service.create_electricity_split(500, [self.tenants[0].pk], month="Smarch", year=2025)


class MarkPaidTest(TestCase):
    def setUp(self):
        tenant = make_tenant("Asha", room=make_room("101"))
        self.bill = Bill.objects.create(tenant=tenant, room_no="101", month="January", year=2025,
                                        amount=1500, due_date=date(2025, 1, 5))

    def test_mark_paid(self):
        bill = BillingService().mark_paid(self.bill.pk, transaction_ref="pay_123")

        self.assertEqual(bill.status, BillStatus.PAID)
        self.assertEqual(bill.transaction_ref, "pay_123")
        self.assertIsNotNone(bill.paid_at)

    def test_already_paid(self):
        BillingService().mark_paid(self.bill.pk, transaction_ref="pay_123")

        with self.assertRaises(AlreadyPaidError):
            BillingService().mark_paid(self.bill.pk, transaction_ref="pay_456")

        self.bill.refresh_from_db()
        self.assertEqual(self.bill.transaction_ref, "pay_123")

    def test_unknown_bill(self):
        with self.assertRaises(NotFoundError):
            BillingService().mark_paid(4242)


class ScheduledRentJobTest(TestCase):
    def test_job_uses_injected_clock(self):
        make_tenant("Asha", room=make_room("101"))

        result = generate_monthly_rent_job(clock=lambda: date(2025, 6, 1))

        self.assertEqual(result.created_count, 1)
        self.assertTrue(Bill.objects.filter(month="June", year=2025).exists())

    @patch("billing.services.BillingService.generate_monthly_rent", side_effect=RuntimeError("db down"))
    def test_job_logs_and_swallows_errors(self, mock_generate):
        self.assertIsNone(generate_monthly_rent_job(clock=lambda: date(2025, 6, 1)))


@override_settings(PG_DEFAULT_ROOM_PRICE=1800)
class GenerateMonthlyRentCommandTest(TestCase):
    def test_command_with_date(self):
        make_tenant("Asha", room=make_room("101"))
        out = StringIO()

        call_command("generate_monthly_rent", "--date", "2025-04-01", stdout=out)

        bill = Bill.objects.get()
        self.assertEqual(bill.month, "April")
        self.assertEqual(bill.amount, Decimal("1800"))
        self.assertIn("Created: 1", out.getvalue())

    def test_command_dry_run(self):
        make_tenant("Asha", room=make_room("101"))

        call_command("generate_monthly_rent", "--dry-run", stdout=StringIO())

        self.assertFalse(Bill.objects.exists())


class BillRepositoryTest(TestCase):
    def test_second_bill_for_same_period_is_duplicate(self):
        asha = make_tenant("Asha", room=make_room("101"))
        fields = dict(tenant=asha, room_no="101", month="April", year=2025, amount=1500,
                      type=BillType.RENT, due_date=date(2025, 4, 5))
        repo = BillRepository()
        repo.create_unique(**fields)

        with self.assertRaises(DuplicateError):
            repo.create_unique(**fields)

        self.assertEqual(Bill.objects.filter(tenant=asha, month="April").count(), 1)
