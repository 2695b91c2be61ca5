from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from billing.models import Bill
from common.tests.factories import make_admin, make_room, make_tenant
from core.exceptions import NotFoundError
from history.models import PastTenant
from history.services import ArchiveService
from rooms.models import Room
from tenants.models import Tenant


class CheckoutTest(TestCase):
    def setUp(self):
        self.room = make_room("101")
        self.tenant = make_tenant("Asha", room=self.room, deposit=5000)
        self.other = make_tenant("Bina", room=self.room)

    def test_checkout_archives_and_frees_bed(self):
        record = ArchiveService().checkout(self.tenant.pk, reason="Course finished")

        self.room.refresh_from_db()
        self.assertFalse(Tenant.objects.filter(pk=self.tenant.pk).exists())
        self.assertEqual(self.room.current_tenants, [self.other.pk])
        self.assertEqual(self.room.occupant_count, 1)
        self.assertEqual(record.original_id, str(self.tenant.pk))
        self.assertEqual(record.room_no, "101")
        self.assertEqual(record.deposit, 5000)
        self.assertEqual(record.id_proof, self.tenant.id_proof)
        self.assertEqual(record.joined_at, self.tenant.created_at)
        self.assertEqual(record.reason_for_leaving, "Course finished")

    def test_checkout_removes_login_user(self):
        user_id = self.tenant.user_id

        ArchiveService().checkout(self.tenant.pk)

        self.assertFalse(get_user_model().objects.filter(pk=user_id).exists())

    def test_bills_survive_checkout(self):
        bill = Bill.objects.create(tenant=self.tenant, room_no="101", month="January", year=2025,
                                   amount=1500, due_date="2025-01-05")

        ArchiveService().checkout(self.tenant.pk)

        bill.refresh_from_db()
        self.assertIsNone(bill.tenant_id)
        self.assertEqual(bill.room_no, "101")

    def test_unknown_tenant(self):
        with self.assertRaises(NotFoundError):
            ArchiveService().checkout(4242)

        self.assertFalse(PastTenant.objects.exists())

    def test_tenant_without_room(self):
        roomless = make_tenant("Chitra")

        record = ArchiveService().checkout(roomless.pk)

        self.assertEqual(record.room_no, "")
        self.assertEqual(Room.objects.get(room_no="101").occupant_count, 2)

    def test_archive_records_are_immutable(self):
        record = ArchiveService().checkout(self.tenant.pk)
        record.name = "Changed"

        with self.assertRaises(ValueError):
            record.save()


class PastTenantViewSetTest(APITestCase):
    def setUp(self):
        self.admin = make_admin()
        room = make_room("101")
        self.first = make_tenant("Asha", room=room)
        self.second = make_tenant("Bina", room=room)

    def test_most_recent_leavers_first(self):
        ArchiveService().checkout(self.first.pk)
        ArchiveService().checkout(self.second.pk)
        self.client.force_authenticate(user=self.admin)

        response = self.client.get("/api/history/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = [row["name"] for row in response.data["results"]]
        self.assertEqual(names, ["Bina", "Asha"])

    def test_tenant_cannot_read_history(self):
        self.client.force_authenticate(user=self.first.user)

        response = self.client.get("/api/history/")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
