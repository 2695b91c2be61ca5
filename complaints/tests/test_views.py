from rest_framework import status
from rest_framework.test import APITestCase

from common.tests.factories import make_admin, make_room, make_tenant
from complaints.models import Complaint
from core.constants import ComplaintStatus


class ComplaintViewSetTest(APITestCase):
    def setUp(self):
        self.admin = make_admin()
        room = make_room("101")
        self.asha = make_tenant("Asha", room=room)
        self.bina = make_tenant("Bina", room=room)
        self.list_url = "/api/complaints/"

    def test_tenant_raises_complaint(self):
        self.client.force_authenticate(user=self.asha.user)

        response = self.client.post(self.list_url, {"description": "Fan not working"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        complaint = Complaint.objects.get()
        self.assertEqual(complaint.tenant, self.asha)
        self.assertEqual(complaint.room_no, "101")
        self.assertEqual(complaint.status, ComplaintStatus.OPEN)

    def test_description_required(self):
        self.client.force_authenticate(user=self.asha.user)

        response = self.client.post(self.list_url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_tenant_sees_only_own_complaints(self):
        Complaint.objects.create(tenant=self.asha, room_no="101", description="Leaking tap")
        Complaint.objects.create(tenant=self.bina, room_no="101", description="No hot water")
        self.client.force_authenticate(user=self.asha.user)

        response = self.client.get(self.list_url)

        self.assertEqual(response.data["count"], 1)
        self.assertEqual(response.data["results"][0]["description"], "Leaking tap")

    def test_admin_resolves(self):
        complaint = Complaint.objects.create(tenant=self.asha, room_no="101", description="Leaking tap")
        self.client.force_authenticate(user=self.admin)

        response = self.client.post(f"{self.list_url}{complaint.pk}/resolve/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        complaint.refresh_from_db()
        self.assertEqual(complaint.status, ComplaintStatus.RESOLVED)
        self.assertIsNotNone(complaint.resolved_at)

    def test_admin_reopens_with_patch(self):
        complaint = Complaint.objects.create(tenant=self.asha, room_no="101", description="Leaking tap",
                                             status=ComplaintStatus.RESOLVED)
        self.client.force_authenticate(user=self.admin)

        response = self.client.patch(f"{self.list_url}{complaint.pk}/", {"status": "Open"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        complaint.refresh_from_db()
        self.assertIsNone(complaint.resolved_at)

    def test_tenant_cannot_resolve(self):
        complaint = Complaint.objects.create(tenant=self.asha, room_no="101", description="Leaking tap")
        self.client.force_authenticate(user=self.asha.user)

        response = self.client.post(f"{self.list_url}{complaint.pk}/resolve/")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
