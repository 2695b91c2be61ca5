"""
Test data helpers shared by the app test suites.
"""
from django.contrib.auth import get_user_model
from rooms.models import Room
from tenants.models import Tenant


def make_room(room_no="101", floor=None, **kwargs):
    floor = floor if floor is not None else int(room_no[0])
    return Room.objects.create(room_no=room_no, floor=floor, **kwargs)


def make_admin(username="admin@pg.test"):
    return get_user_model().objects.create_user(
        username=username, email=username, password="adminpass123", is_staff=True
    )


def make_tenant(name="Asha", email=None, room=None, with_user=True, **kwargs):
    """
    Create a tenant and put it into room (a Room instance) the way onboarding does,
    without going through the service.
    """
    email = email or f"{name.lower()}@pg.test"
    user = None
    if with_user:
        user = get_user_model().objects.create_user(username=email, email=email, password="tenantpass123")
    fields = dict(
        user=user,
        name=name,
        email=email,
        phone="9876543210",
        id_type="aadhar",
        id_number="1234-5678-9012",
        id_proof="https://docs.example.com/id/1.png",
    )
    fields.update(kwargs)
    tenant = Tenant.objects.create(**fields)
    if room is not None:
        room.refresh_from_db()
        room.current_tenants = list(room.current_tenants) + [tenant.pk]
        room.save()
        tenant.room_no = room.room_no
        tenant.save(update_fields=['room_no'])
    return tenant
