"""
Occupancy service - keeps Room.current_tenants, occupant_count and status
consistent with the tenants that actually live in each room.

Room and Tenant reference each other (room lists tenant ids, tenant stores its
room number). Every mutation of either side goes through this service; the
reconcile pass repairs drift left behind by partial writes.
"""
from typing import Iterable, Optional
from django.db import transaction
from core.services import BaseService
from core.constants import RoomLayout
from core.exceptions import (
    NotFoundError, CapacityExceededError, TargetFullError, ValidationError,
)
from .models import Room, derive_room_status
from .repositories import RoomRepository


def _as_tenant_id(value) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class OccupancyService(BaseService):
    """Single authority for room occupancy"""

    def __init__(self):
        super().__init__()
        self.room_repo = RoomRepository()

    def assign(self, tenant, room_no: str) -> Room:
        """
        Put tenant into room_no.

        Raises:
            NotFoundError: room does not exist
            CapacityExceededError: room already holds `capacity` tenants
        """
        with transaction.atomic():
            room = self.room_repo.lock_by_room_no(room_no)
            if room is None:
                raise NotFoundError(resource_type="Room", resource_id=room_no)
            self._add_occupant(room, tenant, CapacityExceededError)
            tenant.room_no = room.room_no
            tenant.save(update_fields=['room_no', 'updated_at'])

        self.log_info("Tenant assigned", tenant_id=tenant.pk, room_no=room_no,
                      occupants=room.occupant_count)
        return room

    def release(self, tenant_id: int, room_no: Optional[str]) -> Optional[Room]:
        """Remove tenant_id from room_no. Missing room or occupant is a no-op."""
        if not room_no:
            return None
        with transaction.atomic():
            room = self.room_repo.lock_by_room_no(room_no)
            if room is None:
                self.log_warning("Release skipped, room not found", tenant_id=tenant_id, room_no=room_no)
                return None
            self._remove_occupant(room, tenant_id)

        self.log_info("Tenant released", tenant_id=tenant_id, room_no=room_no,
                      occupants=room.occupant_count)
        return room

    def transfer(self, tenant, from_room_no: Optional[str], to_room_no: str) -> Room:
        """
        Move tenant between rooms as one unit.

        Destination capacity is checked before the source room is touched, so a
        failed transfer leaves both rooms as they were.

        Raises:
            ValidationError: source and destination are the same room
            NotFoundError: destination room does not exist
            TargetFullError: destination room is full
        """
        if from_room_no and from_room_no == to_room_no:
            raise ValidationError(
                message=f"Tenant is already in room {to_room_no}",
                code="SAME_ROOM",
                details={"new_room_no": "Must differ from the current room."}
            )

        with transaction.atomic():
            locked = self.room_repo.lock_many([r for r in (from_room_no, to_room_no) if r])
            target = locked.get(to_room_no)
            if target is None:
                raise NotFoundError(resource_type="Room", resource_id=to_room_no,
                                    message="Target room not found")
            if target.is_full and tenant.pk not in self._occupant_ids(target):
                raise TargetFullError(details={"room_no": to_room_no, "occupants": target.occupant_count})

            source = locked.get(from_room_no) if from_room_no else None
            if source is not None:
                self._remove_occupant(source, tenant.pk)

            self._add_occupant(target, tenant, TargetFullError)
            tenant.room_no = target.room_no
            tenant.save(update_fields=['room_no', 'updated_at'])

        self.log_info("Tenant transferred", tenant_id=tenant.pk,
                      from_room=from_room_no, to_room=to_room_no)
        return target

    def reconcile(self, rooms: Optional[Iterable[Room]] = None, dry_run: bool = False) -> int:
        """
        Repair derived occupancy fields for every room.

        Dangling tenant ids are dropped, count and status recomputed, and only
        rooms whose stored values disagree are written. The given rooms are
        only used to find candidates: each correction re-reads its room under
        a row lock, so assignments committed in the meantime are kept.
        Returns the number of rooms corrected (or that would be, with dry_run).
        """
        rooms = list(rooms) if rooms is not None else list(self.room_repo.get_queryset())
        live_ids = self._live_ids(rooms)

        corrected = 0
        for room in rooms:
            if self._occupancy_fix(room, live_ids) is None:
                continue

            if dry_run:
                corrected += 1
                self.log_info("Room occupancy drift detected", room_no=room.room_no)
                continue

            with transaction.atomic():
                fresh = self.room_repo.lock_by_room_no(room.room_no)
                if fresh is None:
                    continue
                fix = self._occupancy_fix(fresh, self._live_ids([fresh]))
                if fix is None:
                    continue
                valid, count, desired_status = fix
                self.log_info(
                    "Room occupancy corrected",
                    room_no=fresh.room_no,
                    count=f"{fresh.occupant_count} -> {count}",
                    status=f"{fresh.status} -> {desired_status}",
                )
                fresh.current_tenants = valid
                fresh.save(update_fields=['current_tenants'])
            corrected += 1

        return corrected

    @staticmethod
    def _live_ids(rooms) -> set:
        from tenants.repositories import TenantRepository

        referenced = {
            tid for room in rooms for tid in map(_as_tenant_id, room.current_tenants or []) if tid is not None
        }
        return TenantRepository().existing_ids(referenced)

    @staticmethod
    def _occupancy_fix(room: Room, live_ids):
        """(valid ids, count, status) when the stored occupancy disagrees, else None"""
        stored_list = list(room.current_tenants or [])
        valid = []
        for raw in stored_list:
            tid = _as_tenant_id(raw)
            if tid in live_ids and tid not in valid:
                valid.append(tid)
        count = len(valid)
        desired_status = derive_room_status(count)

        if stored_list == valid and room.occupant_count == count and room.status == desired_status:
            return None
        return valid, count, desired_status

    def seed_rooms(self) -> int:
        """Create the fixed floor/room layout. Existing rooms are left untouched."""
        existing = set(self.room_repo.existing_room_nos())
        to_create = []
        for floor in range(1, RoomLayout.FLOORS + 1):
            for number in range(1, RoomLayout.ROOMS_PER_FLOOR + 1):
                room_no = f"{floor}{number:02d}"
                if room_no not in existing:
                    room = Room(room_no=room_no, floor=floor)
                    room.sync_occupancy()
                    to_create.append(room)
        if to_create:
            self.room_repo.bulk_create(to_create)
        self.log_info("Rooms seeded", created=len(to_create), existing=len(existing))
        return len(to_create)

    def update_price(self, room_no: str, price) -> Room:
        from core.validators import AmountValidator

        value = AmountValidator.validate_positive_amount(price, field_name="price")
        with transaction.atomic():
            room = self.room_repo.lock_by_room_no(room_no)
            if room is None:
                raise NotFoundError(resource_type="Room", resource_id=room_no)
            room.price = value
            room.save(update_fields=['price', 'updated_at'])
        self.log_info("Room price updated", room_no=room_no, price=str(value))
        return room

    @staticmethod
    def _occupant_ids(room: Room):
        return [_as_tenant_id(raw) for raw in room.current_tenants or []]

    def _add_occupant(self, room: Room, tenant, full_error):
        occupants = self._occupant_ids(room)
        if tenant.pk in occupants:
            return
        if len(occupants) >= room.capacity:
            raise full_error(details={"room_no": room.room_no, "occupants": len(occupants)})
        room.current_tenants = list(room.current_tenants or []) + [tenant.pk]
        room.save(update_fields=['current_tenants'])

    def _remove_occupant(self, room: Room, tenant_id: int):
        remaining = [raw for raw in room.current_tenants or [] if _as_tenant_id(raw) != tenant_id]
        if len(remaining) == len(room.current_tenants or []):
            return
        room.current_tenants = remaining
        room.save(update_fields=['current_tenants'])
