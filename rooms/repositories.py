"""
Room repository - Data access layer for the Room domain.
"""
from typing import Optional, List, Iterable
from core.repositories import BaseRepository
from .models import Room


class RoomRepository(BaseRepository[Room]):
    """Repository for Room model"""

    def __init__(self):
        super().__init__(Room)

    def lock_by_room_no(self, room_no: str) -> Optional[Room]:
        """Lock a room row for the rest of the current transaction"""
        return self.get_for_update(room_no=room_no)

    def lock_many(self, room_nos: Iterable[str]) -> dict:
        """Lock several rooms in a stable order to avoid deadlocks"""
        locked = {}
        for room_no in sorted(set(room_nos)):
            room = self.lock_by_room_no(room_no)
            if room is not None:
                locked[room_no] = room
        return locked

    def existing_room_nos(self) -> List[str]:
        return list(self.model.objects.values_list('room_no', flat=True))
