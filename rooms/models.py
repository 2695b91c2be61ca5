from decimal import Decimal
from django.conf import settings
from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from core.constants import RoomStatus, DefaultLimits


def default_room_price():
    """Fallback monthly rent for rooms without a price"""
    return Decimal(str(getattr(settings, 'PG_DEFAULT_ROOM_PRICE', DefaultLimits.DEFAULT_ROOM_PRICE)))


def derive_room_status(occupant_count):
    """Status is a pure function of the occupant count"""
    if occupant_count <= 0:
        return RoomStatus.VACANT
    if occupant_count == 1:
        return RoomStatus.PARTIALLY_OCCUPIED
    return RoomStatus.OCCUPIED


class Room(models.Model):
    """
    Room in the PG - up to two beds.

    current_tenants holds tenant ids in assignment order. It is a denormalized
    copy of Tenant.room_no, kept in sync by OccupancyService; ids may dangle
    after a partial write until the reconcile pass drops them.
    """
    room_no = models.CharField(max_length=10, unique=True, help_text="e.g., '101', '305'")
    floor = models.PositiveSmallIntegerField()
    capacity = models.PositiveSmallIntegerField(
        default=DefaultLimits.ROOM_CAPACITY,
        validators=[MinValueValidator(1), MaxValueValidator(DefaultLimits.ROOM_CAPACITY)]
    )
    current_tenants = models.JSONField(default=list, blank=True)
    occupant_count = models.PositiveSmallIntegerField(default=0, editable=False)
    status = models.CharField(
        max_length=20, choices=RoomStatus.CHOICES, default=RoomStatus.VACANT, editable=False
    )
    price = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(0)],
        help_text="Monthly rent. Falls back to the default room price when empty."
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['room_no']
        verbose_name = "Room"
        verbose_name_plural = "Rooms"
        indexes = [
            models.Index(fields=['status'], name='room_status_idx'),
            models.Index(fields=['floor', 'room_no'], name='room_floor_idx'),
        ]

    def __str__(self):
        return f"Room {self.room_no} ({self.status})"

    def sync_occupancy(self):
        """Recompute occupant_count and status from current_tenants"""
        self.current_tenants = list(self.current_tenants or [])
        self.occupant_count = len(self.current_tenants)
        self.status = derive_room_status(self.occupant_count)

    def save(self, *args, **kwargs):
        """Derived occupancy fields always follow current_tenants"""
        self.sync_occupancy()
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'current_tenants' in update_fields:
            kwargs['update_fields'] = set(update_fields) | {'occupant_count', 'status', 'updated_at'}
        super().save(*args, **kwargs)

    @property
    def is_full(self):
        return len(self.current_tenants or []) >= self.capacity

    @property
    def vacant_beds(self):
        return max(0, self.capacity - len(self.current_tenants or []))

    @property
    def effective_price(self):
        """Monthly price used for billing"""
        if self.price:
            return self.price
        return default_room_price()
