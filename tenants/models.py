from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator
from core.constants import IdType


DEFAULT_PROFILE_PHOTO = "https://icon-library.com/images/anonymous-avatar-icon/anonymous-avatar-icon-25.jpg"


class Tenant(models.Model):
    """
    Active occupant of the PG.

    created_at doubles as the move-in date. room_no mirrors the tenant's entry
    in Room.current_tenants; both sides are written by OccupancyService.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='tenant_profile'
    )
    name = models.CharField(max_length=255)
    email = models.EmailField(unique=True)
    phone = models.CharField(max_length=15)

    # Room & Deposit
    room_no = models.CharField(max_length=10, null=True, blank=True)
    deposit = models.DecimalField(max_digits=10, decimal_places=2, default=0, validators=[MinValueValidator(0)])

    # Identity documents (URLs returned by the document store)
    id_type = models.CharField(max_length=10, choices=IdType.CHOICES)
    id_number = models.CharField(max_length=50)
    id_proof = models.URLField(max_length=500)
    profile_photo = models.URLField(max_length=500, blank=True, default=DEFAULT_PROFILE_PHOTO)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['room_no', 'name']
        verbose_name = "Tenant"
        verbose_name_plural = "Tenants"
        indexes = [
            models.Index(fields=['room_no'], name='tenant_room_idx'),
            models.Index(fields=['created_at'], name='tenant_created_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.room_no or 'no room'})"

    @property
    def joined_at(self):
        return self.created_at
