from django.db import models
from django.utils import timezone


class PastTenant(models.Model):
    """
    Archive record of a tenant who has left.
    Created only by the checkout flow and never updated afterwards.
    """
    original_id = models.CharField(max_length=64, help_text="ID of the tenant record before checkout")
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=15)
    room_no = models.CharField(max_length=10, blank=True)

    # ID & photos - URLs are kept so the documents stay reachable
    id_type = models.CharField(max_length=10, blank=True)
    id_number = models.CharField(max_length=50, blank=True)
    id_proof = models.URLField(max_length=500, blank=True)
    profile_photo = models.URLField(max_length=500, blank=True)

    # Stay details
    joined_at = models.DateTimeField(null=True, blank=True)
    left_at = models.DateTimeField(default=timezone.now)

    deposit = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    reason_for_leaving = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-left_at']
        verbose_name = "Past Tenant"
        verbose_name_plural = "Past Tenants"
        indexes = [
            models.Index(fields=['left_at'], name='pasttenant_left_idx'),
            models.Index(fields=['original_id'], name='pasttenant_original_idx'),
        ]

    def __str__(self):
        return f"{self.name} - Room {self.room_no} (left {self.left_at:%Y-%m-%d})"

    def save(self, *args, **kwargs):
        """Archive records are append-only"""
        if self.pk is not None and not self._state.adding:
            raise ValueError("Past tenant records are immutable")
        super().save(*args, **kwargs)
