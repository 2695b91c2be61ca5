from django.db import models
from django.utils import timezone
from core.constants import ComplaintStatus
from tenants.models import Tenant


class Complaint(models.Model):
    """Complaint raised by a tenant"""
    tenant = models.ForeignKey(Tenant, on_delete=models.SET_NULL, related_name='complaints',
                               null=True, blank=True)
    room_no = models.CharField(max_length=10, blank=True, help_text="Room at the time of the complaint")
    description = models.TextField()
    image_url = models.URLField(max_length=500, blank=True)
    status = models.CharField(max_length=10, choices=ComplaintStatus.CHOICES, default=ComplaintStatus.OPEN)
    resolved_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Complaint"
        verbose_name_plural = "Complaints"
        indexes = [
            models.Index(fields=['status', 'created_at'], name='complaint_status_idx'),
            models.Index(fields=['tenant', 'status'], name='complaint_tenant_idx'),
        ]

    def __str__(self):
        return f"Room {self.room_no or '-'} - {self.status}"

    def save(self, *args, **kwargs):
        """Auto-set resolved_at when status changes to Resolved"""
        if self.status == ComplaintStatus.RESOLVED and not self.resolved_at:
            self.resolved_at = timezone.now()
        elif self.status != ComplaintStatus.RESOLVED:
            self.resolved_at = None
        super().save(*args, **kwargs)
