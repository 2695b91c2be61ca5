from django.db import models
from django.core.validators import MinValueValidator
from core.constants import RentProofStatus
from tenants.models import Tenant


class RentProof(models.Model):
    """Manually submitted rent payment proof (receipt, screenshot, etc.)"""
    tenant = models.ForeignKey(Tenant, on_delete=models.SET_NULL, null=True, blank=True, related_name='rent_proofs')
    month = models.CharField(max_length=10, help_text="e.g., 'January'")
    year = models.PositiveSmallIntegerField()
    amount = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    proof_url = models.URLField(max_length=500, help_text="Uploaded payment proof")
    status = models.CharField(max_length=10, choices=RentProofStatus.CHOICES, default=RentProofStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Rent Proof"
        verbose_name_plural = "Rent Proofs"
        indexes = [
            models.Index(fields=['month', 'year'], name='rentproof_period_idx'),
            models.Index(fields=['tenant', 'status'], name='rentproof_tenant_status_idx'),
        ]

    def __str__(self):
        name = self.tenant.name if self.tenant_id else 'former tenant'
        return f"{name} - {self.month} {self.year} - {self.status}"
