from django.db import models
from django.core.validators import MinValueValidator
from core.constants import BillType, BillStatus
from tenants.models import Tenant


class Bill(models.Model):
    """
    System-generated charge (monthly rent or an electricity share).
    At most one bill per (tenant, month, year, type), enforced by the database.
    """
    tenant = models.ForeignKey(Tenant, on_delete=models.SET_NULL, null=True, blank=True, related_name='bills')
    room_no = models.CharField(max_length=10, help_text="Room at the time the bill was raised")
    month = models.CharField(max_length=10, help_text="e.g., 'January'")
    year = models.PositiveSmallIntegerField()
    amount = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    type = models.CharField(max_length=20, choices=BillType.CHOICES, default=BillType.RENT)
    status = models.CharField(max_length=10, choices=BillStatus.CHOICES, default=BillStatus.UNPAID)
    due_date = models.DateField()

    # Gateway order opened for this bill; a payment only settles the bill it was ordered for
    order_id = models.CharField(max_length=100, blank=True)
    # Filled when the payment gateway confirms the payment
    transaction_ref = models.CharField(max_length=100, blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Bill"
        verbose_name_plural = "Bills"
        constraints = [
            models.UniqueConstraint(
                fields=['tenant', 'month', 'year', 'type'],
                name='unique_bill_per_tenant_period_type'
            ),
        ]
        indexes = [
            models.Index(fields=['month', 'year'], name='bill_period_idx'),
            models.Index(fields=['tenant', 'status'], name='bill_tenant_status_idx'),
        ]

    def __str__(self):
        return f"{self.type} {self.month} {self.year} - Room {self.room_no} ({self.status})"

    @property
    def is_paid(self):
        return self.status == BillStatus.PAID
