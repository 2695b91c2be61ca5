"""
Rent proof service - manual payment proofs submitted by tenants and reviewed by the admin.
"""
from core.services import BaseService
from core.constants import RentProofStatus
from core.exceptions import ValidationError, NotFoundError
from core.validators import AmountValidator, PeriodValidator
from .models import RentProof


class RentProofService(BaseService):
    """Service for manual rent proof submission and review"""

    def submit(self, tenant, month, year, amount, proof_url) -> RentProof:
        """
        Record a manual rent payment for review.

        Raises:
            ValidationError: missing proof, bad amount or malformed period
        """
        if not proof_url:
            raise ValidationError(
                message="Payment proof is required",
                code="MISSING_PROOF",
                details={"proof_url": "This field is required."}
            )
        month, year = PeriodValidator.validate_period(month, year)
        amount = AmountValidator.validate_positive_amount(amount)

        proof = RentProof.objects.create(
            tenant=tenant,
            month=month,
            year=year,
            amount=amount,
            proof_url=proof_url,
            status=RentProofStatus.PENDING,
        )
        self.log_info("Rent proof submitted", proof_id=proof.pk, tenant_id=tenant.pk,
                      month=month, year=year)
        return proof

    def review(self, proof_id: int, status: str) -> RentProof:
        """
        Set the review status of a proof.

        Raises:
            ValidationError: status is not Pending, Approved or Rejected
            NotFoundError: proof does not exist
        """
        valid = [choice for choice, _ in RentProofStatus.CHOICES]
        if status not in valid:
            raise ValidationError(
                message=f"Invalid status: {status}",
                code="INVALID_STATUS",
                details={"status": f"Must be one of {', '.join(valid)}."}
            )

        proof = RentProof.objects.filter(pk=proof_id).first()
        if proof is None:
            raise NotFoundError(resource_type="RentProof", resource_id=proof_id)

        proof.status = status
        proof.save(update_fields=['status', 'updated_at'])
        self.log_info("Rent proof reviewed", proof_id=proof_id, status=status)
        return proof
