"""
Bill repository - Data access layer for the Billing domain.
"""
from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from core.exceptions import DuplicateError
from core.repositories import BaseRepository
from .models import Bill


class BillRepository(BaseRepository[Bill]):
    """Repository for Bill model"""

    def __init__(self):
        super().__init__(Bill)

    def exists_for_period(self, tenant_id: int, month: str, year: int, bill_type: str) -> bool:
        return self.exists(tenant_id=tenant_id, month=month, year=year, type=bill_type)

    def create_unique(self, **kwargs) -> Bill:
        """
        Create a bill unless one already exists for its (tenant, month, year, type).

        Raises:
            DuplicateError: the unique constraint rejected the insert
        """
        try:
            with transaction.atomic():
                return self.create(**kwargs)
        except IntegrityError:
            raise DuplicateError(
                message="Bill already exists for this period",
                details={key: str(kwargs.get(key)) for key in ("month", "year", "type")}
            )

    def for_tenant(self, tenant_id: int) -> QuerySet[Bill]:
        return self.get_all(tenant_id=tenant_id).order_by('-created_at')
