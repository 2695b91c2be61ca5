"""
Tenant repository - Data access layer for the Tenant domain.
"""
from datetime import datetime
from typing import Iterable, Set
from django.db.models import QuerySet
from core.repositories import BaseRepository
from .models import Tenant


class TenantRepository(BaseRepository[Tenant]):
    """Repository for Tenant model"""

    def __init__(self):
        super().__init__(Tenant)

    def get_housed(self) -> QuerySet[Tenant]:
        """Active tenants that currently hold a room"""
        return self.model.objects.exclude(room_no__isnull=True).exclude(room_no='')

    def get_housed_joined_by(self, cutoff: datetime) -> QuerySet[Tenant]:
        """Housed tenants whose move-in is on or before cutoff"""
        return self.get_housed().filter(created_at__lte=cutoff)

    def existing_ids(self, ids: Iterable[int]) -> Set[int]:
        """Subset of ids that resolve to an existing tenant"""
        return set(self.model.objects.filter(id__in=list(ids)).values_list('id', flat=True))

    def email_taken(self, email: str) -> bool:
        return self.exists(email__iexact=email)
