"""
Archive service - checkout flow that moves a tenant into the history archive.
"""
from django.db import transaction
from django.utils import timezone
from core.services import BaseService
from core.exceptions import NotFoundError
from rooms.services import OccupancyService
from tenants.repositories import TenantRepository
from .models import PastTenant


class ArchiveService(BaseService):
    """Service for tenant checkout and the past-tenant archive"""

    def __init__(self):
        super().__init__()
        self.tenant_repo = TenantRepository()
        self.occupancy = OccupancyService()

    def checkout(self, tenant_id: int, reason: str = "") -> PastTenant:
        """
        Archive the tenant, free its bed, then remove it from the registry.

        The steps run in that order so the archive record exists before the
        live record disappears. Uploaded documents are not deleted; the
        archive keeps their URLs.

        Raises:
            NotFoundError: tenant does not exist
        """
        with transaction.atomic():
            tenant = self.tenant_repo.get_for_update(id=tenant_id)
            if tenant is None:
                raise NotFoundError(resource_type="Tenant", resource_id=tenant_id)

            record = PastTenant.objects.create(
                original_id=str(tenant.pk),
                name=tenant.name,
                email=tenant.email,
                phone=tenant.phone,
                room_no=tenant.room_no or '',
                id_type=tenant.id_type,
                id_number=tenant.id_number,
                id_proof=tenant.id_proof,
                profile_photo=tenant.profile_photo or '',
                deposit=tenant.deposit,
                joined_at=tenant.created_at,
                left_at=timezone.now(),
                reason_for_leaving=reason or '',
            )

            self.occupancy.release(tenant.pk, tenant.room_no)

            user = tenant.user
            self.tenant_repo.delete(tenant)
            if user is not None:
                user.delete()

        self.log_info("Tenant checked out", tenant_id=tenant_id, room_no=record.room_no,
                      archive_id=record.pk)
        return record

    def list_history(self):
        """Most recent leavers first"""
        return PastTenant.objects.order_by('-left_at')
