"""
Tenant service - Business logic layer for the Tenant Registry.
"""
from django.contrib.auth import get_user_model
from django.db import transaction
from core.services import BaseService
from core.dto import TenantDTO
from core.constants import IdType
from core.exceptions import NotFoundError, ValidationError
from core.validators import RequiredFieldsValidator
from common.notifications import send_notification, welcome_message
from rooms.services import OccupancyService
from .models import Tenant
from .repositories import TenantRepository


REQUIRED_FIELDS = ['name', 'email', 'phone', 'room_no', 'id_type', 'id_number', 'id_proof']


def default_password_for(email: str) -> str:
    """Default password is the local part of the email address"""
    return email.split('@')[0]


class TenantService(BaseService):
    """Service for tenant onboarding and room changes"""

    def __init__(self):
        super().__init__()
        self.tenant_repo = TenantRepository()
        self.occupancy = OccupancyService()

    def onboard(self, data: TenantDTO) -> Tenant:
        """
        Create a tenant with a login user and assign the requested room.

        The tenant and its room assignment are created together: a full or
        missing room rolls the tenant back.

        Raises:
            ValidationError: missing fields, unknown id type or duplicate email
            NotFoundError: room does not exist
            CapacityExceededError: room already has two tenants
        """
        if not data.id_proof:
            raise ValidationError(message="ID Proof document is mandatory.", code="ID_PROOF_REQUIRED",
                                  details={"id_proof": "This field is required."})
        RequiredFieldsValidator.validate(data.__dict__, REQUIRED_FIELDS)
        if data.id_type not in dict(IdType.CHOICES):
            raise ValidationError(
                message=f"Unsupported id type: {data.id_type}",
                code="INVALID_ID_TYPE",
                details={"id_type": f"Must be one of {', '.join(dict(IdType.CHOICES))}."}
            )
        email = data.email.strip().lower()
        User = get_user_model()
        if self.tenant_repo.email_taken(email) or User.objects.filter(username__iexact=email).exists():
            raise ValidationError(message="User already exists", code="DUPLICATE_EMAIL",
                                  details={"email": "A tenant with this email already exists."})

        password = default_password_for(email)
        with transaction.atomic():
            user = User.objects.create_user(username=email, email=email, password=password,
                                            first_name=data.name[:150])
            tenant_fields = dict(
                user=user,
                name=data.name,
                email=email,
                phone=data.phone,
                deposit=data.deposit or 0,
                id_type=data.id_type,
                id_number=data.id_number,
                id_proof=data.id_proof,
            )
            if data.profile_photo:
                tenant_fields['profile_photo'] = data.profile_photo
            tenant = self.tenant_repo.create(**tenant_fields)
            self.occupancy.assign(tenant, data.room_no)

        self.log_info("Tenant onboarded", tenant_id=tenant.id, room_no=tenant.room_no)

        subject, body = welcome_message(tenant, password)
        send_notification(tenant.email, subject, body)
        return tenant

    def change_room(self, tenant_id: int, new_room_no: str) -> Tenant:
        """Move a tenant to another room"""
        if not new_room_no:
            raise ValidationError(message="new_room_no is required", code="MISSING_FIELDS",
                                  details={"new_room_no": "This field is required."})
        with transaction.atomic():
            tenant = self.tenant_repo.get_for_update(id=tenant_id)
            if tenant is None:
                raise NotFoundError(resource_type="Tenant", resource_id=tenant_id)
            self.occupancy.transfer(tenant, tenant.room_no, new_room_no)
        return tenant
