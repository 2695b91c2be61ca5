"""
Data Transfer Objects (DTOs).
Used for passing data between layers without exposing domain models.
"""
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Any
from decimal import Decimal


@dataclass
class TenantDTO:
    """Data Transfer Object for tenant onboarding"""
    name: str = ""
    email: str = ""
    phone: str = ""
    room_no: str = ""
    id_type: str = ""
    id_number: str = ""
    id_proof: str = ""
    profile_photo: str = ""
    deposit: Decimal = Decimal('0')


@dataclass
class ReportRow:
    """One tenant's payment state for a billing period"""
    tenant_id: int = None
    name: str = ""
    room_no: str = ""
    phone: str = ""
    status: str = ""
    amount: Decimal = Decimal('0')
    record_id: Optional[int] = None
    proof_url: Optional[str] = None

    def as_dict(self):
        return asdict(self)


@dataclass
class BillingRunResult:
    """Outcome of a monthly rent generation run"""
    month: str = ""
    year: int = None
    created: List[Any] = field(default_factory=list)
    skipped: int = 0

    @property
    def created_count(self):
        return len(self.created)
