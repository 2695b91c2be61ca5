"""
Repository pattern implementation.
Abstracts data access and provides a clean interface for domain services.
"""
from typing import Generic, TypeVar, Optional, List
from django.db.models import QuerySet, Model
from django.db import transaction
import logging

from core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Model)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.
    Follows Repository pattern for data access abstraction.
    """

    def __init__(self, model: type[T]):
        self.model = model

    def get_by_id(self, id: int, **filters) -> Optional[T]:
        """Get a single instance by ID"""
        return self.model.objects.filter(id=id, **filters).first()

    def get_by_id_or_raise(self, id: int, **filters) -> T:
        """Get a single instance by ID or raise NotFoundError"""
        instance = self.get_by_id(id, **filters)
        if instance is None:
            raise NotFoundError(resource_type=self.model.__name__, resource_id=id)
        return instance

    def get_for_update(self, **filters) -> Optional[T]:
        """Get a single instance with a row-level lock (must run inside a transaction)"""
        return self.model.objects.select_for_update().filter(**filters).first()

    def get_all(self, **filters) -> QuerySet[T]:
        """Get all instances matching filters"""
        return self.model.objects.filter(**filters)

    def create(self, **kwargs) -> T:
        """Create a new instance"""
        return self.model.objects.create(**kwargs)

    def delete(self, instance: T) -> None:
        """Delete an instance"""
        instance.delete()

    def exists(self, **filters) -> bool:
        """Check if instance exists"""
        return self.model.objects.filter(**filters).exists()

    @transaction.atomic
    def bulk_create(self, instances: List[T]) -> List[T]:
        """Bulk create instances"""
        return self.model.objects.bulk_create(instances)

    def get_queryset(self) -> QuerySet[T]:
        """Get base queryset for custom queries"""
        return self.model.objects.all()
