"""Service catalog repository."""

from decimal import Decimal
from typing import Any, Dict, List

from agendapro.db.base import Service as DbService
from agendapro.domain.entities import Service as DomainService
from agendapro.domain.interfaces import IServiceRepository
from agendapro.repositories.base_repo import OwnedRepository


class ServiceRepository(OwnedRepository, IServiceRepository):
    model = DbService
    resource = "Service"

    def list_for_owner(self, owner_id: str) -> List[DomainService]:
        rows = self._all(self._owned(owner_id).order_by(DbService.name))
        return [self._to_domain(row) for row in rows]

    def create(self, service: DomainService) -> DomainService:
        db_service = DbService(
            owner_id=service.owner_id,
            name=service.name,
            price=service.price,
            duration_minutes=service.duration_minutes,
        )
        return self._to_domain(self._insert(db_service))

    def update(
        self, owner_id: str, service_id: str, fields: Dict[str, Any]
    ) -> DomainService:
        return self._to_domain(self._update_row(owner_id, service_id, fields))

    def delete(self, owner_id: str, service_id: str) -> None:
        self._delete_row(owner_id, service_id)

    def _to_domain(self, db_service: DbService) -> DomainService:
        return DomainService(
            id=db_service.id,
            owner_id=db_service.owner_id,
            name=db_service.name,
            price=Decimal(db_service.price),
            duration_minutes=db_service.duration_minutes,
            created_at=db_service.created_at,
            updated_at=db_service.updated_at,
        )
