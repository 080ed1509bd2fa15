"""Client repository implementation following SOLID principles."""

from typing import Any, Dict, List

from agendapro.db.base import Client as DbClient
from agendapro.domain.entities import Client as DomainClient
from agendapro.domain.interfaces import IClientRepository
from agendapro.repositories.base_repo import OwnedRepository


class ClientRepository(OwnedRepository, IClientRepository):
    """Repository for Client persistence operations."""

    model = DbClient
    resource = "Client"

    def list_for_owner(self, owner_id: str) -> List[DomainClient]:
        rows = self._all(self._owned(owner_id).order_by(DbClient.name))
        return [self._to_domain(row) for row in rows]

    def create(self, client: DomainClient) -> DomainClient:
        db_client = DbClient(
            owner_id=client.owner_id,
            name=client.name,
            phone=client.phone,
            notes=client.notes,
        )
        return self._to_domain(self._insert(db_client))

    def update(
        self, owner_id: str, client_id: str, fields: Dict[str, Any]
    ) -> DomainClient:
        return self._to_domain(self._update_row(owner_id, client_id, fields))

    def delete(self, owner_id: str, client_id: str) -> None:
        self._delete_row(owner_id, client_id)

    def _to_domain(self, db_client: DbClient) -> DomainClient:
        return DomainClient(
            id=db_client.id,
            owner_id=db_client.owner_id,
            name=db_client.name,
            phone=db_client.phone,
            notes=db_client.notes,
            created_at=db_client.created_at,
            updated_at=db_client.updated_at,
        )
