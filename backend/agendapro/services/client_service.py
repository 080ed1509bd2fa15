"""
Client service for business logic following SOLID principles.

Works with domain entities, not database models. Appointments keep their own
copy of the client name, so renaming or deleting a client never touches
existing appointments.
"""

from typing import List, Optional

from agendapro.core.cache import CLIENTS, CollectionCache
from agendapro.domain.entities import Client
from agendapro.domain.interfaces import IClientRepository, INotifier
from agendapro.schemas.dtos import ClientCreateRequest, ClientUpdateRequest
from agendapro.services.base_service import NotifyingService


class ClientService(NotifyingService):
    """Application service for client-related use-cases."""

    def __init__(
        self, client_repo: IClientRepository, notifier: INotifier, cache: CollectionCache
    ) -> None:
        super().__init__(notifier, cache)
        self.client_repo = client_repo

    def list_clients(self, owner_id: Optional[str]) -> List[Client]:
        return self._cached_list(
            CLIENTS, owner_id, lambda: self.client_repo.list_for_owner(owner_id)
        )

    def create_client(
        self, owner_id: Optional[str], request: ClientCreateRequest
    ) -> Client:
        with self._outcome("Erro ao cadastrar"):
            owner_id = self._require_owner(owner_id)
            request.validate()
            created = self.client_repo.create(
                Client(
                    owner_id=owner_id,
                    name=request.name,
                    phone=request.phone,
                    notes=request.notes,
                )
            )
            self.cache.invalidate(CLIENTS, owner_id)

        self.notifier.success(
            "Cliente cadastrado!", "O cliente foi adicionado com sucesso."
        )
        return created

    def update_client(
        self, owner_id: Optional[str], client_id: str, request: ClientUpdateRequest
    ) -> Client:
        with self._outcome("Erro ao atualizar"):
            owner_id = self._require_owner(owner_id)
            request.validate()
            updated = self.client_repo.update(owner_id, client_id, request.fields)
            self.cache.invalidate(CLIENTS, owner_id)

        self.notifier.success("Cliente atualizado!", "As informações foram salvas.")
        return updated

    def delete_client(self, owner_id: Optional[str], client_id: str) -> None:
        with self._outcome("Erro ao remover"):
            owner_id = self._require_owner(owner_id)
            self.client_repo.delete(owner_id, client_id)
            self.cache.invalidate(CLIENTS, owner_id)

        self.notifier.success("Cliente removido!", "O cliente foi excluído com sucesso.")
