"""Service catalog use-cases (name, price and duration of what the business sells)."""

from typing import List, Optional

from agendapro.core.cache import SERVICES, CollectionCache
from agendapro.domain.entities import Service
from agendapro.domain.interfaces import INotifier, IServiceRepository
from agendapro.schemas.dtos import ServiceCreateRequest, ServiceUpdateRequest
from agendapro.services.base_service import NotifyingService


class ServiceCatalogService(NotifyingService):
    def __init__(
        self,
        service_repo: IServiceRepository,
        notifier: INotifier,
        cache: CollectionCache,
    ) -> None:
        super().__init__(notifier, cache)
        self.service_repo = service_repo

    def list_services(self, owner_id: Optional[str]) -> List[Service]:
        return self._cached_list(
            SERVICES, owner_id, lambda: self.service_repo.list_for_owner(owner_id)
        )

    def create_service(
        self, owner_id: Optional[str], request: ServiceCreateRequest
    ) -> Service:
        with self._outcome("Erro ao cadastrar"):
            owner_id = self._require_owner(owner_id)
            request.validate()
            created = self.service_repo.create(
                Service(
                    owner_id=owner_id,
                    name=request.name,
                    price=request.price,
                    duration_minutes=request.duration_minutes,
                )
            )
            self.cache.invalidate(SERVICES, owner_id)

        self.notifier.success(
            "Serviço cadastrado!", "O serviço foi adicionado com sucesso."
        )
        return created

    def update_service(
        self, owner_id: Optional[str], service_id: str, request: ServiceUpdateRequest
    ) -> Service:
        """Edit a catalog entry. Already booked appointments keep their price."""
        with self._outcome("Erro ao atualizar"):
            owner_id = self._require_owner(owner_id)
            request.validate()
            updated = self.service_repo.update(owner_id, service_id, request.fields)
            self.cache.invalidate(SERVICES, owner_id)

        self.notifier.success("Serviço atualizado!", "As informações foram salvas.")
        return updated

    def delete_service(self, owner_id: Optional[str], service_id: str) -> None:
        with self._outcome("Erro ao remover"):
            owner_id = self._require_owner(owner_id)
            self.service_repo.delete(owner_id, service_id)
            self.cache.invalidate(SERVICES, owner_id)

        self.notifier.success("Serviço removido!", "O serviço foi excluído com sucesso.")
