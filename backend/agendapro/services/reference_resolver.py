"""
Copies client/service details onto an appointment draft.

Works on the client and service lists already loaded for the owner; it never
talks to the store. An id that matches no loaded entry clears the copied
fields, so the draft fails validation instead of keeping a stale name.
"""

from decimal import Decimal
from typing import Dict, Iterable, Optional

from agendapro.domain.entities import Client, Service
from agendapro.schemas.dtos import AppointmentDraft


class ReferenceResolver:
    def __init__(self, clients: Iterable[Client], services: Iterable[Service]) -> None:
        self._clients: Dict[str, Client] = {c.id: c for c in clients if c.id}
        self._services: Dict[str, Service] = {s.id: s for s in services if s.id}

    def resolve_client(
        self, draft: AppointmentDraft, client_id: Optional[str]
    ) -> AppointmentDraft:
        client = self._clients.get(client_id) if client_id else None
        draft.client_id = client_id
        draft.client_name = client.name if client else ""
        return draft

    def resolve_service(
        self, draft: AppointmentDraft, service_id: Optional[str]
    ) -> AppointmentDraft:
        service = self._services.get(service_id) if service_id else None
        draft.service_id = service_id
        draft.service_name = service.name if service else ""
        draft.price = Decimal(service.price) if service else Decimal("0")
        return draft

    def resolve(self, draft: AppointmentDraft) -> AppointmentDraft:
        """Resolve whichever references the draft carries."""
        if draft.client_id:
            self.resolve_client(draft, draft.client_id)
        if draft.service_id:
            self.resolve_service(draft, draft.service_id)
        return draft
