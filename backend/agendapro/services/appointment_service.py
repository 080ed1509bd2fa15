"""
Appointment service following SOLID principles.

Owns the appointment lifecycle::

    scheduled -> completed   (posts one credit entry to the ledger)
    scheduled -> canceled

Both targets are terminal. Every operation takes the owner id explicitly;
mutations without one fail with ``Unauthenticated`` before touching the
store.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from agendapro.core.cache import APPOINTMENTS, TRANSACTIONS, CollectionCache
from agendapro.core.exceptions import InvalidTransition, NotFound
from agendapro.domain.entities import (
    STATUS_CANCELED,
    STATUS_COMPLETED,
    STATUS_SCHEDULED,
    TYPE_CREDIT,
    Appointment,
    Transaction,
)
from agendapro.domain.interfaces import (
    IAppointmentRepository,
    INotifier,
    ITransactionRepository,
)
from agendapro.schemas.dtos import AppointmentDraft, AppointmentUpdateRequest
from agendapro.services.base_service import NotifyingService

logger = logging.getLogger(__name__)


@dataclass
class Completion:
    appointment: Appointment
    transaction: Transaction


class AppointmentService(NotifyingService):
    """Application service for appointment-related use-cases.

    Depends on the repository interfaces, a notifier and the collection
    cache; the controller wires the concrete implementations.
    """

    def __init__(
        self,
        appointment_repo: IAppointmentRepository,
        transaction_repo: ITransactionRepository,
        notifier: INotifier,
        cache: CollectionCache,
    ) -> None:
        super().__init__(notifier, cache)
        self.appointment_repo = appointment_repo
        self.transaction_repo = transaction_repo

    def list_appointments(
        self, owner_id: Optional[str], on_date: Optional[date] = None
    ) -> List[Appointment]:
        """Appointments of the owner ordered by date and time."""
        return self._cached_list(
            APPOINTMENTS,
            owner_id,
            lambda: self.appointment_repo.list_for_owner(owner_id, on_date),
            key=on_date,
        )

    def create_appointment(
        self, owner_id: Optional[str], draft: AppointmentDraft
    ) -> Appointment:
        """Book a new appointment.

        Business Rules:
        - An owner identity is required
        - Client and service names must be resolved or typed
        - Date, time and a non-negative price are required
        - New appointments always start as scheduled
        """
        with self._outcome("Erro ao agendar"):
            owner_id = self._require_owner(owner_id)
            draft.validate()

            appointment = Appointment(
                owner_id=owner_id,
                client_id=draft.client_id,
                service_id=draft.service_id,
                client_name=draft.client_name.strip(),
                service_name=draft.service_name.strip(),
                date=draft.date,
                time=draft.time,
                price=draft.price,
                notes=draft.notes,
                status=STATUS_SCHEDULED,
            )
            created = self.appointment_repo.create(appointment)
            self.cache.invalidate(APPOINTMENTS, owner_id)

        logger.info(
            "Appointment created",
            extra={
                "context": {
                    "owner_id": owner_id,
                    "appointment_id": created.id,
                    "date": created.date.isoformat(),
                }
            },
        )
        self.notifier.success(
            "Agendamento criado!", "O serviço foi agendado com sucesso."
        )
        return created

    def update_appointment(
        self,
        owner_id: Optional[str],
        appointment_id: str,
        request: AppointmentUpdateRequest,
    ) -> Appointment:
        """Apply a partial patch; ownership is enforced by the store."""
        with self._outcome("Erro ao atualizar"):
            owner_id = self._require_owner(owner_id)
            request.validate()
            updated = self.appointment_repo.update(
                owner_id, appointment_id, request.fields
            )
            self.cache.invalidate(APPOINTMENTS, owner_id)

        self.notifier.success(
            "Agendamento atualizado!", "As informações foram salvas."
        )
        return updated

    def complete_appointment(
        self, owner_id: Optional[str], appointment_id: str
    ) -> Completion:
        """Mark a scheduled appointment as completed and post its ledger entry.

        Two sequential store writes: the status change, then the credit
        entry. The entry is only attempted after the status change succeeded.
        If the entry fails, the appointment stays completed without a ledger
        entry; no compensation is attempted and the failure is reported.
        """
        with self._outcome("Erro ao concluir"):
            owner_id = self._require_owner(owner_id)
            appointment = self._get_scheduled(
                owner_id, appointment_id, STATUS_COMPLETED
            )

            completed = self.appointment_repo.update(
                owner_id, appointment_id, {"status": STATUS_COMPLETED}
            )
            self.cache.invalidate(APPOINTMENTS, owner_id)

            try:
                transaction = self.transaction_repo.create(
                    Transaction(
                        owner_id=owner_id,
                        appointment_id=appointment.id,
                        description=appointment.ledger_description,
                        amount=appointment.price,
                        type=TYPE_CREDIT,
                        date=appointment.date,
                    )
                )
            except Exception:
                logger.error(
                    "Appointment completed without ledger entry",
                    extra={
                        "context": {
                            "owner_id": owner_id,
                            "appointment_id": appointment_id,
                            "amount": str(appointment.price),
                        }
                    },
                )
                raise
            self.cache.invalidate(TRANSACTIONS, owner_id)

        logger.info(
            "Appointment completed",
            extra={
                "context": {
                    "owner_id": owner_id,
                    "appointment_id": appointment_id,
                    "transaction_id": transaction.id,
                }
            },
        )
        self.notifier.success(
            "Serviço concluído!", "O valor foi adicionado ao caixa."
        )
        return Completion(appointment=completed, transaction=transaction)

    def cancel_appointment(
        self, owner_id: Optional[str], appointment_id: str
    ) -> Appointment:
        """Cancel a scheduled appointment. No ledger effect."""
        with self._outcome("Erro ao cancelar"):
            owner_id = self._require_owner(owner_id)
            self._get_scheduled(owner_id, appointment_id, STATUS_CANCELED)
            canceled = self.appointment_repo.update(
                owner_id, appointment_id, {"status": STATUS_CANCELED}
            )
            self.cache.invalidate(APPOINTMENTS, owner_id)

        self.notifier.success(
            "Agendamento cancelado", "O agendamento foi cancelado."
        )
        return canceled

    def delete_appointment(self, owner_id: Optional[str], appointment_id: str) -> None:
        """Remove an appointment permanently.

        A ledger entry already posted for it is kept and still references
        the removed id.
        """
        with self._outcome("Erro ao remover"):
            owner_id = self._require_owner(owner_id)
            self.appointment_repo.delete(owner_id, appointment_id)
            self.cache.invalidate(APPOINTMENTS, owner_id)

        self.notifier.success("Agendamento removido!", "O agendamento foi excluído.")

    def _get_scheduled(
        self, owner_id: str, appointment_id: str, target: str
    ) -> Appointment:
        appointment = self.appointment_repo.get_by_id(owner_id, appointment_id)
        if appointment is None:
            raise NotFound("Appointment", appointment_id)
        if not appointment.is_scheduled:
            raise InvalidTransition(appointment_id, appointment.status, target)
        return appointment
