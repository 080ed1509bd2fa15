"""
Appointment repository implementation following SOLID principles.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from agendapro.db.base import Appointment as DbAppointment
from agendapro.domain.entities import Appointment as DomainAppointment
from agendapro.domain.interfaces import IAppointmentRepository
from agendapro.repositories.base_repo import OwnedRepository, store_errors


class AppointmentRepository(OwnedRepository, IAppointmentRepository):
    """Repository for Appointment persistence operations."""

    model = DbAppointment
    resource = "Appointment"

    def get_by_id(
        self, owner_id: str, appointment_id: str
    ) -> Optional[DomainAppointment]:
        with store_errors(self.db, "get appointments"):
            row = (
                self._owned(owner_id)
                .filter(DbAppointment.id == appointment_id)
                .first()
            )
        return self._to_domain(row) if row else None

    def list_for_owner(
        self, owner_id: str, on_date: Optional[date] = None
    ) -> List[DomainAppointment]:
        query = self._owned(owner_id)
        if on_date is not None:
            query = query.filter(DbAppointment.date == on_date)
        query = query.order_by(DbAppointment.date.asc(), DbAppointment.time.asc())
        return [self._to_domain(row) for row in self._all(query)]

    def create(self, appointment: DomainAppointment) -> DomainAppointment:
        db_appointment = DbAppointment(
            owner_id=appointment.owner_id,
            client_id=appointment.client_id,
            service_id=appointment.service_id,
            client_name=appointment.client_name,
            service_name=appointment.service_name,
            date=appointment.date,
            time=appointment.time,
            price=appointment.price,
            status=appointment.status,
            notes=appointment.notes,
        )
        return self._to_domain(self._insert(db_appointment))

    def update(
        self, owner_id: str, appointment_id: str, fields: Dict[str, Any]
    ) -> DomainAppointment:
        return self._to_domain(self._update_row(owner_id, appointment_id, fields))

    def delete(self, owner_id: str, appointment_id: str) -> None:
        self._delete_row(owner_id, appointment_id)

    def _to_domain(self, db_appointment: DbAppointment) -> DomainAppointment:
        """Convert database model to domain entity."""
        return DomainAppointment(
            id=db_appointment.id,
            owner_id=db_appointment.owner_id,
            client_id=db_appointment.client_id,
            service_id=db_appointment.service_id,
            client_name=db_appointment.client_name,
            service_name=db_appointment.service_name,
            date=db_appointment.date,
            time=db_appointment.time,
            price=Decimal(db_appointment.price),
            status=db_appointment.status,
            notes=db_appointment.notes,
            created_at=db_appointment.created_at,
            updated_at=db_appointment.updated_at,
        )
