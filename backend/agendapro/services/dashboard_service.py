"""Read-only summary shown on the home screen."""

from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from agendapro.core.config import today_local
from agendapro.domain.entities import STATUS_COMPLETED, STATUS_SCHEDULED, Appointment
from agendapro.services.appointment_service import AppointmentService
from agendapro.services.client_service import ClientService
from agendapro.services.period_totals import PeriodTotals
from agendapro.services.transaction_service import TransactionService


@dataclass
class DashboardSummary:
    day: date
    scheduled_today: List[Appointment]
    completed_today: int
    client_count: int
    totals: PeriodTotals


class DashboardService:
    def __init__(
        self,
        appointment_service: AppointmentService,
        transaction_service: TransactionService,
        client_service: ClientService,
        today: Callable[[], date] = today_local,
    ) -> None:
        self.appointment_service = appointment_service
        self.transaction_service = transaction_service
        self.client_service = client_service
        self.today = today

    def summary(self, owner_id: Optional[str]) -> DashboardSummary:
        day = self.today()
        appointments = self.appointment_service.list_appointments(owner_id, day)
        return DashboardSummary(
            day=day,
            scheduled_today=[a for a in appointments if a.status == STATUS_SCHEDULED],
            completed_today=sum(1 for a in appointments if a.status == STATUS_COMPLETED),
            client_count=len(self.client_service.list_clients(owner_id)),
            totals=self.transaction_service.period_totals(owner_id),
        )
