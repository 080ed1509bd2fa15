"""Unit tests for the dashboard summary."""

import dataclasses
from datetime import date
from decimal import Decimal
from unittest.mock import Mock

from agendapro.domain.entities import STATUS_CANCELED, STATUS_COMPLETED, Client
from agendapro.services.appointment_service import AppointmentService
from agendapro.services.client_service import ClientService
from agendapro.services.dashboard_service import DashboardService
from agendapro.services.period_totals import PeriodTotals
from agendapro.services.transaction_service import TransactionService


def test_summary_counts_today(scheduled_appointment, owner_id):
    today = date(2024, 6, 12)
    appointments = Mock(spec=AppointmentService)
    appointments.list_appointments.return_value = [
        scheduled_appointment,
        dataclasses.replace(scheduled_appointment, id="appt-2", status=STATUS_COMPLETED),
        dataclasses.replace(scheduled_appointment, id="appt-3", status=STATUS_CANCELED),
    ]
    transactions = Mock(spec=TransactionService)
    transactions.period_totals.return_value = PeriodTotals(
        Decimal("50"), Decimal("50"), Decimal("50")
    )
    clients = Mock(spec=ClientService)
    clients.list_clients.return_value = [Client(owner_id=owner_id, name="Ana", id="c1")]

    summary = DashboardService(
        appointments, transactions, clients, today=lambda: today
    ).summary(owner_id)

    appointments.list_appointments.assert_called_once_with(owner_id, today)
    assert [a.id for a in summary.scheduled_today] == ["appt-1"]
    assert summary.completed_today == 1
    assert summary.client_count == 1
    assert summary.totals.today == Decimal("50")
