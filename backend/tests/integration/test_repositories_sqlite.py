"""
Integration tests for the SQLAlchemy repositories on an in-memory SQLite DB.

Covers owner scoping, ordering, the appointment snapshot fields, orphan
ledger entries and the translation of database errors.
"""

from datetime import date, time
from decimal import Decimal

import pytest

from agendapro.core.exceptions import NotFound, StoreFailure
from agendapro.domain.entities import (
    STATUS_COMPLETED,
    TYPE_CREDIT,
    TYPE_DEBIT,
    Appointment,
    Client,
    Service,
    Transaction,
)
from agendapro.repositories.appointment_repo import AppointmentRepository
from agendapro.repositories.client_repo import ClientRepository
from agendapro.repositories.profile_repo import ProfileRepository
from agendapro.repositories.service_repo import ServiceRepository
from agendapro.repositories.transaction_repo import TransactionRepository

OWNER_ID = "owner-1"
OTHER_OWNER_ID = "owner-2"


def _appointment(**overrides):
    values = dict(
        owner_id=OWNER_ID,
        client_name="Ana",
        service_name="Haircut",
        date=date(2024, 6, 12),
        time=time(14, 0),
        price=Decimal("50.00"),
    )
    values.update(overrides)
    return Appointment(**values)


@pytest.mark.database
class TestClientRepository:
    def test_clients_are_scoped_and_ordered(self, db_session):
        repo = ClientRepository(db_session)
        repo.create(Client(owner_id=OWNER_ID, name="Carla"))
        repo.create(Client(owner_id=OWNER_ID, name="Ana"))
        repo.create(Client(owner_id=OTHER_OWNER_ID, name="Bia"))

        assert [c.name for c in repo.list_for_owner(OWNER_ID)] == ["Ana", "Carla"]
        assert [c.name for c in repo.list_for_owner(OTHER_OWNER_ID)] == ["Bia"]

    def test_other_owner_row_is_not_found(self, db_session):
        repo = ClientRepository(db_session)
        created = repo.create(Client(owner_id=OWNER_ID, name="Ana"))

        with pytest.raises(NotFound):
            repo.update(OTHER_OWNER_ID, created.id, {"name": "Hijacked"})
        with pytest.raises(NotFound):
            repo.delete(OTHER_OWNER_ID, created.id)

        assert repo.list_for_owner(OWNER_ID)[0].name == "Ana"

    def test_not_null_violation_becomes_store_failure(self, db_session):
        repo = ClientRepository(db_session)

        with pytest.raises(StoreFailure) as exc_info:
            repo.create(Client(owner_id=OWNER_ID, name=None))

        assert "NOT NULL" in exc_info.value.message
        # Session is usable again after the rollback
        assert repo.list_for_owner(OWNER_ID) == []


@pytest.mark.database
class TestAppointmentRepository:
    def test_ids_are_uuid_strings(self, db_session):
        created = AppointmentRepository(db_session).create(_appointment())
        assert isinstance(created.id, str) and len(created.id) == 36

    def test_list_ordered_by_date_then_time(self, db_session):
        repo = AppointmentRepository(db_session)
        repo.create(_appointment(date=date(2024, 6, 13), time=time(9, 0)))
        repo.create(_appointment(time=time(16, 0)))
        repo.create(_appointment(time=time(8, 30)))

        listed = repo.list_for_owner(OWNER_ID)

        assert [(a.date, a.time) for a in listed] == [
            (date(2024, 6, 12), time(8, 30)),
            (date(2024, 6, 12), time(16, 0)),
            (date(2024, 6, 13), time(9, 0)),
        ]

    def test_list_on_date(self, db_session):
        repo = AppointmentRepository(db_session)
        repo.create(_appointment())
        repo.create(_appointment(date=date(2024, 6, 13)))

        listed = repo.list_for_owner(OWNER_ID, date(2024, 6, 13))

        assert [a.date for a in listed] == [date(2024, 6, 13)]

    def test_get_by_id_of_other_owner_is_none(self, db_session):
        repo = AppointmentRepository(db_session)
        created = repo.create(_appointment())

        assert repo.get_by_id(OWNER_ID, created.id).client_name == "Ana"
        assert repo.get_by_id(OTHER_OWNER_ID, created.id) is None

    def test_snapshot_survives_service_and_client_edits(self, db_session):
        services = ServiceRepository(db_session)
        clients = ClientRepository(db_session)
        appointments = AppointmentRepository(db_session)
        service = services.create(
            Service(owner_id=OWNER_ID, name="Haircut", price=Decimal("50.00"))
        )
        client = clients.create(Client(owner_id=OWNER_ID, name="Ana"))
        booked = appointments.create(
            _appointment(client_id=client.id, service_id=service.id)
        )

        services.update(
            OWNER_ID, service.id, {"name": "Haircut Deluxe", "price": Decimal("70.00")}
        )
        clients.delete(OWNER_ID, client.id)

        stored = appointments.get_by_id(OWNER_ID, booked.id)
        assert stored.service_name == "Haircut"
        assert stored.price == Decimal("50.00")
        assert stored.client_name == "Ana"
        assert stored.client_id == client.id

    def test_status_update(self, db_session):
        repo = AppointmentRepository(db_session)
        created = repo.create(_appointment())

        updated = repo.update(OWNER_ID, created.id, {"status": STATUS_COMPLETED})

        assert updated.status == STATUS_COMPLETED


@pytest.mark.database
class TestTransactionRepository:
    def test_newest_date_first(self, db_session):
        repo = TransactionRepository(db_session)
        repo.create(Transaction(OWNER_ID, "Old", Decimal("1"), TYPE_CREDIT, date(2024, 6, 1)))
        repo.create(Transaction(OWNER_ID, "New", Decimal("2"), TYPE_DEBIT, date(2024, 6, 12)))

        listed = repo.list_for_owner(OWNER_ID)

        assert [t.description for t in listed] == ["New", "Old"]
        assert listed[0].amount == Decimal("2.00")

    def test_entry_outlives_its_appointment(self, db_session):
        appointments = AppointmentRepository(db_session)
        ledger = TransactionRepository(db_session)
        appointment = appointments.create(_appointment())
        ledger.create(
            Transaction(
                OWNER_ID,
                "Haircut - Ana",
                Decimal("50.00"),
                TYPE_CREDIT,
                date(2024, 6, 12),
                appointment_id=appointment.id,
            )
        )

        appointments.delete(OWNER_ID, appointment.id)

        (entry,) = ledger.list_for_owner(OWNER_ID)
        assert entry.appointment_id == appointment.id
        assert appointments.get_by_id(OWNER_ID, appointment.id) is None


@pytest.mark.database
class TestProfileRepository:
    def test_upsert_creates_then_updates_one_row(self, db_session):
        repo = ProfileRepository(db_session)
        assert repo.get_for_owner(OWNER_ID) is None

        first = repo.upsert(OWNER_ID, {"business_name": "Studio", "working_days": ["monday"]})
        second = repo.upsert(OWNER_ID, {"phone": "1133334444"})

        assert first.id == second.id
        assert second.business_name == "Studio"
        assert second.working_days == ["monday"]
        assert repo.get_for_owner(OTHER_OWNER_ID) is None
