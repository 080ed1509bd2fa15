"""Unit tests for ReferenceResolver."""

from decimal import Decimal

import pytest

from agendapro.schemas.dtos import AppointmentDraft
from agendapro.services.reference_resolver import ReferenceResolver


@pytest.fixture
def resolver(sample_client, sample_service):
    return ReferenceResolver([sample_client], [sample_service])


class TestReferenceResolver:
    def test_resolve_client_copies_name(self, resolver):
        draft = resolver.resolve_client(AppointmentDraft(), "client-ana")

        assert draft.client_id == "client-ana"
        assert draft.client_name == "Ana"

    def test_resolve_unknown_client_clears_name(self, resolver):
        draft = AppointmentDraft(client_name="Stale")
        resolver.resolve_client(draft, "missing")

        assert draft.client_id == "missing"
        assert draft.client_name == ""

    def test_resolve_service_copies_name_and_price(self, resolver):
        draft = resolver.resolve_service(AppointmentDraft(), "service-haircut")

        assert draft.service_id == "service-haircut"
        assert draft.service_name == "Haircut"
        assert draft.price == Decimal("50.00")

    def test_resolve_unknown_service_zeroes_price(self, resolver):
        draft = AppointmentDraft(service_name="Old", price=Decimal("99"))
        resolver.resolve_service(draft, "missing")

        assert draft.service_name == ""
        assert draft.price == Decimal("0")

    def test_resolve_overwrites_typed_values(self, resolver):
        draft = AppointmentDraft(
            client_id="client-ana",
            client_name="Typed",
            service_id="service-haircut",
            price=Decimal("10"),
        )
        resolver.resolve(draft)

        assert draft.client_name == "Ana"
        assert draft.service_name == "Haircut"
        assert draft.price == Decimal("50.00")

    def test_resolve_without_ids_keeps_manual_entry(self, resolver):
        draft = AppointmentDraft(
            client_name="Walk-in", service_name="Beard", price=Decimal("25")
        )
        resolver.resolve(draft)

        assert (draft.client_name, draft.service_name, draft.price) == (
            "Walk-in",
            "Beard",
            Decimal("25"),
        )

    def test_unknown_reference_fails_validation_later(self, resolver):
        from agendapro.core.exceptions import ValidationFailure

        draft = AppointmentDraft(client_id="missing", service_name="Haircut")
        resolver.resolve(draft)

        with pytest.raises(ValidationFailure):
            draft.validate()
