"""
Appointment controller: booking and lifecycle endpoints.

Status changes are only reachable through the complete and cancel routes;
PATCH rejects a ``status`` field.
"""

from flask import Blueprint, request

from agendapro.core.api_utils import api_response, get_json_body, notified_response
from agendapro.core.auth_decorators import current_owner_id
from agendapro.schemas.dtos import (
    AppointmentDraft,
    AppointmentUpdateRequest,
    appointment_to_dict,
    parse_date,
    transaction_to_dict,
)
from agendapro.services.reference_resolver import ReferenceResolver

from . import dependencies

appointment_bp = Blueprint("appointment", __name__, url_prefix="/appointments")


@appointment_bp.route("/", methods=["GET"])
def list_appointments():
    """List the owner's appointments, optionally for one day (?date=YYYY-MM-DD)."""
    owner_id = current_owner_id()
    raw_date = request.args.get("date")
    on_date = parse_date(raw_date) if raw_date and owner_id else None
    appointments = dependencies.appointment_service().list_appointments(
        owner_id, on_date
    )
    return api_response(True, "OK", [appointment_to_dict(a) for a in appointments])


@appointment_bp.route("/", methods=["POST"])
def create_appointment():
    """Book an appointment.

    Expected JSON: {"client_id"?, "client_name"?, "service_id"?,
    "service_name"?, "price"?, "date", "time", "notes"?}. Selected client and
    service ids fill in names and price from the owner's loaded lists.
    """
    owner_id = current_owner_id()
    service = dependencies.appointment_service()
    draft = service.parse_request(
        owner_id,
        "Erro ao agendar",
        lambda: AppointmentDraft.from_payload(get_json_body()),
    )
    if draft.client_id or draft.service_id:
        resolver = ReferenceResolver(
            dependencies.client_service().list_clients(owner_id),
            dependencies.catalog_service().list_services(owner_id),
        )
        resolver.resolve(draft)

    appointment = service.create_appointment(owner_id, draft)
    return notified_response(service.notifier, appointment_to_dict(appointment), 201)


@appointment_bp.route("/<appointment_id>", methods=["PATCH"])
def update_appointment(appointment_id: str):
    owner_id = current_owner_id()
    service = dependencies.appointment_service()
    request_dto = service.parse_request(
        owner_id,
        "Erro ao atualizar",
        lambda: AppointmentUpdateRequest.from_payload(get_json_body()),
    )
    appointment = service.update_appointment(owner_id, appointment_id, request_dto)
    return notified_response(service.notifier, appointment_to_dict(appointment))


@appointment_bp.route("/<appointment_id>/complete", methods=["POST"])
def complete_appointment(appointment_id: str):
    service = dependencies.appointment_service()
    completion = service.complete_appointment(current_owner_id(), appointment_id)
    return notified_response(
        service.notifier,
        {
            "appointment": appointment_to_dict(completion.appointment),
            "transaction": transaction_to_dict(completion.transaction),
        },
    )


@appointment_bp.route("/<appointment_id>/cancel", methods=["POST"])
def cancel_appointment(appointment_id: str):
    service = dependencies.appointment_service()
    appointment = service.cancel_appointment(current_owner_id(), appointment_id)
    return notified_response(service.notifier, appointment_to_dict(appointment))


@appointment_bp.route("/<appointment_id>", methods=["DELETE"])
def delete_appointment(appointment_id: str):
    service = dependencies.appointment_service()
    service.delete_appointment(current_owner_id(), appointment_id)
    return notified_response(service.notifier)
