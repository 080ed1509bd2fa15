"""
Client controller: HTTP concerns only, business rules live in ClientService.
"""

from flask import Blueprint

from agendapro.core.api_utils import api_response, get_json_body, notified_response
from agendapro.core.auth_decorators import current_owner_id
from agendapro.schemas.dtos import (
    ClientCreateRequest,
    ClientUpdateRequest,
    client_to_dict,
)

from . import dependencies

client_bp = Blueprint("client", __name__, url_prefix="/clients")


@client_bp.route("/", methods=["GET"])
def list_clients():
    clients = dependencies.client_service().list_clients(current_owner_id())
    return api_response(True, "OK", [client_to_dict(c) for c in clients])


@client_bp.route("/", methods=["POST"])
def create_client():
    owner_id = current_owner_id()
    service = dependencies.client_service()
    request_dto = service.parse_request(
        owner_id,
        "Erro ao cadastrar",
        lambda: ClientCreateRequest.from_payload(get_json_body()),
    )
    client = service.create_client(owner_id, request_dto)
    return notified_response(service.notifier, client_to_dict(client), 201)


@client_bp.route("/<client_id>", methods=["PATCH"])
def update_client(client_id: str):
    owner_id = current_owner_id()
    service = dependencies.client_service()
    request_dto = service.parse_request(
        owner_id,
        "Erro ao atualizar",
        lambda: ClientUpdateRequest.from_payload(get_json_body()),
    )
    client = service.update_client(owner_id, client_id, request_dto)
    return notified_response(service.notifier, client_to_dict(client))


@client_bp.route("/<client_id>", methods=["DELETE"])
def delete_client(client_id: str):
    service = dependencies.client_service()
    service.delete_client(current_owner_id(), client_id)
    return notified_response(service.notifier)
