"""Service catalog endpoints."""

from flask import Blueprint

from agendapro.core.api_utils import api_response, get_json_body, notified_response
from agendapro.core.auth_decorators import current_owner_id
from agendapro.schemas.dtos import (
    ServiceCreateRequest,
    ServiceUpdateRequest,
    service_to_dict,
)

from . import dependencies

service_bp = Blueprint("service", __name__, url_prefix="/services")


@service_bp.route("/", methods=["GET"])
def list_services():
    services = dependencies.catalog_service().list_services(current_owner_id())
    return api_response(True, "OK", [service_to_dict(s) for s in services])


@service_bp.route("/", methods=["POST"])
def create_service():
    owner_id = current_owner_id()
    catalog = dependencies.catalog_service()
    request_dto = catalog.parse_request(
        owner_id,
        "Erro ao cadastrar",
        lambda: ServiceCreateRequest.from_payload(get_json_body()),
    )
    created = catalog.create_service(owner_id, request_dto)
    return notified_response(catalog.notifier, service_to_dict(created), 201)


@service_bp.route("/<service_id>", methods=["PATCH"])
def update_service(service_id: str):
    owner_id = current_owner_id()
    catalog = dependencies.catalog_service()
    request_dto = catalog.parse_request(
        owner_id,
        "Erro ao atualizar",
        lambda: ServiceUpdateRequest.from_payload(get_json_body()),
    )
    updated = catalog.update_service(owner_id, service_id, request_dto)
    return notified_response(catalog.notifier, service_to_dict(updated))


@service_bp.route("/<service_id>", methods=["DELETE"])
def delete_service(service_id: str):
    catalog = dependencies.catalog_service()
    catalog.delete_service(current_owner_id(), service_id)
    return notified_response(catalog.notifier)
