"""Business profile and working hours."""

from flask import Blueprint

from agendapro.core.api_utils import api_response, get_json_body, notified_response
from agendapro.core.auth_decorators import current_owner_id
from agendapro.schemas.dtos import ProfileUpdateRequest, profile_to_dict

from . import dependencies

settings_bp = Blueprint("settings", __name__, url_prefix="/settings")


@settings_bp.route("/", methods=["GET"])
def get_settings():
    profile = dependencies.profile_service().get_settings(current_owner_id())
    if profile is None:
        return api_response(False, "Authentication required", None, 401)
    return api_response(True, "OK", profile_to_dict(profile))


@settings_bp.route("/", methods=["PUT"])
def save_settings():
    owner_id = current_owner_id()
    service = dependencies.profile_service()
    request_dto = service.parse_request(
        owner_id,
        "Erro ao salvar",
        lambda: ProfileUpdateRequest.from_payload(get_json_body()),
    )
    profile = service.save_settings(owner_id, request_dto)
    return notified_response(service.notifier, profile_to_dict(profile))
