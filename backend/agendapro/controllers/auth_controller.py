"""Sign-up, sign-in and sign-out with Flask-Login sessions."""

import logging

from flask import Blueprint
from flask_login import login_user, logout_user

from agendapro.core.api_utils import api_response, get_json_body
from agendapro.core.auth_decorators import current_owner_id
from agendapro.core.limiter_config import limiter
from agendapro.repositories.user_repo import UserRepository
from agendapro.schemas.dtos import SignUpRequest

from . import dependencies

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


def _login(user_id: str) -> None:
    db_user = UserRepository(dependencies.get_db()).get_db_by_id(user_id)
    login_user(db_user)


@auth_bp.route("/signup", methods=["POST"])
@limiter.limit("5 per minute;20 per hour")
def signup():
    """Create an owner account and sign it in.

    Expected JSON: {"email": str, "password": str}
    """
    request_dto = SignUpRequest.from_payload(get_json_body())
    user = dependencies.user_service().sign_up(request_dto)
    _login(user.id)
    logger.info("Owner signed up", extra={"context": {"owner_id": user.id}})
    return api_response(
        True, "Conta criada com sucesso.", {"id": user.id, "email": user.email}, 201
    )


@auth_bp.route("/login", methods=["POST"])
@limiter.limit("5 per minute;20 per hour")
def login():
    """Local email/password login.

    Expected JSON: {"email": str, "password": str}
    """
    data = get_json_body()
    user = dependencies.user_service().authenticate(
        str(data.get("email") or ""), str(data.get("password") or "")
    )
    _login(user.id)
    return api_response(True, "Login realizado.", {"id": user.id, "email": user.email})


@auth_bp.route("/logout", methods=["POST"])
def logout():
    owner_id = current_owner_id()
    if owner_id:
        dependencies.get_cache().clear(owner_id)
    logout_user()
    return api_response(True, "Você foi desconectado com sucesso.")


@auth_bp.route("/me", methods=["GET"])
def me():
    owner_id = current_owner_id()
    if not owner_id:
        return api_response(False, "Authentication required", None, 401)
    user = dependencies.user_service().repo.get_by_id(owner_id)
    if user is None:
        logout_user()
        return api_response(False, "Authentication required", None, 401)
    return api_response(True, "OK", {"id": user.id, "email": user.email})
