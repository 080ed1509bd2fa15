"""Liveness check including a database round trip."""

import logging

from flask import Blueprint
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from agendapro import __version__
from agendapro.core.api_utils import api_response

from . import dependencies

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health():
    try:
        dependencies.get_db().execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check failed", extra={"context": {"error": str(e)}})
        return api_response(
            False, "Database unavailable", {"version": __version__}, 503
        )
    return api_response(True, "OK", {"version": __version__, "database": "ok"})
