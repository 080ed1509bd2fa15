"""
Common API utilities for consistent response formatting across all controllers.
"""

import logging
from typing import Any, Optional

from flask import jsonify, request

from agendapro.core.exceptions import AgendaError
from agendapro.core.notifications import CollectingNotifier

logger = logging.getLogger(__name__)


def api_response(
    success: bool, message: str, data: Optional[Any] = None, status_code: int = 200
) -> tuple:
    """
    Standardized API response format for all endpoints.

    Args:
        success: Whether the operation was successful
        message: Human-readable message about the operation
        data: Optional data payload
        status_code: HTTP status code

    Returns:
        Tuple of (json_response, status_code)
    """
    response = {"success": success, "message": message}

    if data is not None:
        response["data"] = data

    return jsonify(response), status_code


def notified_response(
    notifier: CollectingNotifier, data: Optional[Any] = None, status_code: int = 200
) -> tuple:
    """Successful response whose message is the service's notification."""
    notification = notifier.last
    message = notification.description if notification else "OK"
    return api_response(True, message, data, status_code)


def error_response(error: AgendaError) -> tuple:
    """Map an expected application failure to its JSON error response."""
    return api_response(
        False,
        error.message,
        {"error": type(error).__name__, "title": error.title},
        error.status_code,
    )


def unexpected_error_response(error: Exception) -> tuple:
    logger.error(
        f"Unexpected error on {request.method} {request.path}",
        extra={"context": {"error": str(error)}},
        exc_info=True,
    )
    return api_response(False, "Erro interno do servidor", None, 500)


def get_json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}
