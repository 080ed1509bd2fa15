from flask import Blueprint

from agendapro.core.api_utils import api_response
from agendapro.core.auth_decorators import current_owner_id
from agendapro.schemas.dtos import appointment_to_dict

from . import dependencies

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")


@dashboard_bp.route("/", methods=["GET"])
def dashboard():
    owner_id = current_owner_id()
    if not owner_id:
        return api_response(False, "Authentication required", None, 401)

    summary = dependencies.dashboard_service().summary(owner_id)
    return api_response(
        True,
        "OK",
        {
            "date": summary.day.isoformat(),
            "scheduled_today": [appointment_to_dict(a) for a in summary.scheduled_today],
            "completed_today": summary.completed_today,
            "client_count": summary.client_count,
            "totals": summary.totals.to_dict(),
        },
    )
