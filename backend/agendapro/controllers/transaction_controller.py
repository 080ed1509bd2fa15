"""Cash ledger endpoints: entries and period totals."""

from flask import Blueprint

from agendapro.core.api_utils import api_response, get_json_body, notified_response
from agendapro.core.auth_decorators import current_owner_id
from agendapro.schemas.dtos import TransactionCreateRequest, transaction_to_dict

from . import dependencies

transaction_bp = Blueprint("transaction", __name__, url_prefix="/transactions")


@transaction_bp.route("/", methods=["GET"])
def list_transactions():
    transactions = dependencies.transaction_service().list_transactions(
        current_owner_id()
    )
    return api_response(True, "OK", [transaction_to_dict(t) for t in transactions])


@transaction_bp.route("/totals", methods=["GET"])
def period_totals():
    """Signed totals for today, the current week and the current month."""
    totals = dependencies.transaction_service().period_totals(current_owner_id())
    return api_response(True, "OK", totals.to_dict())


@transaction_bp.route("/", methods=["POST"])
def create_transaction():
    """Manual ledger entry.

    Expected JSON: {"description": str, "amount": number, "type": "credit"|"debit",
    "date"?: "YYYY-MM-DD"}
    """
    owner_id = current_owner_id()
    service = dependencies.transaction_service()
    request_dto = service.parse_request(
        owner_id,
        "Erro ao registrar",
        lambda: TransactionCreateRequest.from_payload(get_json_body()),
    )
    transaction = service.create_transaction(owner_id, request_dto)
    return notified_response(service.notifier, transaction_to_dict(transaction), 201)


@transaction_bp.route("/<transaction_id>", methods=["DELETE"])
def delete_transaction(transaction_id: str):
    service = dependencies.transaction_service()
    service.delete_transaction(current_owner_id(), transaction_id)
    return notified_response(service.notifier)
