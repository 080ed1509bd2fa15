"""
Custom exceptions for the application.
Following SOLID principles - centralized error handling.

Every failure raised by a service carries a human-readable message (shown to
the user verbatim), a notification title and the HTTP status the controllers
answer with.
"""


class AgendaError(Exception):
    """Base class for all expected application failures."""

    status_code = 500
    title = "Erro"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Unauthenticated(AgendaError):
    """Mutating operation attempted without an owner identity.

    Raised before any store call is issued; never retried.
    """

    status_code = 401
    title = "Não autenticado"

    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message)


class ValidationFailure(AgendaError):
    """A required field is missing or malformed; the store is never reached."""

    status_code = 400
    title = "Dados inválidos"


class NotFound(AgendaError):
    """The store has no row with that id for the current owner."""

    status_code = 404
    title = "Não encontrado"

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(f"{resource} {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class StoreFailure(AgendaError):
    """The entity store rejected the operation.

    The store-provided message is passed through verbatim. Partial effects of
    multi-step operations are not rolled back.
    """

    status_code = 502
    title = "Erro no banco de dados"


class InvalidTransition(AgendaError):
    """Lifecycle operation attempted on an appointment that is not scheduled."""

    status_code = 409
    title = "Transição inválida"

    def __init__(self, appointment_id: str, current_status: str, target: str) -> None:
        super().__init__(
            f"Cannot move appointment {appointment_id} from "
            f"'{current_status}' to '{target}'"
        )
        self.appointment_id = appointment_id
        self.current_status = current_status
        self.target = target
