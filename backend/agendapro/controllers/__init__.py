"""
HTTP controllers (Flask blueprints).

Controllers only translate between JSON and the application services; all
business rules live in ``agendapro.services``.
"""

from .appointment_controller import appointment_bp
from .auth_controller import auth_bp
from .client_controller import client_bp
from .dashboard_controller import dashboard_bp
from .health_controller import health_bp
from .service_controller import service_bp
from .settings_controller import settings_bp
from .transaction_controller import transaction_bp

BLUEPRINTS = (
    auth_bp,
    client_bp,
    service_bp,
    appointment_bp,
    transaction_bp,
    settings_bp,
    dashboard_bp,
    health_bp,
)

__all__ = ["BLUEPRINTS"]
