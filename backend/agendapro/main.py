"""
Application factory.

Wires logging, sessions (Flask-Login), rate limiting, the collection cache and
the JSON blueprints. Expected failures raised anywhere below a route are
mapped to the standard error envelope here, once.
"""

import logging
import os

from dotenv import load_dotenv
from flask import Flask
from flask_login import LoginManager
from werkzeug.exceptions import HTTPException

# Only load from .env when DATABASE_URL is not already defined by the environment
if not os.getenv("DATABASE_URL"):
    load_dotenv()

from agendapro.core.api_utils import (  # noqa: E402
    api_response,
    error_response,
    unexpected_error_response,
)
from agendapro.core.config import (  # noqa: E402
    get_log_to_file,
    get_secret_key,
    is_production,
    is_testing,
    log_timezone_config,
)
from agendapro.core.exceptions import AgendaError  # noqa: E402
from agendapro.core.limiter_config import limiter  # noqa: E402
from agendapro.core.logging_config import setup_logging  # noqa: E402

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    app = Flask(__name__)
    app.config["TESTING"] = is_testing()
    app.config["SECRET_KEY"] = get_secret_key()

    production = is_production()
    setup_logging(
        app=app,
        log_level=logging.INFO if production else logging.DEBUG,
        enable_sql_echo=not production and not app.config["TESTING"],
        log_to_file=get_log_to_file(),
        use_json_format=production,
    )
    log_timezone_config()

    app.config["RATELIMIT_STORAGE_URI"] = os.getenv("LIMITER_STORAGE_URI", "memory://")
    limiter.init_app(app)
    if os.getenv("RATE_LIMIT_ENABLED", "1") == "0":
        limiter.enabled = False
        logger.info(
            "Rate limiting disabled", extra={"context": {"test_mode": is_testing()}}
        )

    _init_login_manager(app)
    _register_error_handlers(app)

    from agendapro.controllers import BLUEPRINTS, dependencies

    dependencies.init_app(app)
    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)

    from agendapro.db.session import create_tables

    try:
        create_tables()
    except Exception as e:
        logger.error(
            "Error creating tables",
            extra={"context": {"error": str(e)}},
            exc_info=True,
        )
        raise

    logger.info(
        "Application created",
        extra={
            "context": {
                "environment": os.getenv("FLASK_ENV", "development"),
                "blueprints": [bp.name for bp in BLUEPRINTS],
            }
        },
    )
    return app


def _init_login_manager(app: Flask) -> None:
    login_manager = LoginManager()
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id):
        from agendapro.controllers.dependencies import get_db
        from agendapro.repositories.user_repo import UserRepository

        return UserRepository(get_db()).get_db_by_id(user_id)

    @login_manager.unauthorized_handler
    def unauthorized():
        return api_response(False, "Authentication required", None, 401)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AgendaError)
    def handle_agenda_error(error: AgendaError):
        logger.warning(
            f"{type(error).__name__}: {error.message}",
            extra={"context": {"status_code": error.status_code}},
        )
        return error_response(error)

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return api_response(False, error.description or error.name, None, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        return unexpected_error_response(error)
