"""
Centralized configuration module for application-wide settings.

All values come from environment variables (optionally loaded from a .env
file by create_app) so tests and deployments can override them without code
changes.
"""

import logging
import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes")

# ===========================
# Database
# ===========================

DEFAULT_DATABASE_URL = "sqlite:///./agendapro.db"


def get_database_url() -> str:
    """Return the effective DATABASE_URL (local SQLite file by default)."""
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the application timezone from environment variable.

    The timezone only decides which calendar day is "today"; stored dates are
    plain local dates.

    Environment Variables:
        TZ: Timezone identifier (e.g., 'America/Sao_Paulo', 'UTC')
            Default: 'UTC'
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


# Global timezone instance - initialized once at import time
APP_TZ = get_app_timezone()


def today_local() -> date:
    """Return today's date in the application timezone."""
    return datetime.now(APP_TZ).date()


def log_timezone_config():
    """Log the active timezone configuration during startup."""
    logger.info(
        "Timezone configuration initialized",
        extra={
            "context": {
                "timezone": str(APP_TZ),
                "tz_env_var": os.getenv("TZ", "UTC"),
            }
        },
    )


# ===========================
# Working hours defaults
# ===========================

# Used for the settings page until the owner saves a profile.
DEFAULT_WORKING_HOURS_START = os.getenv("DEFAULT_WORKING_HOURS_START", "08:00")
DEFAULT_WORKING_HOURS_END = os.getenv("DEFAULT_WORKING_HOURS_END", "18:00")
DEFAULT_WORKING_DAYS = [
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
]


# ===========================
# Runtime flags
# ===========================


def is_production() -> bool:
    return os.getenv("FLASK_ENV", "development") == "production"


def is_testing() -> bool:
    return os.getenv("TESTING", "").lower().strip() in _TRUTHY


def get_log_to_file() -> bool:
    """Whether logs are also written to rotating files (LOG_TO_FILE, default on)."""
    return os.getenv("LOG_TO_FILE", "1").lower().strip() in _TRUTHY


WEAK_SECRETS = ["dev-secret-change-me", "secret123"]


def get_secret_key() -> str:
    """Get the Flask secret key with production validation.

    Raises:
        ValueError: If production deployment uses a weak or short secret
    """
    secret = os.getenv("FLASK_SECRET_KEY", "dev-secret-change-me")
    if is_production() and (secret in WEAK_SECRETS or len(secret) < 32):
        raise ValueError(
            "Production deployment requires strong SECRET_KEY (min 32 chars). "
            "Set FLASK_SECRET_KEY environment variable."
        )
    return secret
