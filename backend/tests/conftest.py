"""
Central pytest configuration for the AgendaPro tests.

Environment variables are set before any ``agendapro`` import so the
configuration module, the lazy engine and the limiter pick up the test
values. Integration fixtures get a fresh in-memory SQLite schema per test.
"""

import os
import uuid
from datetime import date, time
from decimal import Decimal

import pytest

os.environ["DATABASE_URL"] = "sqlite:///:memory:"  # In-memory SQLite for fast tests
os.environ["TESTING"] = "true"
os.environ["RATE_LIMIT_ENABLED"] = "0"  # Disable rate limiting in tests
os.environ["LOG_TO_FILE"] = "0"
os.environ.setdefault("FLASK_SECRET_KEY", "test-secret-key")

from tests.config.markers import *  # noqa: E402,F401,F403

from agendapro.core.cache import CollectionCache  # noqa: E402
from agendapro.core.notifications import CollectingNotifier  # noqa: E402
from agendapro.db.session import SessionLocal, create_tables, drop_tables  # noqa: E402
from agendapro.domain.entities import Appointment, Client, Service  # noqa: E402

OWNER_ID = "owner-1"
OTHER_OWNER_ID = "owner-2"


# =====================================================
# BASIC FIXTURES
# =====================================================


@pytest.fixture
def owner_id():
    return OWNER_ID


@pytest.fixture
def notifier():
    return CollectingNotifier()


@pytest.fixture
def cache():
    return CollectionCache()


@pytest.fixture
def sample_client():
    return Client(id="client-ana", owner_id=OWNER_ID, name="Ana", phone="11999990000")


@pytest.fixture
def sample_service():
    return Service(
        id="service-haircut",
        owner_id=OWNER_ID,
        name="Haircut",
        price=Decimal("50.00"),
        duration_minutes=30,
    )


@pytest.fixture
def scheduled_appointment():
    return Appointment(
        id="appt-1",
        owner_id=OWNER_ID,
        client_id="client-ana",
        service_id="service-haircut",
        client_name="Ana",
        service_name="Haircut",
        date=date(2024, 6, 12),
        time=time(14, 0),
        price=Decimal("50.00"),
    )


# =====================================================
# DATABASE / APPLICATION FIXTURES
# =====================================================


@pytest.fixture
def db_session():
    """Session on a freshly created schema, dropped after the test."""
    drop_tables()
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        drop_tables()


@pytest.fixture
def app():
    from agendapro.main import create_app

    drop_tables()
    flask_app = create_app()
    flask_app.config.update(TESTING=True)
    yield flask_app
    drop_tables()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_auth_client(app):
    """Factory of test clients, each signed in as a new owner.

    ``test_client.owner`` holds the id and email returned by sign-up.
    """

    def make(email=None, password="secret123"):
        test_client = app.test_client()
        email = email or f"owner-{uuid.uuid4().hex[:8]}@example.com"
        response = test_client.post(
            "/auth/signup", json={"email": email, "password": password}
        )
        assert response.status_code == 201, response.get_json()
        test_client.owner = response.get_json()["data"]
        return test_client

    return make


@pytest.fixture
def auth_client(make_auth_client):
    return make_auth_client()
