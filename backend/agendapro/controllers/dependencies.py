"""
Per-request wiring of repositories and services.

One SQLAlchemy session per request (closed on app-context teardown) and one
CollectingNotifier per request, so the response message is the notification
the service produced. The collection cache lives on the application.
"""

from flask import Flask, current_app, g

from agendapro.core.cache import CollectionCache
from agendapro.core.notifications import CollectingNotifier
from agendapro.db.session import SessionLocal
from agendapro.repositories.appointment_repo import AppointmentRepository
from agendapro.repositories.client_repo import ClientRepository
from agendapro.repositories.profile_repo import ProfileRepository
from agendapro.repositories.service_repo import ServiceRepository
from agendapro.repositories.transaction_repo import TransactionRepository
from agendapro.repositories.user_repo import UserRepository
from agendapro.services.appointment_service import AppointmentService
from agendapro.services.catalog_service import ServiceCatalogService
from agendapro.services.client_service import ClientService
from agendapro.services.dashboard_service import DashboardService
from agendapro.services.profile_service import ProfileService
from agendapro.services.transaction_service import TransactionService
from agendapro.services.user_service import UserService

CACHE_EXTENSION = "collection_cache"


def init_app(app: Flask) -> None:
    app.extensions[CACHE_EXTENSION] = CollectionCache()

    @app.teardown_appcontext
    def close_db_session(exception=None):
        db = g.pop("db", None)
        if db is not None:
            db.close()


def get_db():
    if "db" not in g:
        g.db = SessionLocal()
    return g.db


def get_cache() -> CollectionCache:
    return current_app.extensions[CACHE_EXTENSION]


def get_notifier() -> CollectingNotifier:
    if "notifier" not in g:
        g.notifier = CollectingNotifier()
    return g.notifier


def user_service() -> UserService:
    return UserService(UserRepository(get_db()))


def client_service() -> ClientService:
    return ClientService(ClientRepository(get_db()), get_notifier(), get_cache())


def catalog_service() -> ServiceCatalogService:
    return ServiceCatalogService(
        ServiceRepository(get_db()), get_notifier(), get_cache()
    )


def appointment_service() -> AppointmentService:
    db = get_db()
    return AppointmentService(
        AppointmentRepository(db),
        TransactionRepository(db),
        get_notifier(),
        get_cache(),
    )


def transaction_service() -> TransactionService:
    return TransactionService(
        TransactionRepository(get_db()), get_notifier(), get_cache()
    )


def profile_service() -> ProfileService:
    return ProfileService(ProfileRepository(get_db()), get_notifier(), get_cache())


def dashboard_service() -> DashboardService:
    return DashboardService(
        appointment_service(), transaction_service(), client_service()
    )
