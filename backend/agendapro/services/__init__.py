# Services package initialization
# Use-cases of the application; each service depends on repository
# interfaces, a notifier and the collection cache.

from . import (
    appointment_service,
    catalog_service,
    client_service,
    dashboard_service,
    period_totals,
    profile_service,
    reference_resolver,
    transaction_service,
    user_service,
)

__all__ = [
    "appointment_service",
    "catalog_service",
    "client_service",
    "dashboard_service",
    "period_totals",
    "profile_service",
    "reference_resolver",
    "transaction_service",
    "user_service",
]
