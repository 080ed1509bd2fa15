"""
Domain package - Pure business logic layer.

This package contains:
- entities.py: Domain entities and status/type constants
- interfaces.py: Entity store and notifier contracts
"""

from .entities import Appointment, Client, Profile, Service, Transaction, User
from .interfaces import (
    IAppointmentReader,
    IAppointmentRepository,
    IAppointmentWriter,
    IClientRepository,
    INotifier,
    IProfileRepository,
    IServiceRepository,
    ITransactionRepository,
    IUserRepository,
)

__all__ = [
    # Domain entities
    "User",
    "Client",
    "Service",
    "Appointment",
    "Transaction",
    "Profile",
    # Store interfaces
    "IUserRepository",
    "IClientRepository",
    "IServiceRepository",
    "IAppointmentRepository",
    "IAppointmentReader",
    "IAppointmentWriter",
    "ITransactionRepository",
    "IProfileRepository",
    "INotifier",
]
