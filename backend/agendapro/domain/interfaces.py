"""
Abstract interfaces for repositories following Interface Segregation Principle.

These interfaces are the Entity Store contract: every read and write is
scoped to an owner id, and rows of another owner behave as missing rows.
Implementations raise ``StoreFailure`` when the store rejects an operation
and ``NotFound`` when an id does not exist for the owner.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional

from .entities import Appointment, Client, Profile, Service, Transaction, User


class IUserRepository(ABC):
    """Owner accounts."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    def create(self, user: User) -> User:
        pass


class IClientRepository(ABC):
    """Interface for client persistence."""

    @abstractmethod
    def list_for_owner(self, owner_id: str) -> List[Client]:
        """All clients of the owner ordered by name."""
        pass

    @abstractmethod
    def create(self, client: Client) -> Client:
        pass

    @abstractmethod
    def update(self, owner_id: str, client_id: str, fields: Dict[str, Any]) -> Client:
        pass

    @abstractmethod
    def delete(self, owner_id: str, client_id: str) -> None:
        pass


class IServiceRepository(ABC):
    """Interface for service catalog persistence."""

    @abstractmethod
    def list_for_owner(self, owner_id: str) -> List[Service]:
        """All services of the owner ordered by name."""
        pass

    @abstractmethod
    def create(self, service: Service) -> Service:
        pass

    @abstractmethod
    def update(
        self, owner_id: str, service_id: str, fields: Dict[str, Any]
    ) -> Service:
        pass

    @abstractmethod
    def delete(self, owner_id: str, service_id: str) -> None:
        pass


class IAppointmentReader(ABC):
    """Interface for appointment read operations."""

    @abstractmethod
    def get_by_id(self, owner_id: str, appointment_id: str) -> Optional[Appointment]:
        pass

    @abstractmethod
    def list_for_owner(
        self, owner_id: str, on_date: Optional[date] = None
    ) -> List[Appointment]:
        """Appointments ordered by (date, time), optionally on one date."""
        pass


class IAppointmentWriter(ABC):
    """Interface for appointment write operations."""

    @abstractmethod
    def create(self, appointment: Appointment) -> Appointment:
        pass

    @abstractmethod
    def update(
        self, owner_id: str, appointment_id: str, fields: Dict[str, Any]
    ) -> Appointment:
        pass

    @abstractmethod
    def delete(self, owner_id: str, appointment_id: str) -> None:
        pass


class IAppointmentRepository(IAppointmentReader, IAppointmentWriter):
    """Complete appointment repository interface."""

    pass


class ITransactionRepository(ABC):
    """Interface for ledger persistence."""

    @abstractmethod
    def list_for_owner(self, owner_id: str) -> List[Transaction]:
        """Entries ordered by date desc, then created_at desc."""
        pass

    @abstractmethod
    def create(self, transaction: Transaction) -> Transaction:
        pass

    @abstractmethod
    def delete(self, owner_id: str, transaction_id: str) -> None:
        pass


class IProfileRepository(ABC):
    """Interface for the one-per-owner settings row."""

    @abstractmethod
    def get_for_owner(self, owner_id: str) -> Optional[Profile]:
        pass

    @abstractmethod
    def upsert(self, owner_id: str, fields: Dict[str, Any]) -> Profile:
        """Update the owner's profile, creating it on first save."""
        pass


class INotifier(ABC):
    """Fire-and-forget channel telling the user what happened."""

    @abstractmethod
    def success(self, title: str, description: str) -> None:
        pass

    @abstractmethod
    def error(self, title: str, description: str) -> None:
        pass
