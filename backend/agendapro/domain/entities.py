"""
Domain entities - Pure business logic, no framework dependencies.

Entities are plain dataclasses. Money is always ``Decimal``; calendar dates
are ``datetime.date`` and appointment times ``datetime.time``.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from typing import List, Optional

STATUS_SCHEDULED = "scheduled"
STATUS_COMPLETED = "completed"
STATUS_CANCELED = "canceled"
APPOINTMENT_STATUSES = (STATUS_SCHEDULED, STATUS_COMPLETED, STATUS_CANCELED)

TYPE_CREDIT = "credit"
TYPE_DEBIT = "debit"
TRANSACTION_TYPES = (TYPE_CREDIT, TYPE_DEBIT)

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


@dataclass
class User:
    """The business owner account; its id is the owner identity of every row."""

    id: Optional[str] = None
    email: str = ""
    password_hash: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.email or "@" not in self.email:
            raise ValueError("Invalid email format")


@dataclass
class Client:
    """Domain entity representing a Client of the business."""

    owner_id: str
    name: str
    id: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Service:
    """An entry of the service catalog."""

    owner_id: str
    name: str
    price: Decimal = Decimal("0")
    id: Optional[str] = None
    duration_minutes: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Appointment:
    """Domain entity for Appointment business logic.

    ``client_name``, ``service_name`` and ``price`` are snapshots taken when
    the appointment was booked; later edits of the referenced Client or
    Service do not reach them.
    """

    owner_id: str
    client_name: str
    service_name: str
    date: date
    time: time
    price: Decimal
    id: Optional[str] = None
    client_id: Optional[str] = None
    service_id: Optional[str] = None
    status: str = STATUS_SCHEDULED
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_scheduled(self) -> bool:
        return self.status == STATUS_SCHEDULED

    @property
    def ledger_description(self) -> str:
        """Description of the ledger entry posted when this is completed."""
        return f"{self.service_name} - {self.client_name}"


@dataclass
class Transaction:
    """A cash ledger entry; the sign comes from ``type`` only."""

    owner_id: str
    description: str
    amount: Decimal
    type: str
    date: date
    id: Optional[str] = None
    appointment_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def signed_amount(self) -> Decimal:
        amount = Decimal(self.amount)
        return amount if self.type == TYPE_CREDIT else -amount


@dataclass
class Profile:
    """Business settings of one owner."""

    owner_id: str
    id: Optional[str] = None
    business_name: Optional[str] = None
    phone: Optional[str] = None
    working_hours_start: Optional[str] = None
    working_hours_end: Optional[str] = None
    working_days: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
