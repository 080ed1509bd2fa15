"""
Data Transfer Objects (DTOs) and validation schemas.

Request DTOs are built from JSON payloads with ``from_payload`` (malformed
values raise ``ValidationFailure`` right away) and checked with ``validate``
before any store call is issued. ``*_to_dict`` helpers render domain
entities for JSON responses.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional

from agendapro.core.exceptions import ValidationFailure
from agendapro.core.security import MIN_PASSWORD_LENGTH
from agendapro.domain.entities import (
    TRANSACTION_TYPES,
    WEEKDAYS,
    Appointment,
    Client,
    Profile,
    Service,
    Transaction,
)

_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")
_HHMM_SS = re.compile(r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$")

# Money columns are Numeric(10, 2)
MAX_MONEY = Decimal("100000000")


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------


def parse_date(value: Any, field_name: str = "date") -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationFailure(f"{field_name} must be a date in YYYY-MM-DD format")


def parse_time(value: Any, field_name: str = "time") -> time:
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    text = str(value)
    if not _HHMM_SS.match(text):
        raise ValidationFailure(f"{field_name} must be a time in HH:MM format")
    return time(int(text[:2]), int(text[3:5]))


def parse_money(value: Any, field_name: str = "amount") -> Decimal:
    if isinstance(value, bool):
        raise ValidationFailure(f"{field_name} must be a number")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationFailure(f"{field_name} must be a number")
    if not amount.is_finite():
        raise ValidationFailure(f"{field_name} must be a number")
    if amount < 0:
        raise ValidationFailure(f"{field_name} cannot be negative")
    if amount < MAX_MONEY:
        amount = amount.quantize(Decimal("0.01"))
    if amount >= MAX_MONEY:
        raise ValidationFailure(f"{field_name} is too large")
    return amount


def parse_hhmm(value: Any, field_name: str) -> str:
    text = str(value)
    if not _HHMM.match(text):
        raise ValidationFailure(f"{field_name} must be a time in HH:MM format")
    return text


def optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def required_text(value: Any, field_name: str) -> str:
    text = optional_text(value)
    if not text:
        raise ValidationFailure(f"{field_name} is required")
    return text


def parse_duration(value: Any, field_name: str = "duration_minutes") -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValidationFailure(f"{field_name} must be a whole number of minutes")
    try:
        minutes = int(value)
    except (TypeError, ValueError):
        raise ValidationFailure(f"{field_name} must be a whole number of minutes")
    if minutes <= 0:
        raise ValidationFailure(f"{field_name} must be positive")
    return minutes


def parse_weekdays(value: Any, field_name: str = "working_days") -> List[str]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValidationFailure(f"{field_name} must be a list of weekday names")
    days = []
    for item in value:
        day = str(item).strip().lower()
        if day not in WEEKDAYS:
            raise ValidationFailure(f"Unknown weekday '{item}'")
        if day not in days:
            days.append(day)
    return sorted(days, key=WEEKDAYS.index)


def _parse_patch(
    payload: Dict[str, Any],
    parsers: Dict[str, Callable[[Any], Any]],
    resource: str,
) -> Dict[str, Any]:
    unknown = sorted(set(payload) - set(parsers))
    if unknown:
        raise ValidationFailure(
            f"{resource} fields cannot be updated: {', '.join(unknown)}"
        )
    return {name: parsers[name](value) for name, value in payload.items()}


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


@dataclass
class SignUpRequest:
    email: str
    password: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "SignUpRequest":
        return cls(
            email=str(payload.get("email") or "").strip().lower(),
            password=str(payload.get("password") or ""),
        )

    def validate(self) -> None:
        if not self.email or "@" not in self.email:
            raise ValidationFailure("Valid email is required")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise ValidationFailure("Password must be at least 6 characters")


# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------


@dataclass
class ClientCreateRequest:
    name: str
    phone: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ClientCreateRequest":
        return cls(
            name=str(payload.get("name") or "").strip(),
            phone=optional_text(payload.get("phone")),
            notes=optional_text(payload.get("notes")),
        )

    def validate(self) -> None:
        if not self.name:
            raise ValidationFailure("Client name is required")


@dataclass
class ClientUpdateRequest:
    fields: Dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ClientUpdateRequest":
        parsers = {
            "name": lambda v: required_text(v, "Client name"),
            "phone": optional_text,
            "notes": optional_text,
        }
        return cls(fields=_parse_patch(payload, parsers, "Client"))

    def validate(self) -> None:
        if not self.fields:
            raise ValidationFailure("Nothing to update")


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------


@dataclass
class ServiceCreateRequest:
    name: str
    price: Decimal
    duration_minutes: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ServiceCreateRequest":
        return cls(
            name=str(payload.get("name") or "").strip(),
            price=parse_money(payload.get("price", 0), "price"),
            duration_minutes=parse_duration(payload.get("duration_minutes")),
        )

    def validate(self) -> None:
        if not self.name:
            raise ValidationFailure("Service name is required")
        if self.price < 0:
            raise ValidationFailure("price cannot be negative")
        if self.duration_minutes is not None and self.duration_minutes <= 0:
            raise ValidationFailure("duration_minutes must be positive")


@dataclass
class ServiceUpdateRequest:
    fields: Dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ServiceUpdateRequest":
        parsers = {
            "name": lambda v: required_text(v, "Service name"),
            "price": lambda v: parse_money(v, "price"),
            "duration_minutes": parse_duration,
        }
        return cls(fields=_parse_patch(payload, parsers, "Service"))

    def validate(self) -> None:
        if not self.fields:
            raise ValidationFailure("Nothing to update")


# ---------------------------------------------------------------------------
# Appointments
# ---------------------------------------------------------------------------


@dataclass
class AppointmentDraft:
    """An appointment being booked.

    The reference resolver fills ``client_name``/``service_name``/``price``
    from the selected client and service; they can also be typed manually.
    """

    client_name: str = ""
    service_name: str = ""
    date: Optional[date] = None
    time: Optional[time] = None
    price: Optional[Decimal] = None
    client_id: Optional[str] = None
    service_id: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "AppointmentDraft":
        price = payload.get("price")
        return cls(
            client_name=str(payload.get("client_name") or "").strip(),
            service_name=str(payload.get("service_name") or "").strip(),
            date=parse_date(payload["date"]) if payload.get("date") else None,
            time=parse_time(payload["time"]) if payload.get("time") else None,
            price=parse_money(price, "price") if price not in (None, "") else None,
            client_id=optional_text(payload.get("client_id")),
            service_id=optional_text(payload.get("service_id")),
            notes=optional_text(payload.get("notes")),
        )

    def validate(self) -> None:
        if not self.client_name.strip():
            raise ValidationFailure("Client name is required")
        if not self.service_name.strip():
            raise ValidationFailure("Service name is required")
        if self.date is None:
            raise ValidationFailure("date is required")
        if self.time is None:
            raise ValidationFailure("time is required")
        if self.price is None:
            raise ValidationFailure("price is required")
        if self.price < 0:
            raise ValidationFailure("price cannot be negative")


@dataclass
class AppointmentUpdateRequest:
    """Partial patch of an appointment; status changes go through the lifecycle."""

    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "AppointmentUpdateRequest":
        if "status" in payload:
            raise ValidationFailure(
                "status cannot be updated directly; complete or cancel the appointment"
            )
        parsers = {
            "client_id": optional_text,
            "service_id": optional_text,
            "client_name": lambda v: required_text(v, "Client name"),
            "service_name": lambda v: required_text(v, "Service name"),
            "date": parse_date,
            "time": parse_time,
            "price": lambda v: parse_money(v, "price"),
            "notes": optional_text,
        }
        return cls(fields=_parse_patch(payload, parsers, "Appointment"))

    def validate(self) -> None:
        if not self.fields:
            raise ValidationFailure("Nothing to update")


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


@dataclass
class TransactionCreateRequest:
    """Manual ledger entry; ``date`` defaults to today in the service."""

    description: str
    amount: Decimal
    type: str
    date: Optional[date] = None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "TransactionCreateRequest":
        return cls(
            description=str(payload.get("description") or "").strip(),
            amount=parse_money(payload.get("amount"), "amount"),
            type=str(payload.get("type") or "").strip().lower(),
            date=parse_date(payload["date"]) if payload.get("date") else None,
        )

    def validate(self) -> None:
        if not self.description:
            raise ValidationFailure("description is required")
        if self.amount < 0:
            raise ValidationFailure("amount cannot be negative")
        if self.type not in TRANSACTION_TYPES:
            raise ValidationFailure("type must be 'credit' or 'debit'")


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@dataclass
class ProfileUpdateRequest:
    fields: Dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ProfileUpdateRequest":
        parsers = {
            "business_name": optional_text,
            "phone": optional_text,
            "working_hours_start": lambda v: parse_hhmm(v, "working_hours_start"),
            "working_hours_end": lambda v: parse_hhmm(v, "working_hours_end"),
            "working_days": parse_weekdays,
        }
        return cls(fields=_parse_patch(payload, parsers, "Profile"))

    def validate(self) -> None:
        if not self.fields:
            raise ValidationFailure("Nothing to update")


def validate_working_hours(start: str, end: str) -> None:
    # HH:MM strings compare in clock order
    if start >= end:
        raise ValidationFailure("working_hours_start must be before working_hours_end")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def client_to_dict(client: Client) -> Dict[str, Any]:
    return {
        "id": client.id,
        "name": client.name,
        "phone": client.phone,
        "notes": client.notes,
        "created_at": _iso(client.created_at),
        "updated_at": _iso(client.updated_at),
    }


def service_to_dict(service: Service) -> Dict[str, Any]:
    return {
        "id": service.id,
        "name": service.name,
        "price": float(service.price),
        "duration_minutes": service.duration_minutes,
        "created_at": _iso(service.created_at),
        "updated_at": _iso(service.updated_at),
    }


def appointment_to_dict(appointment: Appointment) -> Dict[str, Any]:
    return {
        "id": appointment.id,
        "client_id": appointment.client_id,
        "service_id": appointment.service_id,
        "client_name": appointment.client_name,
        "service_name": appointment.service_name,
        "date": appointment.date.isoformat(),
        "time": appointment.time.strftime("%H:%M"),
        "price": float(appointment.price),
        "status": appointment.status,
        "notes": appointment.notes,
        "created_at": _iso(appointment.created_at),
        "updated_at": _iso(appointment.updated_at),
    }


def transaction_to_dict(transaction: Transaction) -> Dict[str, Any]:
    return {
        "id": transaction.id,
        "appointment_id": transaction.appointment_id,
        "description": transaction.description,
        "amount": float(transaction.amount),
        "type": transaction.type,
        "date": transaction.date.isoformat(),
        "created_at": _iso(transaction.created_at),
    }


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    return {
        "business_name": profile.business_name,
        "phone": profile.phone,
        "working_hours_start": profile.working_hours_start,
        "working_hours_end": profile.working_hours_end,
        "working_days": list(profile.working_days),
        "saved": profile.id is not None,
    }
