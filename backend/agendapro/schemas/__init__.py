"""
Schemas package - Data Transfer Objects and validation.

This package contains DTOs that define the API contracts
and handle validation before any store call is issued.
"""

from .dtos import (
    AppointmentDraft,
    AppointmentUpdateRequest,
    ClientCreateRequest,
    ClientUpdateRequest,
    ProfileUpdateRequest,
    ServiceCreateRequest,
    ServiceUpdateRequest,
    SignUpRequest,
    TransactionCreateRequest,
)

__all__ = [
    "AppointmentDraft",
    "AppointmentUpdateRequest",
    "ClientCreateRequest",
    "ClientUpdateRequest",
    "ProfileUpdateRequest",
    "ServiceCreateRequest",
    "ServiceUpdateRequest",
    "SignUpRequest",
    "TransactionCreateRequest",
]
