"""
Security checks for the booking service: input validation, caller identity
and the ownership-based authorization policy.
"""

from booking_service.security.auth import (
    authorize_booking_access,
    is_authorized,
    is_owner,
    resolve_identity,
)
from booking_service.security.input_validator import (
    UUID_PATTERN,
    is_valid_uuid,
    validate_booking_id,
)

__all__ = [
    "authorize_booking_access",
    "is_authorized",
    "is_owner",
    "resolve_identity",
    "UUID_PATTERN",
    "is_valid_uuid",
    "validate_booking_id",
]
