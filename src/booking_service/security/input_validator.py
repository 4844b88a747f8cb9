"""
Input validation for the booking id path parameter.

The check is purely syntactic: 32 hex digits grouped 8-4-4-4-12, any case,
with no version or variant nibble checks. The identifier is passed on
unchanged; lookups and comparisons use it exactly as received.
"""

import re
from typing import Optional

from booking_service.handlers.utils.errors import (
    ErrorContext,
    InvalidBookingIdError,
    MissingBookingIdError,
)
from booking_service.handlers.utils.observability import logger

UUID_PATTERN = re.compile(
    r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}',
    re.IGNORECASE,
)


def is_valid_uuid(value: str) -> bool:
    """Check whether value is a canonical UUID string."""
    return UUID_PATTERN.fullmatch(value) is not None


def validate_booking_id(booking_id: Optional[str], context: Optional[ErrorContext] = None) -> str:
    """
    Validate a booking id taken from the request path.

    Args:
        booking_id: Raw path value, None when the path carried no id
        context: Error context for tracing

    Returns:
        The booking id, unchanged

    Raises:
        MissingBookingIdError: If the id is absent or empty
        InvalidBookingIdError: If the id is not a canonical UUID
    """
    if not booking_id:
        logger.error("Booking ID missing from path parameters")
        raise MissingBookingIdError(context=context)

    if not is_valid_uuid(booking_id):
        logger.error("Invalid booking ID format", extra={"booking_id": booking_id})
        raise InvalidBookingIdError(booking_id, context=context)

    return booking_id
