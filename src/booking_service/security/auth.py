"""
Identity and authorization checks for booking access.

Token verification happens upstream in the API Gateway authorizer; by the
time these checks run the identity context is trusted as-is. Access to a
booking is granted to its owner and to the privileged role, and denied in
every other case, including bookings without owner information.
"""

from typing import Optional

from booking_service.handlers.utils.errors import (
    AuthenticationError,
    BookingAccessDeniedError,
    ErrorContext,
)
from booking_service.handlers.utils.observability import logger
from booking_service.models.booking import BookingRecord
from booking_service.models.input import RequestIdentity


def resolve_identity(
    identity: Optional[RequestIdentity],
    context: Optional[ErrorContext] = None,
) -> RequestIdentity:
    """
    Return the caller identity if it names a user.

    Raises:
        AuthenticationError: If there is no authorizer context or its userId is empty
    """
    if identity is None or not identity.user_id:
        logger.error("User ID not found in authorizer context")
        raise AuthenticationError(context=context)

    logger.info("Caller identity resolved", extra={"user_id": identity.user_id, "role": identity.role})
    return identity


def is_owner(identity: RequestIdentity, booking: BookingRecord) -> bool:
    """Exact, case-sensitive match between caller and booking owner."""
    owner_id = booking.owner_id
    if not owner_id or not identity.user_id:
        return False
    return owner_id == identity.user_id


def is_authorized(identity: RequestIdentity, booking: BookingRecord) -> bool:
    """Check whether the caller may view the booking."""
    return identity.is_privileged or is_owner(identity, booking)


def authorize_booking_access(
    identity: RequestIdentity,
    booking: BookingRecord,
    context: Optional[ErrorContext] = None,
) -> None:
    """
    Enforce the ownership policy on a found booking.

    Raises:
        BookingAccessDeniedError: If the caller is neither owner nor privileged
    """
    if not is_authorized(identity, booking):
        logger.info(
            "User not authorized to view booking",
            extra={"user_id": identity.user_id, "booking_id": booking.id},
        )
        raise BookingAccessDeniedError(booking.id, identity.user_id or '', context=context)
