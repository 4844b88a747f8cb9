"""
Business Logic Layer for booking retrieval.

BookingService runs the get-booking pipeline in a fixed order: validate the
id, resolve the caller, read the booking, authorize. Each step either
passes its result on or raises a BookingServiceError that ends the request.
Not-found is decided before authorization, so a caller only ever sees 403
for bookings that exist.
"""

from typing import Optional

from aws_lambda_powertools.metrics import MetricUnit

from booking_service.dal import BookingStore
from booking_service.handlers.utils.errors import (
    BookingNotFoundError,
    BookingServiceError,
    ErrorContext,
    StorageUnavailableError,
    create_error_context,
)
from booking_service.handlers.utils.observability import logger, metrics, tracer
from booking_service.models.booking import BookingRecord
from booking_service.models.input import GetBookingRequest
from booking_service.security.auth import authorize_booking_access, resolve_identity
from booking_service.security.input_validator import validate_booking_id


class BookingService:
    """Business logic service for booking retrieval."""

    def __init__(self, bookings_store: BookingStore):
        """
        Initialize booking service.

        Args:
            bookings_store: Point-read access to booking records
        """
        self.bookings_store = bookings_store

    @tracer.capture_method
    def get_booking(self, request: GetBookingRequest) -> BookingRecord:
        """
        Retrieve a booking the caller is allowed to see.

        Args:
            request: Parsed get-booking request

        Returns:
            The stored booking

        Raises:
            MissingBookingIdError: Path carried no id
            InvalidBookingIdError: Id is not a canonical UUID
            AuthenticationError: No trusted identity
            StorageConfigurationError: Bookings table not configured
            StorageUnavailableError: Storage read failed
            BookingNotFoundError: No booking under that id
            BookingAccessDeniedError: Caller is neither owner nor privileged
        """
        context = create_error_context(
            request_id=request.request_id,
            operation="get_booking",
            resource_id=request.booking_id,
        )

        booking_id = validate_booking_id(request.booking_id, context=context)
        identity = resolve_identity(request.identity, context=context)
        context.user_id = identity.user_id

        tracer.put_annotation("booking_id", booking_id)

        booking = self._read_booking(booking_id, context)
        if booking is None:
            logger.info("Booking not found", extra={"booking_id": booking_id})
            raise BookingNotFoundError(booking_id, context=context)

        authorize_booking_access(identity, booking, context=context)

        logger.info("Returning booking details", extra={
            "booking_id": booking_id,
            "user_id": identity.user_id,
            "privileged": identity.is_privileged,
        })
        metrics.add_metric(name="BookingRetrieved", unit=MetricUnit.Count, value=1)

        return booking

    def _read_booking(self, booking_id: str, context: ErrorContext) -> Optional[BookingRecord]:
        try:
            return self.bookings_store.get_booking_by_id(booking_id)
        except BookingServiceError as e:
            if e.context is None:
                e.context = context
            raise
        except Exception as e:
            logger.exception("Booking store raised an unexpected error", extra={"booking_id": booking_id})
            raise StorageUnavailableError(
                message=f"Booking store failure: {e.__class__.__name__}",
                context=context,
            ) from e
