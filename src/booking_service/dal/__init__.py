"""
Data Access Layer (DAL) for the booking service.

The service needs exactly one capability from storage: a point-read of a
booking by its id. BookingStore names that capability so the business
layer can be given any implementation, DynamoDB in production and an
in-memory fake in tests.
"""

from typing import Optional, Protocol, runtime_checkable

from booking_service.models.booking import BookingRecord


@runtime_checkable
class BookingStore(Protocol):
    """Protocol defining the booking point-read interface."""

    def get_booking_by_id(self, booking_id: str) -> Optional[BookingRecord]:
        """Return the booking stored under booking_id, or None if there is none."""
        ...


def get_dal_handler(
    table_name: str,
    endpoint_url: Optional[str] = None,
    region_name: Optional[str] = None,
) -> BookingStore:
    """
    Factory function to get the DynamoDB booking store.

    Args:
        table_name: Name of the bookings table, may be empty when unconfigured
        endpoint_url: DynamoDB endpoint override (local testing)
        region_name: AWS region of the bookings table

    Returns:
        BookingStore instance
    """
    # Import here to avoid circular imports
    from booking_service.dal.dynamodb_handler import DynamoDbBookingHandler

    return DynamoDbBookingHandler(table_name=table_name, endpoint_url=endpoint_url, region_name=region_name)


__all__ = [
    'BookingStore',
    'get_dal_handler',
]
