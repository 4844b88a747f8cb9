"""
Business Logic Layer Module.

Holds the get-booking pipeline: validation, identity, lookup and the
ownership authorization decision, independent of the Lambda event shape.
"""

from booking_service.logic.booking_service import BookingService

__all__ = [
    "BookingService",
]
