"""
Output models for API responses using Pydantic.

Only the fields declared here are ever serialized back to the caller.
"""

from typing import Annotated

from pydantic import BaseModel, Field

from booking_service.models.booking import BookingRecord


class BookingUserOutput(BaseModel):
    """Owner block of a booking response; missing values are empty strings."""

    id: Annotated[str, Field(description='Owner identifier')] = ''
    name: Annotated[str, Field(description='Owner name')] = ''
    email: Annotated[str, Field(description='Owner email')] = ''


class GetBookingOutput(BaseModel):
    """Response model for retrieving a booking."""

    id: Annotated[str, Field(
        description='Unique identifier for the booking',
        examples=['550e8400-e29b-41d4-a716-446655440000']
    )]

    date: Annotated[str, Field(
        description='Booking date',
        examples=['2024-03-15']
    )] = ''

    user: Annotated[BookingUserOutput, Field(
        default_factory=BookingUserOutput,
        description='Owner of the booking'
    )]

    @classmethod
    def from_booking(cls, booking: BookingRecord) -> 'GetBookingOutput':
        owner = booking.user
        return cls(
            id=booking.id,
            date=booking.date or '',
            user=BookingUserOutput(
                id=(owner.id if owner else None) or '',
                name=(owner.name if owner else None) or '',
                email=(owner.email if owner else None) or '',
            ),
        )


class ErrorOutput(BaseModel):
    """Response model for every failure outcome."""

    message: Annotated[str, Field(
        description='Human-readable error message',
        examples=['Booking not found']
    )]
