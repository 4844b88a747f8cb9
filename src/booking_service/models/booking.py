"""
Booking domain model for the business logic layer.

Booking records are owned by the bookings table; this service only reads them.
Attributes the service does not know about are ignored when a stored item
is parsed, so audit fields and status flags never reach a response.
"""

from decimal import Decimal
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# DynamoDB numbers are read back as Decimal
SCALAR_TYPES = (str, int, float, bool, Decimal)


class BookingOwner(BaseModel):
    """User sub-record embedded in a booking, used for the ownership check."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    id: Annotated[Optional[str], Field(
        description='Identifier of the user who owns the booking',
        examples=['user-123']
    )] = None

    name: Annotated[Optional[str], Field(
        description='Display name of the owner',
        examples=['John Doe']
    )] = None

    email: Annotated[Optional[str], Field(
        description='Email address of the owner',
        examples=['john.doe@example.com']
    )] = None

    @field_validator('id', mode='before')
    @classmethod
    def keep_string_id(cls, v: Any) -> Optional[str]:
        """Only a string owner id can ever match a caller."""
        return v if isinstance(v, str) else None

    @field_validator('name', 'email', mode='before')
    @classmethod
    def scalar_as_string(cls, v: Any) -> Optional[str]:
        return _scalar_as_string(v)


class BookingRecord(BaseModel):
    """Core Booking domain model."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    id: Annotated[str, Field(
        description='Unique identifier for the booking (UUID)',
        examples=['550e8400-e29b-41d4-a716-446655440000']
    )]

    date: Annotated[Optional[str], Field(
        description='Booking date, stored and returned as-is',
        examples=['2024-03-15']
    )] = None

    user: Annotated[Optional[BookingOwner], Field(
        description='Owner of the booking, absent on some legacy records'
    )] = None

    @field_validator('date', mode='before')
    @classmethod
    def date_as_string(cls, v: Any) -> Optional[str]:
        return _scalar_as_string(v)

    @field_validator('user', mode='before')
    @classmethod
    def owner_map_only(cls, v: Any) -> Any:
        """Legacy records may hold a non-map user, which means no owner."""
        if isinstance(v, (dict, BookingOwner)):
            return v
        return None

    @property
    def owner_id(self) -> Optional[str]:
        """Owner identifier, or None when the booking carries no owner."""
        return self.user.id if self.user else None

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> 'BookingRecord':
        """Build a booking from a DynamoDB item."""
        return cls.model_validate(item)


def _scalar_as_string(value: Any) -> Optional[str]:
    if value is None or not isinstance(value, SCALAR_TYPES):
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)
