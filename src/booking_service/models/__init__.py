"""
Service Models Package

This package contains all Pydantic models used throughout the service,
including the request model, response models, and domain models.
"""

from .booking import BookingOwner, BookingRecord
from .input import PRIVILEGED_ROLE, GetBookingRequest, RequestIdentity
from .output import BookingUserOutput, ErrorOutput, GetBookingOutput

__all__ = [
    # Input models
    "GetBookingRequest",
    "RequestIdentity",
    "PRIVILEGED_ROLE",

    # Output models
    "GetBookingOutput",
    "BookingUserOutput",
    "ErrorOutput",

    # Domain models
    "BookingRecord",
    "BookingOwner",
]
