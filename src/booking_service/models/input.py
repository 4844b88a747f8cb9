"""
Input models for the get-booking request.

The API Gateway proxy event is an untyped nested dictionary. GetBookingRequest
turns it into an explicit record whose optional parts are spelled out, so
the pipeline handles absence in one place instead of probing the raw event.
"""

from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

PRIVILEGED_ROLE = 'ADMIN'


class RequestIdentity(BaseModel):
    """Caller identity as populated by the upstream authorizer."""

    model_config = ConfigDict(frozen=True)

    user_id: Annotated[Optional[str], Field(
        description='Authenticated user identifier',
        examples=['user-123']
    )] = None

    role: Annotated[Optional[str], Field(
        description='Caller role; only ADMIN is privileged',
        examples=['USER', 'ADMIN']
    )] = None

    @property
    def is_privileged(self) -> bool:
        return self.role == PRIVILEGED_ROLE

    @classmethod
    def from_authorizer(cls, authorizer: Any) -> Optional['RequestIdentity']:
        """Read userId and role from an authorizer context, None if there is none."""
        if not isinstance(authorizer, dict):
            return None
        return cls(
            user_id=_as_optional_str(authorizer.get('userId')),
            role=_as_optional_str(authorizer.get('role')),
        )


class GetBookingRequest(BaseModel):
    """Request model for retrieving a booking."""

    model_config = ConfigDict(frozen=True)

    booking_id: Annotated[Optional[str], Field(
        description='Booking identifier taken from the path'
    )] = None

    identity: Annotated[Optional[RequestIdentity], Field(
        description='Trusted caller identity, None if no authorizer context'
    )] = None

    request_id: Annotated[str, Field(
        description='API Gateway request identifier'
    )] = 'unknown'

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> 'GetBookingRequest':
        """Build the request from an API Gateway proxy event. Never raises."""
        path_parameters = event.get('pathParameters') or {}
        request_context = event.get('requestContext') or {}
        if not isinstance(path_parameters, dict):
            path_parameters = {}
        if not isinstance(request_context, dict):
            request_context = {}

        return cls(
            booking_id=_as_optional_str(path_parameters.get('id')),
            identity=RequestIdentity.from_authorizer(request_context.get('authorizer')),
            request_id=request_context.get('requestId') or 'unknown',
        )


def _as_optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None
