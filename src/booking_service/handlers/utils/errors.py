"""
Error taxonomy and response utilities for the booking Lambda handlers.

Every failure the service can produce is a BookingServiceError carrying an
ErrorCode. The code alone decides the HTTP status and the client-facing
message, so converting an error into an API Gateway response is a total
function over a closed set of cases. Internal detail stays in `message`
and in the logs; only `user_message` is ever returned to the caller.
"""

import json
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from aws_lambda_powertools.metrics import MetricUnit
from pydantic import BaseModel, Field

from booking_service.handlers.utils.observability import logger, metrics, tracer
from booking_service.models.output import ErrorOutput


class ErrorCode(str, Enum):
    """Closed set of failure outcomes."""

    MISSING_BOOKING_ID = "MISSING_BOOKING_ID"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorCategory(str, Enum):
    """Error categories for classification."""

    VALIDATION = "VALIDATION"
    AUTHENTICATION = "AUTHENTICATION"
    AUTHORIZATION = "AUTHORIZATION"
    NOT_FOUND = "NOT_FOUND"
    DEPENDENCY = "DEPENDENCY"
    INFRASTRUCTURE = "INFRASTRUCTURE"


HTTP_STATUS_CODES: Dict[ErrorCode, int] = {
    ErrorCode.MISSING_BOOKING_ID: 400,
    ErrorCode.INVALID_BOOKING_ID: 400,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.BOOKING_NOT_FOUND: 404,
    ErrorCode.STORAGE_UNAVAILABLE: 500,
    ErrorCode.CONFIGURATION_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}

CATEGORY_METRICS: Dict[ErrorCategory, str] = {
    ErrorCategory.VALIDATION: "ErrorValidationCount",
    ErrorCategory.AUTHENTICATION: "ErrorAuthenticationCount",
    ErrorCategory.AUTHORIZATION: "ErrorAuthorizationCount",
    ErrorCategory.NOT_FOUND: "ErrorNotFoundCount",
    ErrorCategory.DEPENDENCY: "ErrorDependencyCount",
    ErrorCategory.INFRASTRUCTURE: "ErrorInfrastructureCount",
}

USER_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.MISSING_BOOKING_ID: "Booking ID is required",
    ErrorCode.INVALID_BOOKING_ID: "Invalid booking ID format",
    ErrorCode.UNAUTHORIZED: "Unauthorized",
    ErrorCode.FORBIDDEN: "Not authorized to view this booking",
    ErrorCode.BOOKING_NOT_FOUND: "Booking not found",
    ErrorCode.STORAGE_UNAVAILABLE: "Error retrieving booking",
    ErrorCode.CONFIGURATION_ERROR: "Internal server error",
    ErrorCode.INTERNAL_ERROR: "Internal server error",
}


class ErrorContext(BaseModel):
    """Context information for errors."""

    request_id: str = Field(description="Unique request identifier")
    user_id: Optional[str] = Field(default=None, description="User identifier if available")
    operation: str = Field(description="Operation being performed")
    resource_id: Optional[str] = Field(default=None, description="Resource identifier")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class BookingServiceError(Exception):
    """Base exception class for booking service errors."""

    category: ErrorCategory = ErrorCategory.INFRASTRUCTURE

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context
        self.error_id = str(uuid.uuid4())

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_CODES[self.error_code]

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.error_code]

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging and tracing."""
        return {
            "error_id": self.error_id,
            "error_code": self.error_code.value,
            "message": self.message,
            "user_message": self.user_message,
            "category": self.category.value,
            "status_code": self.status_code,
            "context": self.context.model_dump(mode="json") if self.context else None,
        }


class ValidationError(BookingServiceError):
    """Raised when the request is malformed."""

    category = ErrorCategory.VALIDATION


class MissingBookingIdError(ValidationError):
    """Raised when the booking id is absent from the path."""

    def __init__(self, context: Optional[ErrorContext] = None):
        super().__init__(
            message="Booking ID missing from path parameters",
            error_code=ErrorCode.MISSING_BOOKING_ID,
            context=context,
        )


class InvalidBookingIdError(ValidationError):
    """Raised when the booking id is not a canonical UUID."""

    def __init__(self, booking_id: str, context: Optional[ErrorContext] = None):
        super().__init__(
            message=f"Invalid booking ID format: {booking_id!r}",
            error_code=ErrorCode.INVALID_BOOKING_ID,
            context=context,
        )
        self.booking_id = booking_id


class AuthenticationError(BookingServiceError):
    """Raised when the trusted identity context carries no user."""

    category = ErrorCategory.AUTHENTICATION

    def __init__(
        self,
        message: str = "User ID not found in authorizer context",
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message=message, error_code=ErrorCode.UNAUTHORIZED, context=context)


class AuthorizationError(BookingServiceError):
    """Raised when an authenticated caller is not entitled to a resource."""

    category = ErrorCategory.AUTHORIZATION


class BookingAccessDeniedError(AuthorizationError):
    """Raised when a caller neither owns a booking nor holds the privileged role."""

    def __init__(self, booking_id: str, user_id: str, context: Optional[ErrorContext] = None):
        super().__init__(
            message=f"User {user_id} not authorized to view booking {booking_id}",
            error_code=ErrorCode.FORBIDDEN,
            context=context,
        )
        self.booking_id = booking_id
        self.user_id = user_id


class NotFoundError(BookingServiceError):
    """Raised when a requested resource does not exist."""

    category = ErrorCategory.NOT_FOUND


class BookingNotFoundError(NotFoundError):
    """Raised when no booking is stored under the requested id."""

    def __init__(self, booking_id: str, context: Optional[ErrorContext] = None):
        super().__init__(
            message=f"Booking not found: {booking_id}",
            error_code=ErrorCode.BOOKING_NOT_FOUND,
            context=context,
        )
        self.booking_id = booking_id


class DependencyError(BookingServiceError):
    """Raised when the booking store is unavailable or misconfigured."""

    category = ErrorCategory.DEPENDENCY


class StorageUnavailableError(DependencyError):
    """Raised when the point-read against the booking store fails."""

    def __init__(
        self,
        message: str,
        table_name: Optional[str] = None,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message=message, error_code=ErrorCode.STORAGE_UNAVAILABLE, context=context)
        self.table_name = table_name


class StorageConfigurationError(DependencyError):
    """Raised when the booking store location is not configured."""

    def __init__(
        self,
        message: str = "DYNAMODB_BOOKINGS environment variable not set",
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message=message, error_code=ErrorCode.CONFIGURATION_ERROR, context=context)


def create_error_context(
    request_id: str,
    operation: str,
    user_id: Optional[str] = None,
    resource_id: Optional[str] = None,
) -> ErrorContext:
    """Create an error context for consistent error handling."""
    return ErrorContext(
        request_id=request_id,
        user_id=user_id,
        operation=operation,
        resource_id=resource_id,
    )


@tracer.capture_method
def log_error_metrics(error: BookingServiceError) -> None:
    """Log error metrics for monitoring and alerting."""
    metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
    metrics.add_metric(name=CATEGORY_METRICS[error.category], unit=MetricUnit.Count, value=1)

    tracer.put_annotation("error_code", error.error_code.value)
    tracer.put_metadata("error_details", error.to_dict())

    log = logger.error if error.status_code >= 500 else logger.warning
    log(
        "Service error occurred",
        extra={
            "error_id": error.error_id,
            "error_code": error.error_code.value,
            "error_category": error.category.value,
            "error_message": error.message,
            "status_code": error.status_code,
            "context": error.context.model_dump(mode="json") if error.context else None,
        },
    )


def format_error_response(error: BookingServiceError) -> Dict[str, str]:
    """Format error for API response. Only the client-facing message is exposed."""
    return ErrorOutput(message=error.user_message).model_dump()


def create_api_response(
    status_code: int,
    body: Any,
    allow_origin: str = "*",
) -> Dict[str, Any]:
    """Create standardized API Gateway proxy response."""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Credentials": "true",
        },
        "body": body if isinstance(body, str) else json.dumps(body),
    }
