"""
Get Booking Handler - Lambda function for the GET /bookings/{id} API.

This module implements the handler layer for booking retrieval: it turns the
API Gateway proxy event into a GetBookingRequest, runs it through the
BookingService and shapes exactly one response per outcome. Every failure is
converted to a structured response here; nothing escapes to API Gateway.
"""

from functools import lru_cache
from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from booking_service.dal import get_dal_handler
from booking_service.handlers.models.env_vars import get_handler_env_vars
from booking_service.handlers.utils.errors import (
    BookingServiceError,
    ErrorCode,
    create_api_response,
    format_error_response,
    log_error_metrics,
)
from booking_service.handlers.utils.observability import logger, metrics, tracer
from booking_service.logic.booking_service import BookingService
from booking_service.models.input import GetBookingRequest
from booking_service.models.output import GetBookingOutput

OUTCOME_METRICS: Dict[ErrorCode, str] = {
    ErrorCode.MISSING_BOOKING_ID: "ValidationError",
    ErrorCode.INVALID_BOOKING_ID: "ValidationError",
    ErrorCode.UNAUTHORIZED: "AuthenticationError",
    ErrorCode.FORBIDDEN: "BookingAccessDenied",
    ErrorCode.BOOKING_NOT_FOUND: "BookingNotFound",
    ErrorCode.STORAGE_UNAVAILABLE: "StorageError",
    ErrorCode.CONFIGURATION_ERROR: "ConfigurationError",
    ErrorCode.INTERNAL_ERROR: "UnexpectedError",
}


@lru_cache(maxsize=4)
def get_booking_service(
    table_name: str,
    endpoint_url: Optional[str] = None,
    region_name: Optional[str] = None,
) -> BookingService:
    """Build the booking service once per container and table."""
    store = get_dal_handler(table_name, endpoint_url=endpoint_url, region_name=region_name)
    return BookingService(bookings_store=store)


def error_response(error: BookingServiceError, allow_origin: str = "*") -> Dict[str, Any]:
    """Convert a service error into an API Gateway response."""
    log_error_metrics(error)
    metrics.add_metric(name=OUTCOME_METRICS[error.error_code], unit=MetricUnit.Count, value=1)
    tracer.put_annotation("outcome", error.error_code.value)

    return create_api_response(
        status_code=error.status_code,
        body=format_error_response(error),
        allow_origin=allow_origin,
    )


@tracer.capture_method
def handle_get_booking(
    event: Dict[str, Any],
    booking_service: BookingService,
    allow_origin: str = "*",
) -> Dict[str, Any]:
    """
    Process one get-booking request.

    Args:
        event: API Gateway proxy event
        booking_service: Service used to resolve the booking
        allow_origin: Value of the Access-Control-Allow-Origin header

    Returns:
        API Gateway proxy response
    """
    try:
        request = GetBookingRequest.from_event(event)
        logger.info("Get booking request received", extra={
            "booking_id": request.booking_id,
            "request_id": request.request_id,
        })

        booking = booking_service.get_booking(request)
        body = GetBookingOutput.from_booking(booking).model_dump_json()

    except BookingServiceError as e:
        return error_response(e, allow_origin=allow_origin)

    except Exception as e:
        logger.exception("Unexpected error in get booking handler", extra={"error": str(e)})
        return error_response(
            BookingServiceError(message=str(e), error_code=ErrorCode.INTERNAL_ERROR),
            allow_origin=allow_origin,
        )

    tracer.put_annotation("outcome", "SUCCESS")
    return create_api_response(status_code=200, body=body, allow_origin=allow_origin)


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: Lambda event payload
        context: Lambda context object

    Returns:
        API Gateway response
    """
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

    try:
        env_vars = get_handler_env_vars()
        booking_service = get_booking_service(
            env_vars.DYNAMODB_BOOKINGS.strip(),
            env_vars.DYNAMODB_ENDPOINT,
            env_vars.AWS_REGION,
        )
    except Exception as e:
        logger.exception("Failed to initialize booking service", extra={"error": str(e)})
        return error_response(BookingServiceError(message=str(e), error_code=ErrorCode.CONFIGURATION_ERROR))

    tracer.put_annotation("environment", env_vars.ENVIRONMENT)

    return handle_get_booking(event, booking_service, allow_origin=env_vars.CORS_ALLOW_ORIGIN)
