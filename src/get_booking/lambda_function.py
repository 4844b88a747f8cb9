"""
Get Booking Lambda Function - Entry point for GET /bookings/{id}.

This module serves as the Lambda function entry point that delegates to the
get-booking handler of the booking service.
"""

from typing import Any, Dict

from aws_lambda_powertools.utilities.typing import LambdaContext

from booking_service.handlers.get_booking_handler import lambda_handler as get_booking_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the get-booking API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return get_booking_handler(event, context)
