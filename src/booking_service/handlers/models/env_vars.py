"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for the environment variables read by
the booking handlers. The deployment layer supplies them at cold start.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class BookingHandlerEnvVars(BaseModel):
    """Environment variables for the get-booking handler."""

    # DynamoDB table holding booking records; empty means misconfigured
    DYNAMODB_BOOKINGS: Annotated[str, Field(
        description='DynamoDB table name for booking storage'
    )] = ''

    # Endpoint override for DynamoDB Local
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        description='DynamoDB endpoint URL (local testing only)'
    )] = None

    AWS_REGION: Annotated[str, Field(
        description='AWS region for service deployment'
    )] = 'us-east-1'

    ENVIRONMENT: Annotated[str, Field(
        description='Deployment environment name'
    )] = 'dev'

    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        description='Service name for AWS Powertools'
    )] = 'booking-service'

    POWERTOOLS_METRICS_NAMESPACE: Annotated[str, Field(
        description='Namespace for CloudWatch metrics'
    )] = 'BookingService'

    LOG_LEVEL: Annotated[str, Field(
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        description='CORS allowed origin for API responses'
    )] = '*'


def get_handler_env_vars() -> BookingHandlerEnvVars:
    """
    Get typed environment variables for the booking handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=BookingHandlerEnvVars)
