"""
Pytest configuration and shared fixtures for the booking service.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import os

# Test environment configuration, set before the service modules are imported
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "DYNAMODB_BOOKINGS": "test-bookings-table",
    "ENVIRONMENT": "test",
    "POWERTOOLS_SERVICE_NAME": "test-booking-service",
    "POWERTOOLS_METRICS_NAMESPACE": "TestBookingService",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
})

from typing import Any, Dict, Optional
from unittest.mock import Mock

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from booking_service.handlers.get_booking_handler import get_booking_service
from booking_service.handlers.utils.observability import metrics
from booking_service.models.booking import BookingRecord

BOOKING_ID = "550e8400-e29b-41d4-a716-446655440000"
OWNER_ID = "user-123"
TABLE_NAME = "test-bookings-table"


class FakeBookingStore:
    """In-memory booking store recording every point-read."""

    def __init__(self, items: Optional[Dict[str, Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.items = items or {}
        self.error = error
        self.calls = []

    def get_booking_by_id(self, booking_id: str) -> Optional[BookingRecord]:
        self.calls.append(booking_id)
        if self.error is not None:
            raise self.error
        item = self.items.get(booking_id)
        return BookingRecord.from_item(item) if item else None


# Sample data fixtures
@pytest.fixture
def booking_item() -> Dict[str, Any]:
    """Stored booking item owned by user-123, with extra audit attributes."""
    return {
        "id": BOOKING_ID,
        "date": "2024-03-15",
        "user": {
            "id": OWNER_ID,
            "name": "John Doe",
            "email": "john.doe@example.com",
        },
        "createdAt": "2024-01-01T12:00:00Z",
        "status": "CONFIRMED",
    }


@pytest.fixture
def store_factory():
    """Factory for fake booking stores."""
    return FakeBookingStore


@pytest.fixture
def fake_store(booking_item) -> FakeBookingStore:
    """Fake store holding the sample booking."""
    return FakeBookingStore({BOOKING_ID: booking_item})


@pytest.fixture
def make_event():
    """Factory for API Gateway proxy events for GET /bookings/{id}."""
    missing = object()

    def _make_event(
        booking_id: Any = BOOKING_ID,
        user_id: Any = OWNER_ID,
        role: Any = "USER",
        authorizer: Any = missing,
    ) -> Dict[str, Any]:
        if authorizer is missing:
            authorizer = {}
            if user_id is not None:
                authorizer["userId"] = user_id
            if role is not None:
                authorizer["role"] = role

        return {
            "resource": "/bookings/{id}",
            "path": f"/bookings/{booking_id}",
            "httpMethod": "GET",
            "headers": {"Authorization": "Bearer test-token"},
            "pathParameters": {"id": booking_id} if booking_id is not None else None,
            "queryStringParameters": None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "stage": "test",
                "httpMethod": "GET",
                "authorizer": authorizer,
            },
            "body": None,
            "isBase64Encoded": False,
        }

    return _make_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-get-booking-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-get-booking-function"
    context.memory_limit_in_mb = "256"
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-get-booking-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


# DynamoDB fixtures
@pytest.fixture
def dynamodb_table():
    """Create a mocked bookings table keyed by id."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")
        table = dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        table.wait_until_exists()
        yield table


@pytest.fixture
def populated_table(dynamodb_table, booking_item):
    """Bookings table holding the sample booking."""
    dynamodb_table.put_item(Item=booking_item)
    yield dynamodb_table


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Factory for DynamoDB ClientErrors."""

    def create_error(error_code: str, message: str = "Test error"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name="GetItem",
        )

    return create_error


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached services and buffered metrics between tests."""
    get_booking_service.cache_clear()
    metrics.clear_metrics()
    yield
    get_booking_service.cache_clear()
    metrics.clear_metrics()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
