"""
Integration tests for the Data Access Layer (DAL).

This module tests the DynamoDB booking store against a moto-mocked table,
and its error mapping with a stubbed table.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import EndpointConnectionError

from booking_service.dal import BookingStore, get_dal_handler
from booking_service.dal.dynamodb_handler import DynamoDbBookingHandler
from booking_service.handlers.utils.errors import StorageConfigurationError, StorageUnavailableError

BOOKING_ID = "550e8400-e29b-41d4-a716-446655440000"
UNKNOWN_ID = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
TABLE_NAME = "test-bookings-table"


def stubbed_handler(table):
    dynamodb = MagicMock()
    dynamodb.Table.return_value = table
    return DynamoDbBookingHandler(TABLE_NAME, dynamodb_resource=dynamodb)


@pytest.mark.integration
class TestDynamoDbBookingHandler:
    """Integration tests for the DynamoDB booking store."""

    def test_implements_booking_store(self):
        assert isinstance(get_dal_handler(TABLE_NAME), BookingStore)

    def test_get_booking_by_id_success(self, populated_table):
        dal = DynamoDbBookingHandler(TABLE_NAME)

        booking = dal.get_booking_by_id(BOOKING_ID)

        assert booking is not None
        assert booking.id == BOOKING_ID
        assert booking.date == "2024-03-15"
        assert booking.owner_id == "user-123"
        assert booking.user.email == "john.doe@example.com"

    def test_get_booking_by_id_not_found(self, populated_table):
        dal = DynamoDbBookingHandler(TABLE_NAME)

        assert dal.get_booking_by_id(UNKNOWN_ID) is None

    def test_lookup_key_is_case_sensitive(self, populated_table):
        dal = DynamoDbBookingHandler(TABLE_NAME)

        assert dal.get_booking_by_id(BOOKING_ID.upper()) is None

    def test_booking_without_owner(self, dynamodb_table):
        dynamodb_table.put_item(Item={"id": BOOKING_ID, "date": "2024-03-15"})
        dal = DynamoDbBookingHandler(TABLE_NAME)

        booking = dal.get_booking_by_id(BOOKING_ID)

        assert booking.user is None

    def test_legacy_string_user_is_no_owner(self, dynamodb_table):
        dynamodb_table.put_item(Item={"id": BOOKING_ID, "date": "2024-03-15", "user": "user-123"})
        dal = DynamoDbBookingHandler(TABLE_NAME)

        booking = dal.get_booking_by_id(BOOKING_ID)

        assert booking.user is None
        assert booking.owner_id is None

    def test_numeric_attributes_are_read_as_strings(self, dynamodb_table):
        dynamodb_table.put_item(Item={
            "id": BOOKING_ID,
            "date": Decimal("20240315"),
            "user": {"id": Decimal(123), "email": Decimal(1)},
        })
        dal = DynamoDbBookingHandler(TABLE_NAME)

        booking = dal.get_booking_by_id(BOOKING_ID)

        assert booking.date == "20240315"
        assert booking.user.email == "1"
        assert booking.owner_id is None

    def test_region_is_used_for_the_resource(self, populated_table):
        dal = DynamoDbBookingHandler(TABLE_NAME, region_name="us-east-1")

        assert dal.table.meta.client.meta.region_name == "us-east-1"
        assert dal.get_booking_by_id(BOOKING_ID).id == BOOKING_ID

    def test_missing_table_is_storage_error(self, dynamodb_table):
        dal = DynamoDbBookingHandler("no-such-table")

        with pytest.raises(StorageUnavailableError) as exc_info:
            dal.get_booking_by_id(BOOKING_ID)

        assert exc_info.value.table_name == "no-such-table"
        assert exc_info.value.user_message == "Error retrieving booking"

    def test_table_is_reused_across_lookups(self, populated_table):
        dal = DynamoDbBookingHandler(TABLE_NAME)

        first_table = dal.table
        dal.get_booking_by_id(BOOKING_ID)
        dal.get_booking_by_id(UNKNOWN_ID)

        assert dal.table is first_table


@pytest.mark.integration
class TestDynamoDbBookingHandlerErrors:
    """Error mapping of the DynamoDB booking store."""

    def test_unconfigured_table_never_calls_dynamodb(self):
        dynamodb = MagicMock()
        dal = DynamoDbBookingHandler("", dynamodb_resource=dynamodb)

        with pytest.raises(StorageConfigurationError) as exc_info:
            dal.get_booking_by_id(BOOKING_ID)

        assert exc_info.value.user_message == "Internal server error"
        dynamodb.Table.assert_not_called()

    def test_get_item_uses_single_point_read(self):
        table = MagicMock()
        table.get_item.return_value = {"Item": {"id": BOOKING_ID}}

        stubbed_handler(table).get_booking_by_id(BOOKING_ID)

        table.get_item.assert_called_once_with(Key={"id": BOOKING_ID})

    def test_response_without_item_is_not_found(self):
        table = MagicMock()
        table.get_item.return_value = {"ResponseMetadata": {"HTTPStatusCode": 200}}

        assert stubbed_handler(table).get_booking_by_id(BOOKING_ID) is None

    def test_response_with_empty_item_is_not_found(self):
        table = MagicMock()
        table.get_item.return_value = {"Item": {}}

        assert stubbed_handler(table).get_booking_by_id(BOOKING_ID) is None

    @pytest.mark.parametrize("error_code", [
        "ServiceUnavailableException",
        "ResourceNotFoundException",
        "AccessDeniedException",
        "ValidationException",
        "ProvisionedThroughputExceededException",
        "ThrottlingException",
    ])
    def test_client_errors_are_storage_errors(self, mock_dynamodb_error, error_code):
        table = MagicMock()
        table.get_item.side_effect = mock_dynamodb_error(error_code, "internal detail")

        with pytest.raises(StorageUnavailableError) as exc_info:
            stubbed_handler(table).get_booking_by_id(BOOKING_ID)

        assert error_code in exc_info.value.message
        assert exc_info.value.user_message == "Error retrieving booking"

    def test_transport_errors_are_storage_errors(self):
        table = MagicMock()
        table.get_item.side_effect = EndpointConnectionError(endpoint_url="http://localhost:8000")

        with pytest.raises(StorageUnavailableError):
            stubbed_handler(table).get_booking_by_id(BOOKING_ID)

    def test_malformed_item_is_storage_error(self):
        table = MagicMock()
        table.get_item.return_value = {"Item": {"date": "2024-03-15"}}

        with pytest.raises(StorageUnavailableError):
            stubbed_handler(table).get_booking_by_id(BOOKING_ID)
