"""
DynamoDB implementation of the booking store.

Bookings live in a table keyed by the string attribute `id`. Every lookup is
a single GetItem; storage failures of any kind are reported uniformly as
StorageUnavailableError and the boto error is only logged.
"""

from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError as PydanticValidationError

from booking_service.handlers.utils.errors import StorageConfigurationError, StorageUnavailableError
from booking_service.handlers.utils.observability import logger, tracer
from booking_service.models.booking import BookingRecord


class DynamoDbBookingHandler:
    """DynamoDB point-read access to booking records."""

    def __init__(
        self,
        table_name: str,
        endpoint_url: Optional[str] = None,
        region_name: Optional[str] = None,
        dynamodb_resource: Optional[Any] = None,
    ) -> None:
        """
        Initialize the DynamoDB booking handler.

        The boto3 resource is created on first use and then reused across
        warm invocations.

        Args:
            table_name: Name of the bookings table
            endpoint_url: DynamoDB endpoint URL (for local testing)
            region_name: AWS region name
            dynamodb_resource: Preconfigured boto3 DynamoDB resource
        """
        self.table_name = table_name
        self.endpoint_url = endpoint_url
        self.region_name = region_name
        self._dynamodb = dynamodb_resource
        self._table = None

    @property
    def table(self) -> Any:
        if self._table is None:
            if self._dynamodb is None:
                session_config = {}
                if self.region_name:
                    session_config['region_name'] = self.region_name
                if self.endpoint_url:
                    session_config['endpoint_url'] = self.endpoint_url
                self._dynamodb = boto3.resource('dynamodb', **session_config)
            self._table = self._dynamodb.Table(self.table_name)
            logger.debug('DynamoDB booking handler initialized', extra={
                'table_name': self.table_name,
                'endpoint_url': self.endpoint_url,
            })
        return self._table

    @tracer.capture_method
    def get_booking_by_id(self, booking_id: str) -> Optional[BookingRecord]:
        """
        Retrieve a booking by its ID from DynamoDB.

        Args:
            booking_id: Unique identifier of the booking

        Returns:
            BookingRecord if found, None otherwise

        Raises:
            StorageConfigurationError: If no table name is configured
            StorageUnavailableError: If the GetItem call fails or the item is unreadable
        """
        if not self.table_name:
            logger.error('DYNAMODB_BOOKINGS environment variable not set')
            raise StorageConfigurationError()

        logger.debug('DynamoDB GetItem', extra={'table_name': self.table_name, 'booking_id': booking_id})

        try:
            response = self.table.get_item(Key={'id': booking_id})
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            logger.exception(f'DynamoDB error retrieving booking {booking_id}: {error_code}', extra={
                'table_name': self.table_name,
                'error_code': error_code,
            })
            raise StorageUnavailableError(
                message=f'DynamoDB GetItem failed: {error_code}',
                table_name=self.table_name,
            ) from e
        except BotoCoreError as e:
            logger.exception(f'DynamoDB transport error retrieving booking {booking_id}', extra={
                'table_name': self.table_name,
            })
            raise StorageUnavailableError(
                message=f'DynamoDB GetItem failed: {e.__class__.__name__}',
                table_name=self.table_name,
            ) from e

        item = response.get('Item')
        if not item:
            logger.info(f'Booking not found: {booking_id}')
            return None

        try:
            booking = BookingRecord.from_item(item)
        except PydanticValidationError as e:
            logger.error('Stored booking item is malformed', extra={
                'booking_id': booking_id,
                'errors': str(e),
            })
            raise StorageUnavailableError(
                message=f'Invalid booking data in database for {booking_id}',
                table_name=self.table_name,
            ) from e

        tracer.put_annotation('booking_retrieved', booking_id)
        return booking
