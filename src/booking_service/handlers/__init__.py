"""
AWS Lambda Handlers Module.

This module contains the handler layer of the booking service. Handlers
turn API Gateway events into requests for the logic layer and turn its
results and errors into API Gateway responses.

The handlers use AWS Lambda Powertools for:
- Structured logging with correlation IDs
- Distributed tracing with X-Ray
- Custom metrics collection
"""

# Re-export handler utilities for convenience
from booking_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
