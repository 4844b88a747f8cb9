"""
Booking Service - retrieve a booking by id for its owner or an administrator.

Three-layer layout:
- handlers: API Gateway event in, proxy response out
- logic: the validate / authenticate / lookup / authorize pipeline
- dal: point-read access to the bookings table
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
