"""HTTP middleware for crowdsrc."""

from .logging_middleware import RequestLoggingMiddleware, REQUEST_ID_HEADER

__all__ = [
    "RequestLoggingMiddleware",
    "REQUEST_ID_HEADER",
]
