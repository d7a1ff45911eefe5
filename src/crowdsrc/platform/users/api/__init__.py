"""HTTP transport for the users feature."""

from .dependencies import get_crowdsrc_service, get_service_from_state
from .errors import ApiError, ApiErrorKind, register_exception_handlers, unhandled_exception_handler
from .routers import home_router, users_router

__all__ = [
    "get_crowdsrc_service",
    "get_service_from_state",
    "ApiError",
    "ApiErrorKind",
    "register_exception_handlers",
    "unhandled_exception_handler",
    "home_router",
    "users_router",
]
