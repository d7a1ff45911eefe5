"""Transport-level errors and their FastAPI exception handlers.

Domain errors are rendered here and only here. Infrastructure failures are
reduced to a generic message; their cause goes to the log.
"""

import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ....core.exceptions import ValidationError
from ..core.exceptions import CreateUserError, CreateUserErrorKind
from .models import ApiErrorData, ApiResponseBody

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error"


class ApiErrorKind(str, Enum):
    """Response categories the API can produce for an error."""
    INTERNAL_SERVER_ERROR = "internal_server_error"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"


class ApiError(Exception):
    """An error ready to be sent to the client."""
    
    def __init__(self, kind: ApiErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message
    
    @classmethod
    def internal_server_error(cls) -> "ApiError":
        return cls(ApiErrorKind.INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR_MESSAGE)
    
    @classmethod
    def unprocessable_entity(cls, message: str) -> "ApiError":
        return cls(ApiErrorKind.UNPROCESSABLE_ENTITY, message)
    
    @classmethod
    def from_parse_error(cls, error: ValidationError) -> "ApiError":
        """Render a username or email validation failure."""
        return cls.unprocessable_entity(error.message)
    
    @classmethod
    def from_create_user_error(cls, error: CreateUserError) -> "ApiError":
        """Render a repository failure; unknown causes are logged, not echoed."""
        if error.kind is CreateUserErrorKind.DUPLICATE_USERNAME:
            return cls.unprocessable_entity(error.message)
        elif error.kind is CreateUserErrorKind.DUPLICATE_EMAIL:
            return cls.unprocessable_entity(error.message)
        elif error.kind is CreateUserErrorKind.UNKNOWN:
            logger.error(f"{error.message}: {error.cause!r}")
            return cls.internal_server_error()
        else:
            raise ValueError(f"Unhandled create user error kind: {error.kind}")
    
    @property
    def status_code(self) -> int:
        if self.kind is ApiErrorKind.INTERNAL_SERVER_ERROR:
            return 500
        elif self.kind is ApiErrorKind.UNPROCESSABLE_ENTITY:
            return 422
        else:
            raise ValueError(f"Unhandled API error kind: {self.kind}")
    
    def to_response(self) -> JSONResponse:
        body = ApiResponseBody[ApiErrorData](
            status_code=self.status_code,
            data=ApiErrorData(message=self.message),
        )
        return JSONResponse(status_code=self.status_code, content=body.model_dump())


def describe_validation_error(exc: RequestValidationError) -> str:
    """First validation problem as ``"<location>: <message>"``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code < 500:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return exc.to_response()


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = describe_validation_error(exc)
    logger.warning(f"{request.method} {request.url.path} rejected: {message}")
    return ApiError.unprocessable_entity(message).to_response()


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
        exc_info=exc,
    )
    return ApiError.internal_server_error().to_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
