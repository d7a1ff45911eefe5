"""User API models."""

from .requests import CreateUserHttpRequestBody
from .responses import (
    ApiResponseBody,
    ApiErrorData,
    ApiMessageData,
    CreateUserResponseData,
)

__all__ = [
    "CreateUserHttpRequestBody",
    "ApiResponseBody",
    "ApiErrorData",
    "ApiMessageData",
    "CreateUserResponseData",
]
