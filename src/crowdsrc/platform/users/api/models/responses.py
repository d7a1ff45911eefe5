"""User response models.

Every response, success or error, uses the same envelope:
``{"status_code": <int>, "data": <payload>}``.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from ...core.entities import User

T = TypeVar("T")


class ApiResponseBody(BaseModel, Generic[T]):
    """Response envelope carrying the HTTP status code next to the payload."""
    
    status_code: int = Field(..., description="HTTP status code")
    data: T


class ApiErrorData(BaseModel):
    """Error payload."""
    
    message: str = Field(..., description="Human-readable error message")


class ApiMessageData(BaseModel):
    """Informational payload."""
    
    message: str


class CreateUserResponseData(BaseModel):
    """Payload for a created user. Only the identifier is echoed back."""
    
    id: str = Field(..., description="Generated user ID")
    
    @classmethod
    def from_domain(cls, user: User) -> "CreateUserResponseData":
        return cls(id=str(user.id))
