"""User request models."""

from pydantic import BaseModel, ConfigDict, Field

from ...core.entities import CreateUserRequest
from ...core.value_objects import EmailAddress, UserName


class CreateUserHttpRequestBody(BaseModel):
    """Request body for ``POST /api/users``.
    
    Fields are plain strings here; domain validation happens in
    ``to_domain`` so its messages reach the client unchanged.
    """
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "Kristoffer",
                "email_address": "kristoffer@example.com",
            }
        }
    )
    
    username: str = Field(..., description="Desired username, no whitespace")
    email_address: str = Field(..., description="Email address")
    
    def to_domain(self) -> CreateUserRequest:
        """Parse into a CreateUserRequest, username first.
        
        Raises:
            UserNameError: If the username is invalid
            EmailAddressError: If the email address is invalid
        """
        username = UserName.new(self.username)
        email = EmailAddress.new(self.email_address)
        return CreateUserRequest(username=username, email=email)
