"""Email address validation error."""

from .....core.exceptions import ValidationError


class EmailAddressError(ValidationError):
    """Raised when a raw string does not parse as an email address.
    
    The client-facing message names the rejected input. ``reason`` keeps the
    validator's explanation for logs.
    """
    
    def __init__(self, invalid_email: str, reason: str):
        super().__init__(
            message=f"email address {invalid_email} is invalid",
            error_code="EMAIL_ADDRESS_INVALID_FORMAT",
            details={"invalid_email": invalid_email, "reason": reason},
        )
        self.invalid_email = invalid_email
        self.reason = reason
