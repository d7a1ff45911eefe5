"""Email address value object."""

from dataclasses import dataclass

import email_validator
from email_validator import EmailNotValidError, validate_email

from ..exceptions import EmailAddressError

# Reserved names such as localhost are still syntactically valid domains
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def _normalize(raw: str) -> str:
    """Validate email syntax (no DNS lookups) and return the normalized form."""
    try:
        return validate_email(
            raw,
            allow_quoted_local=True,
            allow_domain_literal=True,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        ).normalized
    except EmailNotValidError as e:
        raise EmailAddressError(raw, str(e)) from e


@dataclass(frozen=True)
class EmailAddress:
    """A syntactically valid email address.
    
    Stores the validator's normalized form (lowercased domain, IDNA handling),
    so equality and hashing compare normalized addresses. Used as a mapping
    key by ``NotificationLog``.
    """
    
    value: str
    
    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"EmailAddress must be a str, got {type(self.value).__name__}")
        object.__setattr__(self, "value", _normalize(self.value))
    
    @classmethod
    def new(cls, raw: str) -> 'EmailAddress':
        """Parse an email address from raw input.
        
        Raises:
            EmailAddressError: If ``raw`` is not a valid address
        """
        return cls(raw)
    
    def __str__(self) -> str:
        return self.value
