"""Username value object."""

from dataclasses import dataclass

from ..exceptions import UserNameError


def _contains_whitespace(value: str) -> bool:
    return any(char.isspace() for char in value)


@dataclass(frozen=True)
class UserName:
    """A trimmed, non-empty username without whitespace characters.
    
    Build from untrusted input with ``UserName.new(raw)``. Direct
    construction accepts only an already-normalized value.
    """
    
    value: str
    
    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"UserName must be a str, got {type(self.value).__name__}")
        if not self.value:
            raise UserNameError.empty()
        if _contains_whitespace(self.value):
            raise UserNameError.with_whitespace(self.value)
    
    @classmethod
    def new(cls, raw: str) -> 'UserName':
        """Parse a username from raw input.
        
        Surrounding whitespace is trimmed. The error for interior
        whitespace reports ``raw`` as given, before trimming.
        
        Raises:
            UserNameError: ``EMPTY`` or ``WITH_WHITESPACE``
        """
        trimmed = raw.strip()
        if not trimmed:
            raise UserNameError.empty()
        if _contains_whitespace(trimmed):
            raise UserNameError.with_whitespace(raw)
        return cls(trimmed)
    
    def __str__(self) -> str:
        return self.value
