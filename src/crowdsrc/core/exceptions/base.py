"""Base exceptions for crowdsrc.

This module defines the root of the crowdsrc exception hierarchy. Every
exception carries a human-readable message, a stable error code and a
details dictionary for structured logging.
"""

from typing import Any, Dict, Optional


class CrowdSrcError(Exception):
    """Base exception for all crowdsrc errors.
    
    All exceptions raised by crowdsrc inherit from this base class and
    include structured error information for debugging and logging.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ValidationError(CrowdSrcError):
    """Raised when client-supplied input fails domain validation."""
    pass


class ConfigurationError(CrowdSrcError):
    """Raised when there's a configuration issue."""
    pass
