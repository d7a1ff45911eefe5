"""Application layer for the users feature."""

from .services import DefaultCrowdSrcService

__all__ = [
    "DefaultCrowdSrcService",
]
