"""User application services."""

from .crowdsrc_service import DefaultCrowdSrcService

__all__ = [
    "DefaultCrowdSrcService",
]
