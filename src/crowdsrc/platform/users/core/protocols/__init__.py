"""User protocols (ports).

Contracts the domain needs from storage and notification, and the contract
it offers to the transport layer.
"""

from .user_repository import UserRepository
from .user_notifier import UserNotifier
from .crowdsrc_service import CrowdSrcService

__all__ = [
    "UserRepository",
    "UserNotifier",
    "CrowdSrcService",
]
