"""User routers."""

from .users_router import router as users_router
from .home_router import router as home_router

__all__ = [
    "users_router",
    "home_router",
]
