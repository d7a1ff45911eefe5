"""Database connectivity for crowdsrc."""

from .connection import create_connection_pool, open_connection

__all__ = [
    "create_connection_pool",
    "open_connection",
]
