"""Utility functions for crowdsrc."""

from .uuid import generate_uuid_v7
from .read_write_lock import ReadWriteLock

__all__ = [
    "generate_uuid_v7",
    "ReadWriteLock",
]
