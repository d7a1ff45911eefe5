"""crowdsrc - user registration service for a crowdsourcing platform.

Validates identity fields, enforces global uniqueness of username and email,
persists users in PostgreSQL and notifies collaborators after registration.
"""

from .__version__ import __version__

__all__ = ["__version__"]
