"""AsyncPG implementation of the UserRepository protocol."""

import logging
import re
from datetime import datetime, timezone
from typing import Optional

import asyncpg

from ...core.entities import CreateUserRequest, User
from ...core.exceptions import CreateUserError
from ...core.value_objects import UserId

logger = logging.getLogger(__name__)

USERNAME_CONSTRAINT = "users_username_key"
EMAIL_CONSTRAINT = "users_email_key"

# e.g. 'Key (email)=(kristoffer@example.com) already exists.'
_DETAIL_COLUMN = re.compile(r"Key \((?P<column>[^)]+)\)=")

INSERT_USER = """
    INSERT INTO users (id, email, username, created_at)
    VALUES ($1, $2, $3, $4)
"""


def _violated_column(error: asyncpg.UniqueViolationError) -> Optional[str]:
    """Work out which column a unique violation is about.
    
    Prefers the constraint name and falls back to parsing the detail text.
    """
    constraint = getattr(error, "constraint_name", None)
    if constraint == USERNAME_CONSTRAINT:
        return "username"
    if constraint == EMAIL_CONSTRAINT:
        return "email"
    
    detail = getattr(error, "detail", None) or ""
    match = _DETAIL_COLUMN.search(detail)
    if match:
        return match.group("column").strip()
    return None


def classify_unique_violation(
    error: asyncpg.UniqueViolationError,
    request: CreateUserRequest,
) -> CreateUserError:
    """Map a unique violation on ``users`` to the matching CreateUserError.
    
    A violation that names neither column is reported as a duplicate email.
    That can misreport a username clash; it is logged so it stays visible.
    """
    column = _violated_column(error)
    if column == "username":
        return CreateUserError.duplicate_username(request.username.value)
    if column == "email":
        return CreateUserError.duplicate_email(request.email.value)
    
    logger.warning(
        f"Could not tell which unique constraint was violated "
        f"(constraint={getattr(error, 'constraint_name', None)!r}); "
        f"reporting duplicate email"
    )
    return CreateUserError.duplicate_email(request.email.value)


class AsyncPGUserRepository:
    """
    PostgreSQL implementation of UserRepository using asyncpg.
    
    Uniqueness is enforced by the table's UNIQUE constraints, so concurrent
    inserts of the same identity are decided by the database.
    """
    
    def __init__(self, connection_pool: asyncpg.Pool):
        self.connection_pool = connection_pool
    
    async def create_user(self, request: CreateUserRequest) -> User:
        """Insert a user inside a transaction.
        
        Leaving the transaction block through any exception rolls it back,
        so no row is left behind on failure.
        """
        user = User(
            id=UserId.generate(),
            username=request.username,
            email=request.email,
            created_at=datetime.now(timezone.utc),
        )
        
        try:
            async with self.connection_pool.acquire() as conn:
                async with conn.transaction():
                    logger.debug(f"Executing: {INSERT_USER.strip()}")
                    await conn.execute(
                        INSERT_USER,
                        user.id.value,
                        user.email.value,
                        user.username.value,
                        user.created_at,
                    )
        except asyncpg.UniqueViolationError as e:
            raise classify_unique_violation(e, request) from e
        except Exception as e:
            context = (
                f"failed to save user with username '{request.username}' "
                f"and email '{request.email}'"
            )
            logger.error(f"{context}: {e}", exc_info=True)
            raise CreateUserError.unknown(context, e) from e
        
        return user
