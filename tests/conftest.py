"""Pytest configuration and fixtures for crowdsrc tests."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from crowdsrc.app import create_app
from crowdsrc.config import Settings
from crowdsrc.platform.users import (
    CreateUserRequest,
    DefaultCrowdSrcService,
    EmailAddress,
    User,
    UserId,
    UserName,
)
from crowdsrc.platform.users.infrastructure import (
    CollectingUserNotifier,
    InMemoryUserRepository,
    NotificationLog,
)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: needs a reachable PostgreSQL server (CROWDSRC_DB_*)"
    )


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, storage_backend="memory", notifier_backend="collecting")


@pytest.fixture
def username():
    return UserName.new("Kristoffer")


@pytest.fixture
def email():
    return EmailAddress.new("kristoffer@example.com")


@pytest.fixture
def create_user_request(username, email):
    return CreateUserRequest(username=username, email=email)


@pytest.fixture
def sample_user(username, email):
    return User(
        id=UserId.generate(),
        username=username,
        email=email,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def mock_repository():
    """Mock user repository."""
    repository = AsyncMock()
    repository.create_user = AsyncMock()
    return repository


@pytest.fixture
def mock_notifier():
    """Mock user notifier."""
    notifier = AsyncMock()
    notifier.user_created = AsyncMock(return_value=None)
    return notifier


@pytest.fixture
def in_memory_repository():
    return InMemoryUserRepository()


@pytest.fixture
def notification_log():
    return NotificationLog()


@pytest.fixture
def collecting_notifier(notification_log):
    return CollectingUserNotifier(notification_log)


@pytest.fixture
def service(in_memory_repository, collecting_notifier):
    """Service wired to in-memory storage and the collecting notifier."""
    return DefaultCrowdSrcService(in_memory_repository, collecting_notifier)


@pytest.fixture
def app(service, settings):
    return create_app(service=service, settings=settings)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
