"""End-to-end tests against a real PostgreSQL server.

Configure the server with ``CROWDSRC_DB_*`` variables. Each test gets its
own freshly created database. Tests are skipped when no server is reachable.
"""

import asyncio
from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from crowdsrc.app import create_app
from crowdsrc.config import DatabaseSettings
from crowdsrc.database import create_connection_pool, open_connection
from crowdsrc.migrations import MigrationRunner
from crowdsrc.platform.users import (
    CreateUserError,
    CreateUserErrorKind,
    CreateUserRequest,
    DefaultCrowdSrcService,
    EmailAddress,
    User,
    UserName,
)
from crowdsrc.platform.users.infrastructure import (
    AsyncPGUserRepository,
    CollectingUserNotifier,
    NotificationLog,
)

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def database_settings():
    base = DatabaseSettings()
    try:
        conn = await asyncio.wait_for(open_connection(base.maintenance()), timeout=5)
    except Exception as e:
        pytest.skip(f"PostgreSQL not reachable at {base.maintenance().safe_dsn}: {e}")
    await conn.close()
    
    settings = base.with_database(f"crowdsrc_test_{uuid4().hex}")
    runner = MigrationRunner(settings)
    await runner.run()
    yield settings
    await runner.drop_database()


@pytest_asyncio.fixture
async def pool(database_settings):
    pool = await create_connection_pool(database_settings)
    yield pool
    await pool.close()


@pytest.fixture
def repository(pool):
    return AsyncPGUserRepository(pool)


@pytest.fixture
def pg_notification_log():
    return NotificationLog()


@pytest_asyncio.fixture
async def pg_client(repository, pg_notification_log, settings):
    service = DefaultCrowdSrcService(repository, CollectingUserNotifier(pg_notification_log))
    app = create_app(service=service, settings=settings)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


async def count_users(pool) -> int:
    return await pool.fetchval("SELECT COUNT(*) FROM users")


@pytest.mark.asyncio
async def test_create_user(pg_client, pool, pg_notification_log):
    response = await pg_client.post(
        "/api/users", json={"username": "Kristoffer", "email_address": "kristoffer@example.com"}
    )
    
    assert response.status_code == 201
    user_id = UUID(response.json()["data"]["id"])
    row = await pool.fetchrow("SELECT username, email, created_at FROM users WHERE id = $1", user_id)
    assert row["username"] == "Kristoffer"
    assert row["email"] == "kristoffer@example.com"
    assert row["created_at"].tzinfo is not None
    assert await pg_notification_log.count() == 1


@pytest.mark.asyncio
async def test_same_input_twice(pg_client, pool):
    payload = {"username": "Kristoffer", "email_address": "kristoffer@example.com"}
    await pg_client.post("/api/users", json=payload)
    
    response = await pg_client.post("/api/users", json=payload)
    
    assert response.status_code == 422
    assert response.json()["data"]["message"] == "user with email 'kristoffer@example.com' already exists"
    assert await count_users(pool) == 1


@pytest.mark.asyncio
async def test_duplicate_username_is_classified(pg_client, pool):
    await pg_client.post(
        "/api/users", json={"username": "Kristoffer", "email_address": "kristoffer@example.com"}
    )
    
    response = await pg_client.post(
        "/api/users", json={"username": "Kristoffer", "email_address": "other@example.com"}
    )
    
    assert response.status_code == 422
    assert response.json()["data"]["message"] == "user with username Kristoffer already exists"
    assert await count_users(pool) == 1


@pytest.mark.asyncio
async def test_concurrent_identical_creations(repository, pool):
    request = CreateUserRequest(UserName.new("Kristoffer"), EmailAddress.new("kristoffer@example.com"))
    
    results = await asyncio.gather(
        repository.create_user(request),
        repository.create_user(request),
        return_exceptions=True,
    )
    
    assert sum(isinstance(r, User) for r in results) == 1
    failures = [r for r in results if isinstance(r, CreateUserError)]
    assert len(failures) == 1
    assert failures[0].kind in (
        CreateUserErrorKind.DUPLICATE_EMAIL,
        CreateUserErrorKind.DUPLICATE_USERNAME,
    )
    assert await count_users(pool) == 1


@pytest.mark.asyncio
async def test_migrations_are_idempotent(database_settings):
    assert await MigrationRunner(database_settings).apply() == []
