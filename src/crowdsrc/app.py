"""crowdsrc FastAPI application.

``create_app`` wires the users feature into a FastAPI app. Pass a service to
use it as is (tests, embedding). Without one, the lifespan handler builds
the service from settings and tears it down on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional, Tuple

import asyncpg
from fastapi import FastAPI

from .config import Settings, get_settings
from .core.exceptions import ConfigurationError
from .database import create_connection_pool
from .middleware import RequestLoggingMiddleware
from .migrations import MigrationRunner
from .platform.users import CrowdSrcService, DefaultCrowdSrcService, UserNotifier, UserRepository
from .platform.users.api import (
    get_crowdsrc_service,
    get_service_from_state,
    home_router,
    register_exception_handlers,
    unhandled_exception_handler,
    users_router,
)
from .platform.users.infrastructure import (
    AsyncPGUserRepository,
    CollectingUserNotifier,
    EmailUserNotifier,
    InMemoryUserRepository,
    NotificationLog,
)

logger = logging.getLogger(__name__)


def build_notifier(settings: Settings) -> UserNotifier:
    """Notifier selected by ``settings.notifier_backend``."""
    if settings.notifier_backend == "email":
        return EmailUserNotifier()
    elif settings.notifier_backend == "collecting":
        return CollectingUserNotifier(NotificationLog())
    else:
        raise ConfigurationError(f"Unknown notifier backend: {settings.notifier_backend}")


async def build_repository(settings: Settings) -> Tuple[UserRepository, Optional[asyncpg.Pool]]:
    """Repository selected by ``settings.storage_backend``, plus its pool if any."""
    if settings.storage_backend == "memory":
        return InMemoryUserRepository(), None
    elif settings.storage_backend == "postgres":
        if settings.run_migrations:
            await MigrationRunner(settings.database).run()
        pool = await create_connection_pool(settings.database)
        return AsyncPGUserRepository(pool), pool
    else:
        raise ConfigurationError(f"Unknown storage backend: {settings.storage_backend}")


def create_app(
    service: Optional[CrowdSrcService] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create the crowdsrc API.
    
    Args:
        service: Ready service to use; skips building one on startup
        settings: Settings to build from; defaults to ``get_settings()``
        
    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        pool: Optional[asyncpg.Pool] = None
        if service is None:
            repository, pool = await build_repository(settings)
            notifier = build_notifier(settings)
            app.state.crowdsrc_service = DefaultCrowdSrcService(repository, notifier)
            logger.info(
                f"Started {settings.app_name} {settings.app_version} ({settings.environment}) "
                f"with {settings.storage_backend} storage "
                f"and {settings.notifier_backend} notifier"
            )
        
        try:
            yield
        finally:
            if pool is not None:
                await pool.close()
                logger.info("Closed database connection pool")
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="User registration API for the crowdsrc platform",
        debug=settings.debug,
        lifespan=lifespan,
    )
    
    if service is not None:
        app.state.crowdsrc_service = service
    app.dependency_overrides[get_crowdsrc_service] = get_service_from_state
    
    app.add_middleware(RequestLoggingMiddleware, error_handler=unhandled_exception_handler)
    register_exception_handlers(app)
    
    app.include_router(home_router)
    app.include_router(users_router)
    
    return app
