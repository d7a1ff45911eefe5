"""crowdsrc main entry point."""

import logging

import uvicorn

from .config import LoggingConfig, get_settings

# Configure logging based on environment
LoggingConfig.configure()

from .app import create_app

logger = logging.getLogger(__name__)

# Create the FastAPI application
app = create_app()


def main() -> None:
    """Run the application."""
    settings = get_settings()
    
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    
    uvicorn.run(
        "crowdsrc.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=False,
    )


if __name__ == "__main__":
    main()
