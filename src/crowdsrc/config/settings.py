"""
Configuration management for the crowdsrc service.

Settings are read from environment variables (and an optional ``.env`` file)
through pydantic-settings. Database settings live in their own class so they
can be derived per test database or for the maintenance connection.
"""
from functools import lru_cache
from typing import Literal, Optional
from urllib.parse import quote

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..__version__ import __version__


MAINTENANCE_DATABASE = "postgres"


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection and pool settings."""
    
    model_config = SettingsConfigDict(
        env_prefix="CROWDSRC_DB_",
        case_sensitive=False,
        extra="ignore",
    )
    
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    username: str = Field(default="postgres", description="Database username")
    password: SecretStr = Field(default=SecretStr("password"), description="Database password")
    database_name: str = Field(default="crowdsrc", description="Database name")
    require_ssl: bool = Field(default=False, description="Require SSL for connections")
    
    # Connection pool settings
    pool_min_size: int = Field(default=2, ge=0, description="Minimum pool size")
    pool_max_size: int = Field(default=10, ge=1, description="Maximum pool size")
    pool_timeout_seconds: float = Field(default=10.0, gt=0, description="Connect timeout in seconds")
    command_timeout_seconds: Optional[float] = Field(
        default=None, gt=0, description="Per-statement timeout in seconds"
    )
    
    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Ensure the port is a valid TCP port."""
        if not 1 <= v <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return v
    
    @field_validator("pool_max_size")
    @classmethod
    def validate_pool_max_size(cls, v: int, info: ValidationInfo) -> int:
        """Ensure max pool size is greater than min pool size."""
        min_size = info.data.get("pool_min_size")
        if min_size is not None and v < min_size:
            raise ValueError("pool_max_size must be greater than or equal to pool_min_size")
        return v
    
    @property
    def ssl_mode(self) -> str:
        return "require" if self.require_ssl else "prefer"
    
    @property
    def dsn(self) -> str:
        """Build PostgreSQL DSN string."""
        password = quote(self.password.get_secret_value(), safe="")
        password_part = f":{password}" if password else ""
        return (
            f"postgresql://{quote(self.username, safe='')}{password_part}@"
            f"{self.host}:{self.port}/{self.database_name}"
            f"?sslmode={self.ssl_mode}"
        )
    
    @property
    def safe_dsn(self) -> str:
        """Build PostgreSQL DSN string without password for logging."""
        return (
            f"postgresql://{self.username}@"
            f"{self.host}:{self.port}/{self.database_name}"
            f"?sslmode={self.ssl_mode}"
        )
    
    def with_database(self, database_name: str) -> "DatabaseSettings":
        """Return a copy of these settings pointing at another database."""
        return self.model_copy(update={"database_name": database_name})
    
    def maintenance(self) -> "DatabaseSettings":
        """Settings for the server's maintenance database, used to create databases."""
        return self.with_database(MAINTENANCE_DATABASE)


class Settings(BaseSettings):
    """Application settings for the crowdsrc service."""
    
    model_config = SettingsConfigDict(
        env_prefix="CROWDSRC_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Core application settings
    app_name: str = Field(default="crowdsrc", description="Application name")
    app_version: str = Field(default=__version__, description="Application version")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")
    
    # Server configuration
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=8000, description="Listen port")
    
    # Wiring
    storage_backend: Literal["postgres", "memory"] = Field(
        default="postgres", description="User repository implementation"
    )
    notifier_backend: Literal["email", "collecting"] = Field(
        default="email", description="User notifier implementation"
    )
    run_migrations: bool = Field(default=True, description="Apply SQL migrations on startup")
    
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    
    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Ensure the port is a valid TCP port."""
        if not 1 <= v <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
