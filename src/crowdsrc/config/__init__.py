"""Configuration for the crowdsrc service."""

from .logging_config import LoggingConfig, LogFormat, LogLevel, LogVerbosity
from .settings import DatabaseSettings, Settings, get_settings

__all__ = [
    "DatabaseSettings",
    "Settings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
]
