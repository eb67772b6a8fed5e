"""Configuration package - schemas, loading and management."""

from .schemas import (
    AppConfig,
    DemoConfig,
    LogDestination,
    LogFileConfig,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
)

__all__ = [
    "AppConfig",
    "DemoConfig",
    "OutputConfig",
    "OutputFormat",
    "LoggingConfig",
    "LogFileConfig",
    "LogLevel",
    "LogDestination",
]
