"""Configuration schemas."""

from .app_schema import AppConfig
from .demo_schema import DemoConfig, OutputConfig, OutputFormat
from .logging_schema import LogDestination, LogFileConfig, LoggingConfig, LogLevel

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
