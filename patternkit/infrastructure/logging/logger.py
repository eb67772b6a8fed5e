"""Structured logging for the catalogue using structlog over stdlib logging."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from patternkit.config.schemas.logging_schema import LogDestination, LoggingConfig
from patternkit.domain.base.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.CallsiteParameterAdder(
        [
            structlog.processors.CallsiteParameter.MODULE,
            structlog.processors.CallsiteParameter.FUNC_NAME,
            structlog.processors.CallsiteParameter.LINENO,
        ]
    ),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
]


def _configure_structlog() -> None:
    """Route structlog through the stdlib logging tree."""
    structlog.configure(
        processors=_SHARED_PROCESSORS,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = []

    if config.destination in (LogDestination.FILE, LogDestination.BOTH):
        log_path = os.path.expandvars(config.file.path)
        log_dir = os.path.dirname(log_path)
        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=config.file.max_size_mb * 1024 * 1024,
                backupCount=config.file.backup_count,
            )
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {log_path}: {e}") from e
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in (LogDestination.CONSOLE, LogDestination.BOTH):
        # StreamHandler writes to stderr so demo output on stdout stays clean
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    return handlers


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application.

    Args:
        config: Logging configuration. Defaults are used when omitted.

    Returns:
        Configured structlog logger for the package.

    Raises:
        ConfigurationError: If the log file cannot be opened
    """
    config = config or LoggingConfig()
    handlers = _build_handlers(config)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.value))

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = structlog.get_logger("patternkit")
    logger.debug(
        "Logging configured",
        log_level=config.level.value,
        log_destination=config.destination.value,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the stdlib logger called ``name``."""
    return structlog.get_logger(name)


_configure_structlog()
