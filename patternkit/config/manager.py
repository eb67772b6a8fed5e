"""Unified configuration management for the application."""
from __future__ import annotations

import threading
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from patternkit.config.loader import ConfigurationLoader
from patternkit.config.schemas import AppConfig, DemoConfig, LoggingConfig, OutputConfig
from patternkit.domain.base.exceptions import ConfigurationError
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is loaded lazily on first access from defaults, an optional
    file and environment overrides, then validated against ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None,
                 loader: Optional[ConfigurationLoader] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader = loader

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data = self.loader.load_configuration(self._config_file)
        try:
            config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
        logger.debug("Configuration loaded", environment=config.environment)
        return config

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def get_output_config(self) -> OutputConfig:
        """Get CLI output configuration."""
        return self.app_config.output

    def get_demo_config(self) -> DemoConfig:
        """Get demonstration tunables."""
        return self.app_config.demos

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key, e.g. ``logging.level``."""
        value: Any = self.app_config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.app_config


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the process-wide configuration manager.

    Passing a different ``config_file`` replaces the current manager.
    """
    global _config_manager
    with _config_manager_lock:
        if _config_manager is None or (
            config_file is not None and config_file != _config_manager._config_file
        ):
            _config_manager = ConfigurationManager(config_file)
        return _config_manager


def reset_config_manager() -> None:
    """Forget the process-wide configuration manager."""
    global _config_manager
    with _config_manager_lock:
        _config_manager = None
