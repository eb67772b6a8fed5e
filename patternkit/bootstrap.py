"""Application bootstrap - configuration, logging and the demo catalogue."""

from __future__ import annotations

from typing import Optional

from patternkit.catalog import DemoCatalog
from patternkit.config import AppConfig, LoggingConfig
from patternkit.config.manager import ConfigurationManager, get_config_manager
from patternkit.infrastructure.logging.logger import get_logger, setup_logging


class Application:
    """Application context wiring configuration, logging and the catalogue."""

    def __init__(self, config_path: Optional[str] = None,
                 log_level: Optional[str] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self.log_level = log_level
        self._initialized = False
        self._config_manager: Optional[ConfigurationManager] = None
        self._catalog: Optional[DemoCatalog] = None
        self.logger = get_logger(__name__)

    @property
    def config_manager(self) -> ConfigurationManager:
        if self._config_manager is None:
            self._config_manager = get_config_manager(self.config_path)
        return self._config_manager

    @property
    def config(self) -> AppConfig:
        return self.config_manager.app_config

    @property
    def catalog(self) -> DemoCatalog:
        if self._catalog is None:
            self._catalog = DemoCatalog()
        return self._catalog

    def initialize(self) -> bool:
        """
        Load configuration and set up logging.

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        if self._initialized:
            return True

        logging_config = self.config.logging
        if self.log_level:
            logging_config = LoggingConfig.model_validate(
                {**logging_config.model_dump(), "level": self.log_level}
            )
        setup_logging(logging_config)

        self.logger.info(
            "Application initialized",
            environment=self.config.environment,
            demos=len(self.catalog),
        )
        self._initialized = True
        return True
