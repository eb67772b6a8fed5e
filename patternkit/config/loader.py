"""Configuration loading from defaults, files and environment variables."""
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from patternkit.config.defaults import DEFAULT_CONFIG, ENV_OVERRIDES
from patternkit.config.utils.env_expansion import expand_config_env_vars
from patternkit.domain.base.exceptions import ConfigurationError
from patternkit.infrastructure.logging.logger import get_logger

CONFIG_PATH_ENV = "PATTERNKIT_CONFIG"


class ConfigurationLoader:
    """Loads raw configuration dictionaries before schema validation."""

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._environ = environ if environ is not None else os.environ
        self._logger = get_logger(__name__)

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from all sources.

        Args:
            config_file: Explicit file path. Falls back to ``PATTERNKIT_CONFIG``.

        Returns:
            Merged configuration dictionary with environment overrides applied.
        """
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        path = config_file or self._environ.get(CONFIG_PATH_ENV)
        if path:
            file_data = self.load_from_file(path)
            config_data = merge_dicts(config_data, file_data)

        config_data = self.apply_environment_overrides(config_data)
        return expand_config_env_vars(config_data)

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """Load a YAML or JSON configuration file."""
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with file_path.open("r", encoding="utf-8") as f:
                if file_path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        self._logger.debug("Loaded configuration file", path=str(file_path))
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``PATTERNKIT_*`` environment overrides to the configuration."""
        result = copy.deepcopy(config_data)
        for env_name, key_path in ENV_OVERRIDES.items():
            value = self._environ.get(env_name)
            if value is None or value == "":
                continue
            section = result
            for key in key_path[:-1]:
                section = section.setdefault(key, {})
            section[key_path[-1]] = value
            self._logger.debug("Applied environment override", variable=env_name)
        return result


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result
