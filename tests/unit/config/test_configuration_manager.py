"""Tests for configuration loading, validation and management."""

import json
import os
from unittest.mock import patch

import pytest

from patternkit.config import LogDestination, LogLevel, OutputFormat
from patternkit.config.loader import ConfigurationLoader, merge_dicts
from patternkit.config.manager import ConfigurationManager, get_config_manager, reset_config_manager
from patternkit.domain.base.exceptions import ConfigurationError


class TestConfigurationLoader:
    """Test raw configuration loading."""

    def test_defaults_without_file(self):
        """Test that defaults are used when no file is given."""
        config = ConfigurationLoader(environ={}).load_configuration()

        assert config["logging"]["level"] == "WARNING"
        assert config["output"]["format"] == "table"
        assert config["demos"]["flyweight_tree_count"] == 1_000_000

    def test_yaml_file_is_merged_over_defaults(self, tmp_path):
        """Test deep merging of a YAML file."""
        path = tmp_path / "config.yml"
        path.write_text("logging:\n  level: debug\ndemos:\n  flyweight_tree_count: 10\n")

        config = ConfigurationLoader(environ={}).load_configuration(str(path))

        assert config["logging"]["level"] == "debug"
        assert config["logging"]["destination"] == "console"
        assert config["demos"]["flyweight_tree_count"] == 10

    def test_json_file(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output": {"format": "json"}}))

        config = ConfigurationLoader(environ={}).load_configuration(str(path))

        assert config["output"]["format"] == "json"

    def test_file_from_environment(self, tmp_path):
        """Test that PATTERNKIT_CONFIG selects the file."""
        path = tmp_path / "config.yml"
        path.write_text("environment: testing\n")

        loader = ConfigurationLoader(environ={"PATTERNKIT_CONFIG": str(path)})

        assert loader.load_configuration()["environment"] == "testing"

    def test_environment_overrides_beat_file(self, tmp_path):
        """Test precedence of environment overrides."""
        path = tmp_path / "config.yml"
        path.write_text("logging:\n  level: ERROR\n")

        loader = ConfigurationLoader(environ={
            "PATTERNKIT_LOG_LEVEL": "INFO",
            "PATTERNKIT_OUTPUT_FORMAT": "yaml",
        })
        config = loader.load_configuration(str(path))

        assert config["logging"]["level"] == "INFO"
        assert config["output"]["format"] == "yaml"

    def test_missing_file_raises(self, tmp_path):
        """Test that a missing file is a configuration error."""
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigurationLoader(environ={}).load_configuration(str(tmp_path / "absent.yml"))

    def test_unparsable_file_raises(self, tmp_path):
        """Test that a malformed file is a configuration error."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            ConfigurationLoader(environ={}).load_from_file(str(path))

    def test_non_mapping_file_raises(self, tmp_path):
        """Test that a file must contain a mapping."""
        path = tmp_path / "list.yml"
        path.write_text("- one\n- two\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            ConfigurationLoader(environ={}).load_from_file(str(path))

    def test_empty_file_is_empty_mapping(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")

        assert ConfigurationLoader(environ={}).load_from_file(str(path)) == {}


def test_merge_dicts_does_not_mutate_inputs():
    base = {"a": {"b": 1, "c": 2}}
    override = {"a": {"c": 3}, "d": 4}

    result = merge_dicts(base, override)

    assert result == {"a": {"b": 1, "c": 3}, "d": 4}
    assert base == {"a": {"b": 1, "c": 2}}


class TestConfigurationManager:
    """Test validated configuration access."""

    def test_typed_sections(self):
        """Test that sections are validated into schema objects."""
        manager = ConfigurationManager(loader=ConfigurationLoader(environ={}))

        assert manager.get_logging_config().level == LogLevel.WARNING
        assert manager.get_logging_config().destination == LogDestination.CONSOLE
        assert manager.get_output_config().format == OutputFormat.TABLE
        assert manager.get_demo_config().flyweight_tree_count == 1_000_000

    def test_level_is_case_insensitive(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("logging:\n  level: debug\n")

        manager = ConfigurationManager(str(path), loader=ConfigurationLoader(environ={}))

        assert manager.get_logging_config().level == LogLevel.DEBUG

    def test_get_dotted_key(self):
        """Test dotted key access with defaults."""
        manager = ConfigurationManager(loader=ConfigurationLoader(environ={}))

        assert manager.get("logging.level") == "WARNING"
        assert manager.get("output.format") == "table"
        assert manager.get("logging.missing", "fallback") == "fallback"
        assert manager.get("nope.nothing") is None

    def test_invalid_configuration_raises(self, tmp_path):
        """Test that schema violations become configuration errors."""
        path = tmp_path / "config.yml"
        path.write_text("environment: staging\ndemos:\n  flyweight_tree_count: 0\n")

        manager = ConfigurationManager(str(path), loader=ConfigurationLoader(environ={}))

        with pytest.raises(ConfigurationError) as exc_info:
            _ = manager.app_config

        assert exc_info.value.error_code == "CONFIGURATION_ERROR"
        assert "environment" in exc_info.value.missing_fields
        assert "demos.flyweight_tree_count" in exc_info.value.missing_fields

    def test_invalid_log_level_raises(self):
        manager = ConfigurationManager(
            loader=ConfigurationLoader(environ={"PATTERNKIT_LOG_LEVEL": "chatty"})
        )

        with pytest.raises(ConfigurationError):
            manager.get_logging_config()

    def test_configuration_is_cached_until_reload(self, tmp_path):
        """Test lazy loading and reload."""
        path = tmp_path / "config.yml"
        path.write_text("environment: testing\n")
        manager = ConfigurationManager(str(path), loader=ConfigurationLoader(environ={}))

        assert manager.app_config is manager.app_config
        path.write_text("environment: production\n")
        assert manager.app_config.environment == "testing"

        assert manager.reload().environment == "production"


class TestGlobalConfigurationManager:
    """Test the process-wide configuration manager."""

    def test_same_manager_is_returned(self):
        assert get_config_manager() is get_config_manager()

    def test_new_file_replaces_manager(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("environment: testing\n")

        default_manager = get_config_manager()
        file_manager = get_config_manager(str(path))

        assert file_manager is not default_manager
        assert get_config_manager() is file_manager
        assert file_manager.app_config.environment == "testing"

    def test_reset(self):
        manager = get_config_manager()
        reset_config_manager()

        assert get_config_manager() is not manager

    def test_environment_override_through_os_environ(self):
        with patch.dict(os.environ, {"PATTERNKIT_OUTPUT_FORMAT": "list"}):
            assert get_config_manager().get_output_config().format == OutputFormat.LIST
