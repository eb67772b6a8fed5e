"""End-to-end CLI integration tests."""
import json
import os
import shutil
import tempfile

import pytest
import yaml

from patternkit.bootstrap import Application
from patternkit.cli.main import main, parse_args


class TestCLIIntegration:
    """Test complete CLI scenarios through ``main``."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.temp_dir, "test_config.json")

    def teardown_method(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def create_config_file(self, config_data):
        """Create a temporary configuration file."""
        with open(self.config_path, 'w') as f:
            json.dump(config_data, f, indent=2)
        return self.config_path

    def test_list_json(self, capsys):
        assert main(["list", "--format", "json"]) == 0

        demos = json.loads(capsys.readouterr().out)["demos"]
        assert len(demos) == 20
        assert {"tag", "title", "category", "summary", "module"} <= set(demos[0])

    def test_list_by_category(self, capsys):
        assert main(["list", "--category", "creational", "--format", "json"]) == 0

        demos = json.loads(capsys.readouterr().out)["demos"]
        assert [demo["tag"] for demo in demos] == [
            "abstract_factory", "builder", "factory", "prototype", "singleton",
        ]

    def test_list_uses_configured_format(self, capsys):
        config_path = self.create_config_file({"output": {"format": "yaml"}})

        assert main(["--config", config_path, "list", "--category", "structural"]) == 0

        data = yaml.safe_load(capsys.readouterr().out)
        assert len(data["demos"]) == 5

    def test_list_default_table(self, capsys):
        assert main(["list"]) == 0

        output = capsys.readouterr().out
        assert "chain_of_responsibility" in output
        assert "flyweight" in output

    def test_show(self, capsys):
        assert main(["show", "Decorator", "--format", "json"]) == 0

        demo = json.loads(capsys.readouterr().out)["demo"]
        assert demo["tag"] == "decorator"
        assert demo["category"] == "structural"

    def test_show_unknown_tag(self, capsys):
        assert main(["show", "monostate"]) == 1

        assert "Demo 'monostate' is not registered" in capsys.readouterr().err

    def test_run_single(self, capsys):
        assert main(["run", "decorator"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "Order Details:",
            "Description: Margherita Pizza, Olives, Extra Cheese",
            "Total Cost: $9.5",
        ]

    def test_run_several_in_order(self, capsys):
        assert main(["run", "iterator", "adapter"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "=== Iterator ===",
            "LLD Tutorial",
            "System Design Basics",
            "",
            "=== Adapter ===",
            "Paid Rs.1780.0 using Razorpay for invoice: 12",
            "Paid Rs.499.0 using PayU for order: 13",
        ]

    def test_run_with_unknown_tag_runs_nothing(self, capsys):
        assert main(["run", "decorator", "nope"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Demo 'nope' is not registered" in captured.err

    def test_run_without_tags(self, capsys):
        assert main(["run"]) == 1
        assert "Nothing to run" in capsys.readouterr().err

    def test_run_all(self, capsys, small_forest_config):
        assert main(["--config", small_forest_config, "run", "--all"]) == 0

        output = capsys.readouterr().out
        assert output.count("=== ") == 20
        assert "Planted 25 trees." in output
        assert "Final State: DELIVERED" in output

    def test_invalid_configuration_exits_with_error(self, capsys):
        config_path = self.create_config_file({"environment": "staging"})

        assert main(["--config", config_path, "list"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_missing_configuration_file(self, capsys):
        missing = os.path.join(self.temp_dir, "absent.yml")

        assert main(["--config", missing, "list"]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_unwritable_log_file_exits_with_error(self, capsys):
        blocker = os.path.join(self.temp_dir, "blocker")
        with open(blocker, 'w') as f:
            f.write("not a directory")
        log_path = os.path.join(blocker, "sub", "patternkit.log")
        config_path = self.create_config_file({
            "logging": {"destination": "file", "file": {"path": log_path}},
        })

        assert main(["--config", config_path, "list"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"Cannot open log file {log_path}" in captured.err

    def test_config_from_environment(self, capsys, monkeypatch):
        config_path = self.create_config_file({"output": {"format": "json"}})
        monkeypatch.setenv("PATTERNKIT_CONFIG", config_path)

        assert main(["show", "state"]) == 0
        assert json.loads(capsys.readouterr().out)["demo"]["tag"] == "state"

    def test_logs_go_to_file_not_stdout(self, capsys):
        log_path = os.path.join(self.temp_dir, "logs", "patternkit.log")
        config_path = self.create_config_file({
            "logging": {"level": "INFO", "destination": "file", "file": {"path": log_path}},
        })

        assert main(["--config", config_path, "run", "decorator"]) == 0

        assert "Application initialized" not in capsys.readouterr().out
        with open(log_path) as f:
            assert "Application initialized" in f.read()

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out


def test_parse_args_globals():
    args = parse_args(["--config", "c.yml", "--log-level", "DEBUG", "show", "state"])

    assert args.config == "c.yml"
    assert args.log_level == "DEBUG"
    assert args.command == "show"
    assert args.tag == "state"


def test_parse_args_rejects_unknown_format():
    with pytest.raises(SystemExit):
        parse_args(["list", "--format", "xml"])


def test_application_log_level_override():
    app = Application(log_level="debug")

    assert app.initialize() is True
    assert app.initialize() is True
    assert len(app.catalog) == 20
