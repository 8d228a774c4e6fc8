"""Tests for the command line interface."""
import json

import pytest
import yaml

from pattern_catalog.cli.main import execute_command, main, parse_args
from pattern_catalog.domain.core.exceptions import ValidationError


def _run_main(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestParseArgs:
    """Test argument parsing."""

    def test_list_defaults(self):
        """Test the list subcommand defaults."""
        args = parse_args(["list"])

        assert args.command == "list"
        assert args.category is None
        assert args.format == "json"
        assert args.config is None

    def test_global_options(self):
        """Test options placed before the subcommand."""
        args = parse_args(["--config", "catalog.yml", "--log-level", "DEBUG", "run", "adapter", "state"])

        assert args.config == "catalog.yml"
        assert args.log_level == "DEBUG"
        assert args.names == ["adapter", "state"]
        assert not args.all

    def test_invalid_category(self):
        """Test that unknown families are rejected by argparse."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["list", "--category", "architectural"])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        """Test --version."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out


class TestMain:
    """Test command execution end to end."""

    def test_list_json(self, capsys):
        """Test listing the whole catalogue."""
        assert _run_main(["list"]) == 0

        document = json.loads(capsys.readouterr().out)
        assert document["count"] == 19
        names = [pattern["name"] for pattern in document["patterns"]]
        assert names == sorted(names)

    def test_list_category_yaml(self, capsys):
        """Test the category filter with YAML output."""
        assert _run_main(["list", "--category", "creational", "--format", "yaml"]) == 0

        document = yaml.safe_load(capsys.readouterr().out)
        assert document["count"] == 5
        assert {pattern["category"] for pattern in document["patterns"]} == {"creational"}

    def test_list_table(self, capsys):
        """Test table output."""
        assert _run_main(["list", "--format", "table"]) == 0

        out = capsys.readouterr().out
        assert "Name" in out and "Category" in out
        assert "chain-of-responsibility" in out

    def test_show(self, capsys):
        """Test describing a single pattern."""
        assert _run_main(["show", "visitor"]) == 0

        pattern = json.loads(capsys.readouterr().out)["pattern"]
        assert pattern["category"] == "behavioral"
        assert pattern["module"] == "pattern_catalog.patterns.behavioral.visitor"

    def test_show_unknown_pattern(self, capsys):
        """Test the error document for an unknown name."""
        assert _run_main(["show", "bridge"]) == 1

        document = json.loads(capsys.readouterr().out)
        assert document["error"] == "RESOURCE_NOT_FOUND"
        assert document["message"] == "Pattern with ID bridge not found"
        assert "visitor" in document["details"]["available"]

    def test_run_named_patterns(self, capsys):
        """Test running demonstrations in the given order."""
        assert _run_main(["run", "visitor", "state"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "=== visitor (behavioral) ===",
            "Monthly cost: 5333",
            "Yearly cost: 20000",
            "",
            "=== state (behavioral) ===",
            "User 'admin' is logged in: True",
            "User 'Unknown' is logged in: False",
        ]

    def test_run_all(self, capsys):
        """Test running every demonstration."""
        assert _run_main(["run", "--all"]) == 0

        out = capsys.readouterr().out
        assert out.count("=== ") == 19
        assert "Midget Car Instances: 1" in out

    def test_run_without_names(self, capsys):
        """Test that run needs a target."""
        assert _run_main(["run"]) == 1
        assert json.loads(capsys.readouterr().out)["error"] == "VALIDATION_ERROR"

    def test_no_command(self, capsys):
        """Test invocation without a subcommand."""
        assert _run_main([]) == 1
        assert "No command specified" in json.loads(capsys.readouterr().out)["message"]

    def test_config_file_controls_facade(self, capsys, config_file):
        """Test that --config reaches the facade demonstration."""
        path = config_file("facade:\n  store_path: /tmp/cli.prefs\n")

        assert _run_main(["--config", path, "run", "facade"]) == 0
        assert "Reading data from file: /tmp/cli.prefs" in capsys.readouterr().out

    def test_invalid_config_file(self, capsys, config_file):
        """Test configuration errors reported as JSON."""
        path = config_file("logging:\n  level: LOUD\n")

        assert _run_main(["--config", path, "list"]) == 1
        assert json.loads(capsys.readouterr().out)["error"] == "CONFIGURATION_ERROR"

    def test_configuration_error_logged_as_text(self, capsys, config_file):
        """Test that errors raised while loading configuration are rendered by structlog."""
        path = config_file("logging:\n  level: nope\n")

        assert _run_main(["--config", path, "list"]) == 1

        err = capsys.readouterr().err
        assert "Domain error" in err
        assert "error_code=CONFIGURATION_ERROR" in err
        assert "'event':" not in err

    def test_execute_command_returns_zero(self, capsys):
        """Test the handler without the middleware."""
        assert execute_command(parse_args(["show", "adapter"])) == 0

    def test_execute_command_raises_domain_errors(self):
        """Test that the handler itself propagates errors."""
        with pytest.raises(ValidationError):
            execute_command(parse_args(["run"]))
