"""Tests for CLI output formatting."""
import json

import yaml

from pattern_catalog.cli.formatters import format_output, format_patterns_table

PATTERNS = [
    {"name": "adapter", "category": "structural", "summary": "Expose Celsius as Fahrenheit", "module": "m"},
    {"name": "state", "category": "behavioral", "summary": "Switch authorization state", "module": "m"},
]


def test_json_is_default():
    """Test that unknown formats fall back to JSON."""
    data = {"count": 2, "patterns": PATTERNS}
    assert json.loads(format_output(data, "json")) == data
    assert json.loads(format_output(data, "xml")) == data


def test_yaml_keeps_key_order():
    """Test YAML output."""
    output = format_output({"count": 2, "patterns": PATTERNS}, "yaml")

    assert output.startswith("count: 2\n")
    assert yaml.safe_load(output)["patterns"][1]["name"] == "state"


def test_table_for_listing():
    """Test the table of several patterns."""
    output = format_output({"count": 2, "patterns": PATTERNS}, "table")

    assert "adapter" in output
    assert "behavioral" in output
    assert "Summary" in output


def test_table_for_single_pattern():
    """Test the table of one pattern."""
    assert "state" in format_output({"pattern": PATTERNS[1]}, "table")


def test_table_falls_back_to_json():
    """Test table output of unknown data."""
    assert json.loads(format_output({"other": 1}, "table")) == {"other": 1}


def test_empty_table():
    """Test the message for an empty listing."""
    assert format_patterns_table([]) == "No patterns found."
