"""Tests for logging setup."""
import json
import logging
import sys

from pattern_catalog.infrastructure.logging import get_logger, setup_logging


def _file_config(path, destination="file", log_format="console", level="DEBUG"):
    return {
        "level": level,
        "destination": destination,
        "format": log_format,
        "file": {"path": str(path), "max_size_mb": 1, "backup_count": 1},
    }


class TestSetupLogging:
    """Test handler configuration."""

    def test_defaults_log_to_stderr(self):
        """Test the default configuration."""
        setup_logging()
        root_logger = logging.getLogger()

        assert root_logger.level == logging.WARNING
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)
        assert root_logger.handlers[0].stream is sys.stderr

    def test_file_destination_creates_directory(self, tmp_path):
        """Test that records reach the log file."""
        log_path = tmp_path / "logs" / "catalog.log"
        setup_logging(_file_config(log_path))

        get_logger("tests.logger").info("Running demonstration", pattern="state")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_path.read_text()
        assert "Running demonstration" in content
        assert "pattern=state" in content

    def test_json_format(self, tmp_path):
        """Test JSON rendering of records."""
        log_path = tmp_path / "catalog.log"
        setup_logging(_file_config(log_path, log_format="json"))

        get_logger("tests.logger").warning("Overriding existing pattern", pattern="state")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_path.read_text().splitlines()[-1])
        assert record["event"] == "Overriding existing pattern"
        assert record["pattern"] == "state"
        assert record["level"] == "warning"
        assert record["logger"] == "tests.logger"

    def test_both_destinations(self, tmp_path):
        """Test that file and console handlers are both installed."""
        setup_logging(_file_config(tmp_path / "catalog.log", destination="both"))
        assert len(logging.getLogger().handlers) == 2

    def test_level_filters_records(self, tmp_path):
        """Test that records below the level are dropped."""
        log_path = tmp_path / "catalog.log"
        setup_logging(_file_config(log_path, level="ERROR"))

        get_logger("tests.logger").warning("hidden")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hidden" not in log_path.read_text()

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        """Test that handlers do not pile up."""
        setup_logging(_file_config(tmp_path / "catalog.log"))
        setup_logging(_file_config(tmp_path / "catalog.log"))
        assert len(logging.getLogger().handlers) == 1
