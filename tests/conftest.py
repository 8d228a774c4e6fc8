import logging

import pytest
import structlog

from pattern_catalog.config import reset_config_manager
from pattern_catalog.config.defaults import ENV_OVERRIDES, CONFIG_FILE_ENV


@pytest.fixture(autouse=True)
def isolated_configuration(monkeypatch):
    """Keep PATTERN_CATALOG_* variables and cached configuration out of tests."""
    for env_var in list(ENV_OVERRIDES) + [CONFIG_FILE_ENV]:
        monkeypatch.delenv(env_var, raising=False)
    reset_config_manager()
    yield
    reset_config_manager()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop handlers installed by setup_logging() and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML configuration file and return its path."""
    def _write(content: str, name: str = "config.yml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
