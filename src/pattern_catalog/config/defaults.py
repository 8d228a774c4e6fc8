# src/pattern_catalog/config/defaults.py
from enum import Enum
from typing import Any, Dict

ENV_PREFIX = "PATTERN_CATALOG_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG"


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LogFormat(str, Enum):
    """Log rendering enumeration."""
    CONSOLE = "console"
    JSON = "json"


DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "${PATTERN_CATALOG_LOG_LEVEL:WARNING}",
        "destination": "stdout",
        "format": "console",
        "file": {
            "path": "logs/pattern_catalog.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },
    "facade": {
        "store_path": "/data/default.prefs",
    },
}

# Environment variable -> nested configuration key
ENV_OVERRIDES: Dict[str, tuple] = {
    f"{ENV_PREFIX}LOG_LEVEL": ("logging", "level"),
    f"{ENV_PREFIX}LOG_DESTINATION": ("logging", "destination"),
    f"{ENV_PREFIX}LOG_FORMAT": ("logging", "format"),
    f"{ENV_PREFIX}LOG_FILE": ("logging", "file", "path"),
    f"{ENV_PREFIX}STORE_PATH": ("facade", "store_path"),
}
