"""Unified configuration management for the pattern catalogue."""
from __future__ import annotations

import copy
import json
import os
import threading
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.config.defaults import CONFIG_FILE_ENV, DEFAULT_CONFIG, ENV_OVERRIDES
from pattern_catalog.config.schemas import CatalogConfig, FacadeConfig, LoggingConfig
from pattern_catalog.config.utils import expand_config_env_vars
from pattern_catalog.domain.core.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


def deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Recursively merge ``source`` into ``target``."""
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            deep_update(target[key], value)
        else:
            target[key] = value


def _set_nested_value(config: Dict[str, Any], path: tuple, value: Any) -> None:
    current = config
    for key in path[:-1]:
        current = current.setdefault(key, {})
    current[path[-1]] = value


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Sources, lowest priority first:
    - DEFAULT_CONFIG
    - YAML or JSON configuration file
    - PATTERN_CATALOG_* environment variables

    Configuration is loaded lazily on first access and validated against
    CatalogConfig.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[CatalogConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        """Path of the configuration file, if any."""
        return self._config_file

    @property
    def app_config(self) -> CatalogConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> CatalogConfig:
        config_data = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_file:
            deep_update(config_data, self._load_config_file(self._config_file))

        self._apply_environment_overrides(config_data)
        config_data = expand_config_env_vars(config_data)

        try:
            app_config = CatalogConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.debug("Configuration loaded", config_file=self._config_file)
        return app_config

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """Load configuration from a YAML or JSON file."""
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if config_path.endswith(".json"):
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {str(e)}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a mapping: {config_path}")
        return data

    def _apply_environment_overrides(self, config_data: Dict[str, Any]) -> None:
        for env_var, path in ENV_OVERRIDES.items():
            if env_var in os.environ:
                _set_nested_value(config_data, path, os.environ[env_var])

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def get_facade_config(self) -> FacadeConfig:
        """Get facade example configuration."""
        return self.app_config.facade

    def reload(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the process-wide configuration manager.

    Passing ``config_file`` replaces the current manager with one that reads
    that file.
    """
    global _config_manager

    if config_file is not None:
        with _manager_lock:
            _config_manager = ConfigurationManager(config_file)
        return _config_manager

    if _config_manager is None:
        with _manager_lock:
            if _config_manager is None:
                _config_manager = ConfigurationManager()

    return _config_manager


def reset_config_manager() -> None:
    """Forget the process-wide configuration manager."""
    global _config_manager

    with _manager_lock:
        _config_manager = None
