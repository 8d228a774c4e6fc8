"""Configuration package for the pattern catalogue."""

from .manager import ConfigurationManager, get_config_manager, reset_config_manager
from .schemas import CatalogConfig, FacadeConfig, LogFileConfig, LoggingConfig

__all__ = [
    "CatalogConfig",
    "ConfigurationManager",
    "FacadeConfig",
    "LogFileConfig",
    "LoggingConfig",
    "get_config_manager",
    "reset_config_manager",
]
