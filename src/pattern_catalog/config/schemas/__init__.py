"""Configuration schemas package."""

from .app_schema import CatalogConfig, FacadeConfig
from .logging_schema import LogFileConfig, LoggingConfig

__all__ = [
    "CatalogConfig",
    "FacadeConfig",
    "LoggingConfig",
    "LogFileConfig",
]
