"""Structured logging for the pattern catalogue, built on structlog."""
import logging
import os
import threading
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

import structlog

_SHARED_PROCESSORS: List[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]

_configured = False
_installed_handlers: List[logging.Handler] = []
_configure_lock = threading.Lock()


def _configure_structlog() -> None:
    """Route structlog through the standard library exactly once."""
    global _configured

    if _configured:
        return
    with _configure_lock:
        if _configured:
            return
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *_SHARED_PROCESSORS,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger.

    Safe to call at import time. Records are rendered by the handlers that
    setup_logging() attaches; call it before logging anything that must be
    readable.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        structlog bound logger
    """
    _configure_structlog()
    return structlog.get_logger(name)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def setup_logging(config: Optional[Dict[str, Any]] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Args:
        config: Logging section of the catalogue configuration
               (see ``LoggingConfig``). If None, the defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from pattern_catalog.config.schemas import LoggingConfig

        config = LoggingConfig().model_dump()

    _configure_structlog()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config["level"].upper()))

    formatter = _build_formatter(config.get("format", "console"))
    handlers: List[logging.Handler] = []

    if config["destination"] in ("file", "both"):
        log_path = os.path.expandvars(config["file"]["path"])
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config["file"]["max_size_mb"] * 1024 * 1024,
            backupCount=config["file"]["backup_count"],
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config["destination"] in ("stdout", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler in _installed_handlers:
            handler.close()

    _installed_handlers[:] = handlers
    for handler in handlers:
        root_logger.addHandler(handler)

    logger = get_logger("pattern_catalog")
    logger.debug(
        "Logging configured",
        log_level=config["level"],
        log_destination=config["destination"],
    )
    return logger
