"""Core domain primitives shared by every pattern example."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    InvalidStateError,
    MissingTokenError,
    ResourceNotFoundError,
    UnsupportedTypeError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "UnsupportedTypeError",
    "InvalidStateError",
    "MissingTokenError",
]
