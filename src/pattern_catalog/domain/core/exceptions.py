# src/pattern_catalog/domain/core/exceptions.py
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class UnsupportedTypeError(DomainException, ValueError):
    """Raised when a factory is asked for a type it cannot produce."""
    def __init__(self, message: str, requested: Any = None, supported: Optional[Iterable[Any]] = None):
        super().__init__(message)
        self.requested = requested
        self.supported = list(supported) if supported is not None else []


class InvalidStateError(DomainException, RuntimeError):
    """Raised when an object is used while in a state that forbids the call."""
    def __init__(self, message: str, state: Any = None):
        super().__init__(message)
        self.state = state


class MissingTokenError(InvalidStateError):
    """Raised when an authentication link has no token to attach."""
    def __init__(self, message: str = "Token should be not null"):
        super().__init__(message, state={"token": None})
