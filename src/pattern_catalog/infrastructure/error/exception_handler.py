"""Translation of exceptions into uniform error responses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from pattern_catalog.domain.core.exceptions import (
    ConfigurationError,
    DomainException,
    InvalidStateError,
    ResourceNotFoundError,
    UnsupportedTypeError,
    ValidationError,
)
from pattern_catalog.infrastructure.error.context import ExceptionContext
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.patterns import get_singleton


class ErrorCategory(str, Enum):
    """Broad classification of an error."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFIGURATION = "configuration"
    UNSUPPORTED = "unsupported"
    STATE = "state"
    DOMAIN = "domain"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Machine-readable error codes."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    INVALID_STATE = "INVALID_STATE"
    DOMAIN_ERROR = "DOMAIN_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class ErrorResponse:
    """Error document returned to callers."""

    error_code: str
    message: str
    category: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "category": self.category,
            "details": self.details,
        }


# Most specific classes first
_EXCEPTION_MAPPING = [
    (ResourceNotFoundError, ErrorCode.RESOURCE_NOT_FOUND, ErrorCategory.NOT_FOUND),
    (ConfigurationError, ErrorCode.CONFIGURATION_ERROR, ErrorCategory.CONFIGURATION),
    (UnsupportedTypeError, ErrorCode.UNSUPPORTED_TYPE, ErrorCategory.UNSUPPORTED),
    (InvalidStateError, ErrorCode.INVALID_STATE, ErrorCategory.STATE),
    (ValidationError, ErrorCode.VALIDATION_ERROR, ErrorCategory.VALIDATION),
    (DomainException, ErrorCode.DOMAIN_ERROR, ErrorCategory.DOMAIN),
]


class ExceptionHandler:
    """Maps exceptions to ErrorResponse objects and logs them."""

    def __init__(self):
        self.logger = get_logger(__name__)

    def handle_error(self, exception: Exception, context: Optional[ExceptionContext] = None) -> ErrorResponse:
        """
        Build the error response for an exception.

        Domain exceptions are logged at warning level, anything else at
        error level with the traceback.

        Args:
            exception: The exception to translate
            context: Optional context of the failed operation

        Returns:
            ErrorResponse describing the failure
        """
        context_data = context.to_dict() if context else {}

        for exception_type, code, category in _EXCEPTION_MAPPING:
            if isinstance(exception, exception_type):
                self.logger.warning(
                    "Domain error",
                    error_code=code.value,
                    error=str(exception),
                    **context_data,
                )
                return ErrorResponse(
                    error_code=code.value,
                    message=str(exception),
                    category=category.value,
                    details=self._details_for(exception),
                )

        self.logger.error(
            "Unexpected error",
            error_type=type(exception).__name__,
            error=str(exception),
            exc_info=exception,
            **context_data,
        )
        return ErrorResponse(
            error_code=ErrorCode.INTERNAL_ERROR.value,
            message=str(exception) or type(exception).__name__,
            category=ErrorCategory.INTERNAL.value,
            details={"type": type(exception).__name__},
        )

    def _details_for(self, exception: Exception) -> Dict[str, Any]:
        details: Dict[str, Any] = {"type": type(exception).__name__}
        if isinstance(exception, ResourceNotFoundError):
            details["resource_type"] = exception.resource_type
            details["resource_id"] = exception.resource_id
            available = getattr(exception, "available", None)
            if available is not None:
                details["available"] = list(available)
        elif isinstance(exception, UnsupportedTypeError):
            details["requested"] = str(exception.requested)
            if exception.supported:
                details["supported"] = [str(s) for s in exception.supported]
        elif isinstance(exception, ConfigurationError) and exception.missing_fields:
            details["missing_fields"] = exception.missing_fields
        elif isinstance(exception, ValidationError) and exception.details is not None:
            details["details"] = exception.details
        return details


def get_exception_handler() -> ExceptionHandler:
    """Get the shared exception handler."""
    return get_singleton(ExceptionHandler)
