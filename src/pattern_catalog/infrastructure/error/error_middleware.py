"""Error handling middleware for command-line handlers."""

import functools
import json
import sys
from typing import Callable, Optional

from pattern_catalog.infrastructure.error.context import ExceptionContext
from pattern_catalog.infrastructure.error.exception_handler import ExceptionHandler, get_exception_handler


class ErrorMiddleware:
    """Middleware for consistent error handling."""

    def __init__(self, error_handler: Optional[ExceptionHandler] = None):
        self._error_handler = error_handler or get_exception_handler()

    def wrap_script_handler(self, script_handler: Callable) -> Callable:
        """
        Wrap a script handler function with error handling.

        A failing handler prints a JSON error document to stdout and exits
        with status 1.

        Args:
            script_handler: The script handler function to wrap

        Returns:
            Wrapped script handler function with error handling
        """

        @functools.wraps(script_handler)
        def wrapped_script_handler(*args, **kwargs):
            try:
                return script_handler(*args, **kwargs)
            except Exception as e:
                context = ExceptionContext(operation=script_handler.__name__)
                error_response = self._error_handler.handle_error(e, context)

                print(json.dumps(error_response.to_dict(), indent=2))
                sys.exit(1)

        return wrapped_script_handler


def with_error_handling(error_handler: Optional[ExceptionHandler] = None):
    """
    Decorator for adding script error handling to functions.

    Args:
        error_handler: Optional error handler instance

    Returns:
        Decorator function
    """

    def decorator(func: Callable) -> Callable:
        return ErrorMiddleware(error_handler).wrap_script_handler(func)

    return decorator
