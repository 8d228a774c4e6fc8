"""Base domain layer - shared kernel for all pattern examples."""

from .value_object import ValueObject

__all__ = ["ValueObject"]
