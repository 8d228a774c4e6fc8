"""Registry package for the pattern catalogue."""

from .pattern_registry import (
    PatternCategory,
    PatternEntry,
    PatternNotFoundError,
    PatternRegistry,
    get_pattern_registry,
)

__all__ = [
    "PatternCategory",
    "PatternEntry",
    "PatternNotFoundError",
    "PatternRegistry",
    "get_pattern_registry",
]
