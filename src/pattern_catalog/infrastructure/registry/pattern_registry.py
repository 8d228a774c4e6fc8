"""Registry of catalogue patterns and their demonstrations."""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional

from pattern_catalog.domain.core.exceptions import ResourceNotFoundError
from pattern_catalog.infrastructure.logging.logger import get_logger


class PatternCategory(str, Enum):
    """GoF pattern families."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternNotFoundError(ResourceNotFoundError):
    """Raised when a pattern name is not in the catalogue."""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        super().__init__("Pattern", name)
        self.available = available or []


@dataclass(frozen=True)
class PatternEntry:
    """Catalogue entry for one pattern example."""

    name: str
    category: PatternCategory
    summary: str
    demo: Callable[[], None]
    module: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "category": self.category.value,
            "summary": self.summary,
            "module": self.module,
        }


class PatternRegistry:
    """Registry for pattern examples."""

    def __init__(self):
        """Initialize pattern registry."""
        self._patterns: Dict[str, PatternEntry] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, entry: PatternEntry) -> None:
        """
        Register a pattern example.

        Args:
            entry: Catalogue entry; its name is the lookup key
        """
        with self._lock:
            if entry.name in self._patterns:
                self.logger.warning(f"Overriding existing pattern: {entry.name}")

            self._patterns[entry.name] = entry
            self.logger.debug(f"Registered pattern: {entry.name}")

    def get(self, name: str) -> PatternEntry:
        """
        Get a registered pattern.

        Args:
            name: Pattern name

        Returns:
            Catalogue entry

        Raises:
            PatternNotFoundError: If the pattern is not registered
        """
        with self._lock:
            if name not in self._patterns:
                raise PatternNotFoundError(name, sorted(self._patterns))
            return self._patterns[name]

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[PatternEntry]:
        """
        List registered patterns sorted by name.

        Args:
            category: Only return patterns of this family

        Returns:
            Catalogue entries
        """
        with self._lock:
            entries = list(self._patterns.values())

        if category is not None:
            entries = [e for e in entries if e.category == PatternCategory(category)]
        return sorted(entries, key=lambda e: e.name)

    def is_registered(self, name: str) -> bool:
        """Check if a pattern is registered."""
        with self._lock:
            return name in self._patterns

    def clear(self) -> None:
        """Remove every registration."""
        with self._lock:
            self._patterns.clear()


# Global registry instance
_pattern_registry: Optional[PatternRegistry] = None
_registry_lock = threading.Lock()


def get_pattern_registry() -> PatternRegistry:
    """
    Get the global pattern registry instance.

    Returns:
        Global pattern registry, populated with the whole catalogue
    """
    global _pattern_registry

    if _pattern_registry is None:
        with _registry_lock:
            if _pattern_registry is None:
                registry = PatternRegistry()
                _register_default_patterns(registry)
                _pattern_registry = registry

    return _pattern_registry


def _register_default_patterns(registry: PatternRegistry) -> None:
    """Register every pattern shipped with the catalogue."""
    from pattern_catalog.patterns import CATALOGUE

    for name, category, summary, demo in CATALOGUE:
        registry.register(
            PatternEntry(
                name=name,
                category=PatternCategory(category),
                summary=summary,
                demo=demo,
                module=demo.__module__,
            )
        )
