"""Thread-safe registry of lazily created singleton instances."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Holds at most one instance per class.

    Instances are created on first request under a lock, so concurrent
    first accesses still construct the class exactly once.
    """

    _instance: Optional["SingletonRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()
        self.logger = get_logger(__name__)

    @classmethod
    def get_instance(cls) -> "SingletonRegistry":
        """Get the process-wide registry."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it if needed.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, used only on first creation
            **kwargs: Constructor keyword arguments, used only on first creation

        Returns:
            The singleton instance
        """
        instance = self._instances.get(singleton_class)
        if instance is not None:
            return instance

        with self._lock:
            if singleton_class not in self._instances:
                self.logger.debug("Creating singleton instance", singleton=singleton_class.__name__)
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
            return self._instances[singleton_class]

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance of ``singleton_class`` exists."""
        with self._lock:
            return singleton_class in self._instances

    def reset(self, singleton_class: Optional[Type] = None) -> None:
        """Forget one singleton instance, or all of them."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)
