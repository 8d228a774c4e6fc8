"""Singleton: one process-wide printer driver and one lazily created dummy."""
import threading
from typing import Optional

from pattern_catalog.infrastructure.patterns import get_singleton


class PrinterDriver:
    """
    Printer driver shared by the whole process.

    Every construction returns the same object; it is created, and announces
    itself, on first use.
    """

    _instance: Optional["PrinterDriver"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "PrinterDriver":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    print(f"Initializing with object: {instance}")
                    cls._instance = instance
        return cls._instance

    def print(self) -> "PrinterDriver":
        print(f"Printing with object: {self}")
        return self


class Dummy:
    def __init__(self):
        print("Init dummy object!")

    def print(self) -> None:
        print(f"Print object {self}")


class DummySingleton:
    """Lazy, thread-safe holder of the single Dummy."""

    @staticmethod
    def instance() -> Dummy:
        return get_singleton(Dummy)


def demo() -> None:
    print("Start")
    PrinterDriver().print()
    PrinterDriver().print()

    dummy_first = DummySingleton.instance()
    dummy_second = DummySingleton.instance()
    dummy_first.print()
    dummy_second.print()
    print(f"Same dummy instance: {dummy_first is dummy_second}")
