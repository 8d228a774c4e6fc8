"""Protection proxy: guard file reads behind a password."""
from abc import ABC, abstractmethod

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

PASSWORD = "secret"


class File(ABC):
    @abstractmethod
    def read(self, name: str) -> None:
        """Read the named file."""


class NormalFile(File):
    def read(self, name: str) -> None:
        print(f"Reading file: {name}")


class SecuredFile(File):
    """Proxy that only delegates reads once the right password is set."""

    def __init__(self, normal_file: File):
        self._normal_file = normal_file
        self.password = ""

    def read(self, name: str) -> None:
        if self.password == PASSWORD:
            print(f"Password is correct: {self.password}")
            self._normal_file.read(name)
        else:
            logger.debug("Denied file read", file=name)
            print("Incorrect password. Access denied!")


def demo() -> None:
    secured_file = SecuredFile(NormalFile())
    secured_file.read("readme.md")

    secured_file.password = PASSWORD
    secured_file.read("readme.md")
