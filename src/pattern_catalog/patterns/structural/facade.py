"""Facade: hide a preference store behind a small user repository."""
from typing import Dict, Optional

from pattern_catalog.domain.base.value_object import ValueObject
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

USER_KEY = "USER_KEY"


class ComplexSystemStore:
    """Key/value store with an explicit commit step."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        print(f"Reading data from file: {file_path}")
        self._cache: Dict[str, str] = {}

    def store(self, key: str, payload: str) -> None:
        self._cache[key] = payload

    def read(self, key: str) -> str:
        return self._cache.get(key, "")

    def commit(self) -> None:
        print(f"Storing cached data: {self._cache} to file: {self.file_path}")


class User(ValueObject):
    login: str


class UserRepository:
    """Facade over ComplexSystemStore for saving and loading the user."""

    def __init__(self, store_path: Optional[str] = None):
        if store_path is None:
            from pattern_catalog.config import get_config_manager

            store_path = get_config_manager().get_facade_config().store_path

        self._system_preferences = ComplexSystemStore(store_path)

    def save(self, user: User) -> None:
        self._system_preferences.store(USER_KEY, user.login)
        self._system_preferences.commit()
        logger.debug("User saved", login=user.login)

    def find_first(self) -> User:
        return User(login=self._system_preferences.read(USER_KEY))


def demo() -> None:
    user_repository = UserRepository()
    user = User(login="dbacinski")
    user_repository.save(user)
    result_user = user_repository.find_first()
    print(f"Found stored user: {result_user!r}")
