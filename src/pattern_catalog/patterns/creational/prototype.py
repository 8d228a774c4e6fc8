"""Prototype: clone an immutable value object."""
from enum import Enum
from typing import Any

from pydantic import Field

from pattern_catalog.domain.base.value_object import ValueObject


class Gender(str, Enum):
    FEMALE = "FEMALE"
    MALE = "MALE"
    OTHER = "OTHER"


class Personal(ValueObject):
    """Personal data record used as the prototype."""

    name: str
    age: int = Field(ge=0)
    country: str
    gender: Gender

    def clone(self) -> "Personal":
        """Return an equal but distinct copy."""
        return self.model_copy()


def get_object_signature(obj: Any) -> str:
    """Identify an object as ``<module>.<class>@<hex id>``."""
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}@{id(obj):x}"


def demo() -> None:
    personal = Personal(name="Emanuel", age=20, country="Brazil", gender=Gender.MALE)
    personal_clone = personal.clone()

    print(f"personal printing with values {personal!r} and with object {get_object_signature(personal)}")
    print(
        f"personalClone printing with values {personal_clone!r} "
        f"and with object {get_object_signature(personal_clone)}"
    )
