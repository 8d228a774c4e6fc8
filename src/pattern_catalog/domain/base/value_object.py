"""Base value object - foundation for immutable example data."""
from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for immutable value objects.

    Value objects compare by value, hash by value and can be copied with
    ``model_copy``. Any attempt to assign a field raises pydantic's
    ``ValidationError``.
    """
    model_config = ConfigDict(
        frozen=True,  # Value objects are immutable
        validate_default=True,
        arbitrary_types_allowed=True
    )
