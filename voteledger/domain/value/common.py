"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable, hashable and compared by value, so they can
    be used as dictionary keys (e.g. a content reference in a batch lookup).
    """

    model_config = ConfigDict(frozen=True)
