"""Base class for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Base class for value objects that wrap a single primitive value.

    The model wraps a single value (accessed via .root) and dumps back to
    that primitive, so it serializes as a plain string or number.
    """

    model_config = ConfigDict(
        frozen=True,  # All value objects are immutable
    )

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
