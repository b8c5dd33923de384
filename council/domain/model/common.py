"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def _evolve(self, **changes):
        """Return a validated copy with ``changes`` applied.

        Unlike ``model_copy(update=...)`` the result goes through validation,
        so model invariants hold for every derived instance.
        """
        return type(self).model_validate({**self.model_dump(), **changes})
