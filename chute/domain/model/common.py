"""Base model for Chute's entities and views."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic model shared by every entity.

    Entities are never mutated in place; services derive a changed copy with
    ``evolve`` and hand it to a repository.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    def evolve(self, **changes: Any) -> Self:
        """Copy with the given fields replaced."""
        return self.model_copy(update=changes)
