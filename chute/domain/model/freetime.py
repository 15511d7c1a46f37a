"""Freetime entity."""

from datetime import datetime

from pydantic import Field, model_validator

from chute.domain.model.common import DomainModel
from chute.domain.value import FreetimeId, ProfileId, UtcDateTime, utcnow


class Freetime(DomainModel):
    """A span during which a profile is available for invitations.

    Unique in (profile_id, start), so an interval can be addressed and updated
    by its start without exposing the id. Accepting an invite does not consume
    free time; the owner adjusts it by hand.
    """

    id: FreetimeId
    profile_id: ProfileId
    start: UtcDateTime
    end: UtcDateTime
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def check_end_after_start(self) -> "Freetime":
        if not self.start < self.end:
            raise ValueError(f"{self.end} is not after {self.start}")
        return self

    def contains(self, at: datetime) -> bool:
        """Whether ``at`` falls strictly inside the interval."""
        return self.start < at < self.end
