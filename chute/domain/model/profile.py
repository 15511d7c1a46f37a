"""Profile aggregate root.

The profile is the account root: credentials, free time, photos and invites all
point at it by id.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from chute.domain.model.common import DomainModel
from chute.domain.value import FlagId, ProfileId, UtypeId, utcnow


class Utype(DomainModel):
    """Profile type, e.g. "Model" or "Photographer".

    A profile may carry several (a make-up artist might also model).
    """

    id: UtypeId
    name: str


class Flag(DomainModel):
    """Search flag a profile opts into."""

    id: FlagId
    name: str


class Profile(DomainModel):
    """Profile aggregate root."""

    id: ProfileId
    folder: str  # Random name of the profile's photo area
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    utypes: list[Utype] = Field(default_factory=list)
    flags: list[Flag] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def utype_ids(self) -> set[UtypeId]:
        return {utype.id for utype in self.utypes}

    @property
    def flag_ids(self) -> set[FlagId]:
        return {flag.id for flag in self.flags}
