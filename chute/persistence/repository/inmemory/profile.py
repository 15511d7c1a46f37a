"""In-memory profile repository for testing."""

from typing import Iterable, Optional

from chute.domain.model import Flag, Profile, Utype
from chute.domain.repository import ProfileRepository
from chute.domain.value import FlagId, ProfileId, UtypeId

from .base import InMemoryRepository

# Mirrors the catalog seeded by migration
DEFAULT_UTYPES = [
    Utype(id=UtypeId(1), name="Model"),
    Utype(id=UtypeId(2), name="Photographer"),
    Utype(id=UtypeId(3), name="Makeup Artist"),
    Utype(id=UtypeId(4), name="Stylist"),
]
DEFAULT_FLAGS = [
    Flag(id=FlagId(1), name="Nude"),
    Flag(id=FlagId(2), name="Paid only"),
    Flag(id=FlagId(3), name="Time for prints"),
    Flag(id=FlagId(4), name="Will travel"),
]


class InMemoryProfileRepository(InMemoryRepository, ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(
        self,
        utypes: Optional[list[Utype]] = None,
        flags: Optional[list[Flag]] = None,
    ) -> None:
        self._profiles: dict[ProfileId, Profile] = {}
        self._utypes = {u.id: u for u in (DEFAULT_UTYPES if utypes is None else utypes)}
        self._flags = {f.id: f for f in (DEFAULT_FLAGS if flags is None else flags)}
        self._last_id = 0

    async def next_id(self) -> ProfileId:
        self._last_id += 1
        return ProfileId(self._last_id)

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        return self._profiles.get(profile_id)

    async def find_by_ids(self, profile_ids: Iterable[ProfileId]) -> list[Profile]:
        return [
            self._profiles[pid]
            for pid in sorted(set(profile_ids))
            if pid in self._profiles
        ]

    async def save(self, profile: Profile) -> Profile:
        self._profiles[profile.id] = profile
        return profile

    async def list_utypes(self) -> list[Utype]:
        return [self._utypes[uid] for uid in sorted(self._utypes)]

    async def list_flags(self) -> list[Flag]:
        return [self._flags[fid] for fid in sorted(self._flags)]

    async def find_utypes(self, utype_ids: Iterable[UtypeId]) -> list[Utype]:
        return [self._utypes[uid] for uid in sorted(set(utype_ids)) if uid in self._utypes]

    async def find_flags(self, flag_ids: Iterable[FlagId]) -> list[Flag]:
        return [self._flags[fid] for fid in sorted(set(flag_ids)) if fid in self._flags]
