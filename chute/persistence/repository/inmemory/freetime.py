"""In-memory freetime repository for testing."""

from datetime import datetime
from typing import Optional

from chute.domain.error import ConflictError
from chute.domain.model import Freetime
from chute.domain.repository import FreetimeRepository
from chute.domain.value import FreetimeId, ProfileId

from .base import InMemoryRepository


class InMemoryFreetimeRepository(InMemoryRepository, FreetimeRepository):
    """In-memory implementation of FreetimeRepository for testing."""

    def __init__(self) -> None:
        self._freetimes: dict[FreetimeId, Freetime] = {}
        self._last_id = 0

    async def next_id(self) -> FreetimeId:
        self._last_id += 1
        return FreetimeId(self._last_id)

    async def find(self, profile_id: ProfileId, start: datetime) -> Optional[Freetime]:
        for freetime in self._freetimes.values():
            if freetime.profile_id == profile_id and freetime.start == start:
                return freetime
        return None

    async def save(self, freetime: Freetime) -> Freetime:
        """Save an interval (create or update by id).

        Raises:
            ConflictError: If another interval exists at (profile, start)
        """
        clash = await self.find(freetime.profile_id, freetime.start)
        if clash is not None and clash.id != freetime.id:
            raise ConflictError("freetime already exists at this start")
        self._freetimes[freetime.id] = freetime
        return freetime

    async def delete(self, profile_id: ProfileId, start: datetime) -> int:
        existing = await self.find(profile_id, start)
        if existing is None:
            return 0
        del self._freetimes[existing.id]
        return 1

    async def delete_all(self, profile_id: ProfileId) -> int:
        doomed = [f.id for f in self._freetimes.values() if f.profile_id == profile_id]
        for freetime_id in doomed:
            del self._freetimes[freetime_id]
        return len(doomed)

    async def find_starting_after(
        self, profile_id: ProfileId, since: datetime
    ) -> list[Freetime]:
        return sorted(
            (
                f
                for f in self._freetimes.values()
                if f.profile_id == profile_id and f.start > since
            ),
            key=lambda f: f.start,
        )

    async def find_profiles_free_at(self, at: datetime) -> list[ProfileId]:
        return sorted({f.profile_id for f in self._freetimes.values() if f.contains(at)})
