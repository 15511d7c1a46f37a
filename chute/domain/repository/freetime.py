"""Freetime repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from chute.domain.model.freetime import Freetime
from chute.domain.value import FreetimeId, ProfileId


class FreetimeRepository(ABC):
    """Repository for Freetime intervals, unique on (profile, start)."""

    @abstractmethod
    async def next_id(self) -> FreetimeId:
        """Reserve the id for a new interval."""
        pass

    @abstractmethod
    async def find(self, profile_id: ProfileId, start: datetime) -> Optional[Freetime]:
        """Find the interval a profile has at ``start``.

        Returns:
            The interval if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, freetime: Freetime) -> Freetime:
        """Save an interval (create or update by id).

        Raises:
            ConflictError: If another interval exists at (profile, start)
        """
        pass

    @abstractmethod
    async def delete(self, profile_id: ProfileId, start: datetime) -> int:
        """Delete the interval at (profile, start).

        Returns:
            Number of rows deleted (0 or 1)
        """
        pass

    @abstractmethod
    async def delete_all(self, profile_id: ProfileId) -> int:
        """Delete every interval of a profile.

        Returns:
            Number of rows deleted
        """
        pass

    @abstractmethod
    async def find_starting_after(
        self, profile_id: ProfileId, since: datetime
    ) -> list[Freetime]:
        """List a profile's intervals starting after ``since``, ascending by start."""
        pass

    @abstractmethod
    async def find_profiles_free_at(self, at: datetime) -> list[ProfileId]:
        """Distinct profiles with an interval strictly containing ``at``.

        Returns:
            Profile ids in ascending order
        """
        pass
