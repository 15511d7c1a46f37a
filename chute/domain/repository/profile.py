"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from chute.domain.model.profile import Flag, Profile, Utype
from chute.domain.value import FlagId, ProfileId, UtypeId


class ProfileRepository(ABC):
    """Repository for the Profile aggregate, including its tags."""

    @abstractmethod
    async def next_id(self) -> ProfileId:
        """Reserve the id for a new profile."""
        pass

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID.

        Args:
            profile_id: The profile's unique identifier

        Returns:
            The profile with its utypes and flags if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, profile_ids: Iterable[ProfileId]) -> list[Profile]:
        """Find several profiles in one call.

        Unknown ids are skipped; the result is ordered by id.

        Args:
            profile_ids: Profile identifiers

        Returns:
            Profiles found
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile and replace its tag links (create or update).

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass

    @abstractmethod
    async def list_utypes(self) -> list[Utype]:
        """List the utype catalog ordered by id."""
        pass

    @abstractmethod
    async def list_flags(self) -> list[Flag]:
        """List the flag catalog ordered by id."""
        pass

    @abstractmethod
    async def find_utypes(self, utype_ids: Iterable[UtypeId]) -> list[Utype]:
        """Resolve utype ids, skipping unknown ones."""
        pass

    @abstractmethod
    async def find_flags(self, flag_ids: Iterable[FlagId]) -> list[Flag]:
        """Resolve flag ids, skipping unknown ones."""
        pass
