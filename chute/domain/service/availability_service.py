"""Availability domain service."""

from datetime import datetime, time
from typing import Iterable

import logfire

from chute.domain.error import ConflictError, ValidationError
from chute.domain.model.freetime import Freetime
from chute.domain.model.profile import Profile
from chute.domain.repository import (
    FreetimeRepository,
    ProfileRepository,
    TransactionManager,
)
from chute.domain.value import FlagId, ProfileId, UtypeId, to_naive_utc, utcnow

from .base import Service


def matches_tags(
    profile: Profile, utype_ids: Iterable[UtypeId], flag_ids: Iterable[FlagId]
) -> bool:
    """Whether a profile passes the search filters.

    Utypes are ORed (an empty filter matches everyone); flags are ANDed.
    """
    wanted_utypes = set(utype_ids)
    if wanted_utypes and not wanted_utypes & profile.utype_ids:
        return False
    return set(flag_ids) <= profile.flag_ids


def _valid_interval(start: datetime, end: datetime) -> tuple[datetime, datetime]:
    start, end = to_naive_utc(start), to_naive_utc(end)
    if not start < end:
        raise ValidationError(f"{end} is not after {start}")
    return start, end


class AvailabilityService(Service):
    """Domain service for free time and the availability search."""

    def __init__(
        self,
        freetime_repository: FreetimeRepository,
        profile_repository: ProfileRepository,
        transactions: TransactionManager,
    ) -> None:
        """Initialize availability service.

        Args:
            freetime_repository: Freetime repository
            profile_repository: Profile repository
            transactions: Transaction scope for multi-row writes
        """
        self.freetime_repository = freetime_repository
        self.profile_repository = profile_repository
        self.transactions = transactions

    async def new_interval(
        self, profile_id: ProfileId, start: datetime, end: datetime
    ) -> Freetime:
        """Declare free time, or move the end of the interval already at ``start``.

        Args:
            profile_id: Owning profile
            start: Interval start
            end: Interval end, strictly after start

        Returns:
            The stored interval

        Raises:
            ValidationError: If end is not after start
        """
        start, end = _valid_interval(start, end)
        with logfire.span(
            "availability_service.new_interval",
            profile_id=profile_id,
            start=start.isoformat(),
        ):
            existing = await self.freetime_repository.find(profile_id, start)
            if existing is not None:
                return await self._move_end(existing, end)

            freetime = Freetime(
                id=await self.freetime_repository.next_id(),
                profile_id=profile_id,
                start=start,
                end=end,
                created_at=utcnow(),
            )
            try:
                async with self.transactions.atomic():
                    saved = await self.freetime_repository.save(freetime)
            except ConflictError:
                # Inserted concurrently at the same (profile, start)
                existing = await self.freetime_repository.find(profile_id, start)
                if existing is None:
                    raise
                return await self._move_end(existing, end)

            logfire.info("Freetime created", profile_id=profile_id, freetime_id=saved.id)
            return saved

    async def submit_intervals(
        self, profile_id: ProfileId, intervals: list[tuple[datetime, datetime]]
    ) -> list[Freetime]:
        """Store several intervals; nothing is written unless all are valid.

        Raises:
            ValidationError: If any end is not after its start
        """
        for start, end in intervals:
            _valid_interval(start, end)
        async with self.transactions.atomic():
            return [
                await self.new_interval(profile_id, start, end)
                for start, end in intervals
            ]

    async def update_interval(
        self, profile_id: ProfileId, start: datetime, new_end: datetime
    ) -> Freetime:
        """Change the end of an existing interval.

        Raises:
            ValidationError: If new_end is not after start
            NotFoundError: If the profile has no interval at start
        """
        start, new_end = _valid_interval(start, new_end)
        existing = await self.freetime_repository.find(profile_id, start)
        existing = self._require(existing, "Freetime", start.isoformat())
        return await self._move_end(existing, new_end)

    async def remove_interval(self, profile_id: ProfileId, start: datetime) -> int:
        """Delete the interval at start; deleting nothing is not an error.

        Returns:
            Number of intervals deleted (0 or 1)
        """
        start = to_naive_utc(start)
        deleted = await self.freetime_repository.delete(profile_id, start)
        logfire.info(
            "Freetime removed",
            profile_id=profile_id,
            start=start.isoformat(),
            deleted=deleted,
        )
        return deleted

    async def remove_all(self, profile_id: ProfileId) -> int:
        """Delete every interval of a profile.

        Returns:
            Number of intervals deleted
        """
        deleted = await self.freetime_repository.delete_all(profile_id)
        logfire.info("All freetime removed", profile_id=profile_id, deleted=deleted)
        return deleted

    async def list_upcoming(
        self, profile_id: ProfileId, now: datetime | None = None
    ) -> list[Freetime]:
        """List intervals starting after the beginning of today, ascending.

        Args:
            profile_id: Profile whose free time to list
            now: Reference time (defaults to the current time)
        """
        midnight = datetime.combine(to_naive_utc(now or utcnow()).date(), time.min)
        return await self.freetime_repository.find_starting_after(profile_id, midnight)

    async def search_available(
        self,
        at: datetime,
        utype_ids: Iterable[UtypeId] = (),
        flag_ids: Iterable[FlagId] = (),
    ) -> list[Profile]:
        """Find profiles free at a point in time and matching the tag filters.

        Args:
            at: Instant that must fall strictly inside a free interval
            utype_ids: Any of these utypes (empty matches all)
            flag_ids: All of these flags

        Returns:
            Matching profiles ordered by id
        """
        at = to_naive_utc(at)
        utype_ids = list(utype_ids)
        flag_ids = list(flag_ids)
        with logfire.span(
            "availability_service.search_available",
            at=at.isoformat(),
            utype_ids=utype_ids,
            flag_ids=flag_ids,
        ):
            free_ids = await self.freetime_repository.find_profiles_free_at(at)
            profiles = await self.profile_repository.find_by_ids(free_ids)
            matches = [p for p in profiles if matches_tags(p, utype_ids, flag_ids)]
            logfire.info(
                "Availability search",
                free=len(free_ids),
                matched=len(matches),
            )
            return matches

    async def _move_end(self, freetime: Freetime, end: datetime) -> Freetime:
        saved = await self.freetime_repository.save(freetime.evolve(end=end))
        logfire.info(
            "Freetime updated", profile_id=saved.profile_id, freetime_id=saved.id
        )
        return saved
