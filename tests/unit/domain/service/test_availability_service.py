"""Unit tests for AvailabilityService."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from chute.domain.error import NotFoundError, ValidationError
from chute.domain.repository import FreetimeRepository
from chute.domain.service import (
    AvailabilityService,
    CredentialService,
    ProfileService,
    matches_tags,
)
from chute.domain.value import FlagId, UtypeId
from chute.persistence.repository.inmemory import DEFAULT_FLAGS, DEFAULT_UTYPES
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

START = datetime(2030, 6, 1, 9, 0)
END = datetime(2030, 6, 1, 17, 0)


async def new_profile(env, username: str, utype_ids=(1,), flag_ids=()):
    credentials = await env.get(CredentialService)
    profiles = await env.get(ProfileService)
    profile, _ = await credentials.register("secret", username)
    return await profiles.update_profile(
        profile.id, None, None, None, list(utype_ids), list(flag_ids)
    )


class TestNewInterval:
    """Tests for declaring free time."""

    @pytest.mark.asyncio
    async def test_new_interval_is_stored(self, unit_env):
        """A new start creates a new interval."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")

        # Act
        freetime = await service.new_interval(profile.id, START, END)

        # Assert
        assert freetime.profile_id == profile.id
        assert (freetime.start, freetime.end) == (START, END)

    @pytest.mark.asyncio
    async def test_same_start_moves_end(self, unit_env):
        """Submitting an existing start again replaces its end, keeping the id."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        repo = await unit_env.get(FreetimeRepository)
        profile = await new_profile(unit_env, "ana")
        first = await service.new_interval(profile.id, START, END)

        # Act
        second = await service.new_interval(profile.id, START, END + timedelta(hours=2))

        # Assert
        assert second.id == first.id
        stored = await repo.find(profile.id, START)
        assert stored.end == END + timedelta(hours=2)

    @pytest.mark.asyncio
    async def test_same_start_different_profiles_are_independent(self, unit_env):
        """The uniqueness of a start is per profile."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        ana = await new_profile(unit_env, "ana")
        ben = await new_profile(unit_env, "ben")

        # Act
        first = await service.new_interval(ana.id, START, END)
        second = await service.new_interval(ben.id, START, END)

        # Assert
        assert first.id != second.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("end", [START, START - timedelta(minutes=1)])
    async def test_end_not_after_start_raises(self, unit_env, end):
        """Empty and inverted intervals are rejected."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.new_interval(profile.id, START, end)


class TestSubmitIntervals:
    """Tests for submitting several intervals at once."""

    @pytest.mark.asyncio
    async def test_one_invalid_interval_stores_nothing(self, unit_env):
        """Validation happens before the first write."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        repo = await unit_env.get(FreetimeRepository)
        profile = await new_profile(unit_env, "ana")

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.submit_intervals(
                profile.id, [(START, END), (END, START)]
            )
        assert await repo.find(profile.id, START) is None

    @pytest.mark.asyncio
    async def test_submit_returns_every_interval(self, unit_env):
        """Each submitted interval comes back stored."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")
        next_day = timedelta(days=1)

        # Act
        stored = await service.submit_intervals(
            profile.id, [(START, END), (START + next_day, END + next_day)]
        )

        # Assert
        assert [f.start for f in stored] == [START, START + next_day]


class TestUpdateAndRemove:
    """Tests for editing and deleting free time."""

    @pytest.mark.asyncio
    async def test_update_interval_moves_end(self, unit_env):
        """The interval at a start gets a new end."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")
        await service.new_interval(profile.id, START, END)

        # Act
        updated = await service.update_interval(
            profile.id, START, END - timedelta(hours=4)
        )

        # Assert
        assert updated.end == END - timedelta(hours=4)

    @pytest.mark.asyncio
    async def test_update_missing_interval_raises(self, unit_env):
        """Updating a start with no interval is not found."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.update_interval(profile.id, START, END)

    @pytest.mark.asyncio
    async def test_remove_interval_counts_deletions(self, unit_env):
        """Removing reports how many intervals went away."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")
        await service.new_interval(profile.id, START, END)

        # Act
        first = await service.remove_interval(profile.id, START)
        second = await service.remove_interval(profile.id, START)

        # Assert
        assert (first, second) == (1, 0)

    @pytest.mark.asyncio
    async def test_remove_all_only_touches_own_intervals(self, unit_env):
        """Removing all free time leaves other profiles alone."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        repo = await unit_env.get(FreetimeRepository)
        ana = await new_profile(unit_env, "ana")
        ben = await new_profile(unit_env, "ben")
        await service.new_interval(ana.id, START, END)
        await service.new_interval(ana.id, START + timedelta(days=1), END + timedelta(days=1))
        await service.new_interval(ben.id, START, END)

        # Act
        deleted = await service.remove_all(ana.id)

        # Assert
        assert deleted == 2
        assert await repo.find(ben.id, START) is not None


class TestListUpcoming:
    """Tests for list_upcoming method."""

    @pytest.mark.asyncio
    async def test_lists_from_start_of_today_ascending(self, unit_env):
        """Intervals that started yesterday are hidden; the rest sort by start."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")
        now = datetime(2030, 6, 10, 15, 30)
        yesterday = datetime(2030, 6, 9, 10, 0)
        this_morning = datetime(2030, 6, 10, 8, 0)
        next_week = datetime(2030, 6, 17, 8, 0)
        for start in (next_week, yesterday, this_morning):
            await service.new_interval(profile.id, start, start + timedelta(hours=3))

        # Act
        upcoming = await service.list_upcoming(profile.id, now=now)

        # Assert
        assert [f.start for f in upcoming] == [this_morning, next_week]


class TestSearchAvailable:
    """Tests for the availability search."""

    @pytest.mark.asyncio
    async def test_aware_and_naive_times_mix(self, unit_env):
        """Offset-aware input is compared as UTC against naive stored times."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")
        await service.new_interval(profile.id, START.replace(tzinfo=UTC), END)

        # Act
        naive = await service.search_available(START + timedelta(hours=1))
        aware = await service.search_available(
            datetime(2030, 6, 1, 12, tzinfo=timezone(timedelta(hours=2)))
        )

        # Assert
        assert [p.id for p in naive] == [profile.id]
        assert [p.id for p in aware] == [profile.id]

    @pytest.mark.asyncio
    async def test_boundaries_are_exclusive(self, unit_env):
        """A profile is free strictly between start and end."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")
        await service.new_interval(profile.id, START, END)

        # Act
        at_start = await service.search_available(START)
        inside = await service.search_available(START + timedelta(minutes=1))
        at_end = await service.search_available(END)

        # Assert
        assert at_start == []
        assert [p.id for p in inside] == [profile.id]
        assert at_end == []

    @pytest.mark.asyncio
    async def test_overlapping_intervals_list_profile_once(self, unit_env):
        """A profile appears once however many of its intervals match."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        profile = await new_profile(unit_env, "ana")
        await service.new_interval(profile.id, START, END)
        await service.new_interval(profile.id, START + timedelta(hours=1), END)

        # Act
        found = await service.search_available(START + timedelta(hours=2))

        # Assert
        assert [p.id for p in found] == [profile.id]

    @pytest.mark.asyncio
    async def test_utypes_are_ored_and_flags_anded(self, unit_env):
        """Any requested utype suffices; every requested flag is required."""
        # Arrange
        service = await unit_env.get(AvailabilityService)
        model = await new_profile(unit_env, "model", utype_ids=[1], flag_ids=[2, 4])
        photographer = await new_profile(unit_env, "photo", utype_ids=[2], flag_ids=[4])
        stylist = await new_profile(unit_env, "stylist", utype_ids=[4], flag_ids=[2, 4])
        for profile in (model, photographer, stylist):
            await service.new_interval(profile.id, START, END)
        at = START + timedelta(hours=1)

        # Act
        either_type = await service.search_available(at, utype_ids=[1, 2])
        both_flags = await service.search_available(at, flag_ids=[2, 4])
        combined = await service.search_available(at, utype_ids=[1, 2], flag_ids=[2, 4])

        # Assert
        assert [p.id for p in either_type] == [model.id, photographer.id]
        assert [p.id for p in both_flags] == [model.id, stylist.id]
        assert [p.id for p in combined] == [model.id]


class TestMatchesTags:
    """Tests for the tag filter on its own."""

    @pytest.mark.asyncio
    async def test_empty_filters_match_everyone(self, unit_env):
        # Arrange
        profile = await new_profile(unit_env, "ana")

        # Act & Assert
        assert matches_tags(profile, [], [])

    @pytest.mark.asyncio
    async def test_profile_without_flags_fails_flag_filter(self, unit_env):
        # Arrange
        profile = await new_profile(unit_env, "ana", utype_ids=[DEFAULT_UTYPES[0].id])

        # Act & Assert
        assert not matches_tags(profile, [], [DEFAULT_FLAGS[0].id])
        assert matches_tags(profile, [UtypeId(1), UtypeId(3)], [])
        assert not matches_tags(profile, [UtypeId(3)], [FlagId(1)])
