"""Unit tests for the in-memory transaction scope."""

from datetime import datetime

import pytest

from chute.domain.model import Freetime, Profile
from chute.domain.value import FreetimeId, ProfileId
from chute.persistence.repository.inmemory import (
    InMemoryFreetimeRepository,
    InMemoryProfileRepository,
    InMemoryTransactionManager,
)


class TestAtomic:
    """Tests for InMemoryTransactionManager.atomic."""

    @pytest.mark.asyncio
    async def test_exception_restores_every_repository(self):
        """Writes made inside a failed block are undone in all repositories."""
        # Arrange
        profiles = InMemoryProfileRepository()
        freetimes = InMemoryFreetimeRepository()
        transactions = InMemoryTransactionManager([profiles, freetimes])

        # Act
        with pytest.raises(RuntimeError):
            async with transactions.atomic():
                profile_id = await profiles.next_id()
                await profiles.save(Profile(id=profile_id, folder="f"))
                await freetimes.save(
                    Freetime(
                        id=FreetimeId(1),
                        profile_id=profile_id,
                        start=datetime(2030, 1, 1, 9),
                        end=datetime(2030, 1, 1, 10),
                    )
                )
                raise RuntimeError("boom")

        # Assert
        assert await profiles.find_by_id(ProfileId(1)) is None
        assert await freetimes.find(ProfileId(1), datetime(2030, 1, 1, 9)) is None
        assert await profiles.next_id() == 1

    @pytest.mark.asyncio
    async def test_success_keeps_writes(self):
        # Arrange
        profiles = InMemoryProfileRepository()
        transactions = InMemoryTransactionManager([profiles])

        # Act
        async with transactions.atomic():
            await profiles.save(Profile(id=ProfileId(1), folder="f"))

        # Assert
        assert await profiles.find_by_id(ProfileId(1)) is not None
