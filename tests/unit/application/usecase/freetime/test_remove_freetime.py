"""Unit tests for the free time use cases."""

from datetime import timedelta

import pytest

from chute.application.usecase.freetime import (
    Interval,
    ListFreetimeRequest,
    ListFreetimeUseCase,
    RemoveFreetimeRequest,
    RemoveFreetimeUseCase,
    SubmitFreetimeRequest,
    SubmitFreetimeUseCase,
)
from chute.domain.error import NotFoundError
from chute.domain.service import CredentialService
from chute.domain.value import utcnow
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

START = (utcnow() + timedelta(days=1)).replace(microsecond=0)


class TestRemoveFreetimeUseCase:
    """Tests for RemoveFreetimeUseCase."""

    @pytest.mark.asyncio
    async def test_remove_one_then_all(self, unit_env):
        # Arrange
        credentials = await unit_env.get(CredentialService)
        submit = await unit_env.get(SubmitFreetimeUseCase)
        remove = await unit_env.get(RemoveFreetimeUseCase)
        list_freetime = await unit_env.get(ListFreetimeUseCase)
        ana, _ = await credentials.register("secret", "ana")
        await submit.execute(
            SubmitFreetimeRequest(
                actor_id=ana.id,
                intervals=[
                    Interval(start=START, end=START + timedelta(hours=2)),
                    Interval(start=START + timedelta(days=1), end=START + timedelta(days=1, hours=2)),
                    Interval(start=START + timedelta(days=2), end=START + timedelta(days=2, hours=2)),
                ],
            )
        )

        # Act
        one = await remove.execute(RemoveFreetimeRequest(actor_id=ana.id, start=START))
        rest = await remove.execute(RemoveFreetimeRequest(actor_id=ana.id))

        # Assert
        assert one.deleted == 1
        assert rest.deleted == 2
        remaining = await list_freetime.execute(ListFreetimeRequest(profile_id=ana.id))
        assert remaining.freetimes == []


class TestListFreetimeUseCase:
    @pytest.mark.asyncio
    async def test_unknown_profile(self, unit_env):
        # Arrange
        list_freetime = await unit_env.get(ListFreetimeUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await list_freetime.execute(ListFreetimeRequest(profile_id=12))
