"""Unit tests for RegisterUseCase and LoginUseCase."""

import pytest

from chute.application.usecase.auth import (
    AuthenticateRequest,
    AuthenticateUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from chute.domain.error import UnauthorizedError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_working_token(self, unit_env):
        """The token from registration authenticates immediately."""
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        authenticate_use_case = await unit_env.get(AuthenticateUseCase)

        # Act
        response = await register_use_case.execute(
            RegisterRequest(username="ana", secret="correct horse")
        )

        # Assert
        actor = await authenticate_use_case.execute(
            AuthenticateRequest(token=response.token)
        )
        assert actor.profile.id == response.profile.id

    @pytest.mark.asyncio
    async def test_login_response_carries_profile(self, unit_env):
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        registered = await register_use_case.execute(RegisterRequest(secret="device-1"))

        # Act
        response = await login_use_case.execute(LoginRequest(secret="device-1"))

        # Assert
        assert response.profile_id == registered.profile.id
        assert response.token != registered.token

    @pytest.mark.asyncio
    async def test_authenticate_without_token(self, unit_env):
        # Arrange
        authenticate_use_case = await unit_env.get(AuthenticateUseCase)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await authenticate_use_case.execute(AuthenticateRequest(token=None))
