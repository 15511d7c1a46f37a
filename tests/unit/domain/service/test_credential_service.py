"""Unit tests for CredentialService."""

import pytest

from chute.domain.error import (
    ConflictError,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from chute.domain.repository import CredentialRepository, ProfileRepository
from chute.domain.service import CredentialService
from chute.domain.value import CredentialKind, SessionToken
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_named_creates_profile_and_logs_in(self, unit_env):
        """Registering with a username should create a profile and a token."""
        # Arrange
        service = await unit_env.get(CredentialService)
        profile_repo = await unit_env.get(ProfileRepository)

        # Act
        profile, credential = await service.register("correct horse", "ana", "laptop")

        # Assert
        assert credential.kind == CredentialKind.NAMED
        assert credential.username.root == "ana"
        assert credential.profile_id == profile.id
        assert credential.display_name == "laptop"
        assert credential.authorized is True
        assert credential.token is not None
        assert len(credential.token.root) == 40
        assert credential.digest != "correct horse"
        assert await profile_repo.find_by_id(profile.id) == profile

    @pytest.mark.asyncio
    async def test_register_assigns_default_utype(self, unit_env):
        """New profiles should start out as a Model."""
        # Arrange
        service = await unit_env.get(CredentialService)

        # Act
        profile, _ = await service.register("correct horse", "ana")

        # Assert
        assert [u.name for u in profile.utypes] == ["Model"]
        assert profile.flags == []

    @pytest.mark.asyncio
    async def test_register_anonymous_has_no_username(self, unit_env):
        """Registering without a username should create an anonymous credential."""
        # Arrange
        service = await unit_env.get(CredentialService)

        # Act
        _, credential = await service.register("device-fingerprint-1")

        # Assert
        assert credential.kind == CredentialKind.ANONYMOUS
        assert credential.username is None

    @pytest.mark.asyncio
    async def test_register_gives_each_profile_its_own_folder(self, unit_env):
        """Every profile should get a distinct folder token."""
        # Arrange
        service = await unit_env.get(CredentialService)

        # Act
        first, _ = await service.register("secret", "ana")
        second, _ = await service.register("secret", "ben")

        # Assert
        assert first.id != second.id
        assert first.folder != second.folder

    @pytest.mark.asyncio
    async def test_register_taken_username_raises_conflict(self, unit_env):
        """A username can only be registered once."""
        # Arrange
        service = await unit_env.get(CredentialService)
        await service.register("secret", "ana")

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.register("other secret", "ana")

    @pytest.mark.asyncio
    async def test_register_same_device_twice_raises_conflict(self, unit_env):
        """An anonymous secret can only be registered once."""
        # Arrange
        service = await unit_env.get(CredentialService)
        await service.register("device-fingerprint-1")

        # Act & Assert
        with pytest.raises(ConflictError):
            await service.register("device-fingerprint-1")

    @pytest.mark.asyncio
    async def test_register_empty_secret_raises_validation(self, unit_env):
        """An empty secret is rejected before anything is written."""
        # Arrange
        service = await unit_env.get(CredentialService)
        profile_repo = await unit_env.get(ProfileRepository)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.register("", "ana")
        assert await profile_repo.find_by_ids([1]) == []

    @pytest.mark.asyncio
    async def test_register_username_with_whitespace_raises_validation(self, unit_env):
        """Usernames cannot contain whitespace."""
        # Arrange
        service = await unit_env.get(CredentialService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.register("secret", "ana banana")

    @pytest.mark.asyncio
    async def test_register_password_over_72_bytes_raises_validation(self, unit_env):
        """The cap counts UTF-8 bytes, not characters."""
        # Arrange
        service = await unit_env.get(CredentialService)

        # Act
        profile, _ = await service.register("x" * 72, "ana")

        # Assert
        assert profile.id == 1
        with pytest.raises(ValidationError):
            await service.register("\u00e9" * 37, "ben")


class TestLogin:
    """Tests for login method."""

    @pytest.mark.asyncio
    async def test_login_rotates_token(self, unit_env):
        """Logging in should issue a new token and invalidate the old one."""
        # Arrange
        service = await unit_env.get(CredentialService)
        _, registered = await service.register("correct horse", "ana")

        # Act
        logged_in = await service.login("correct horse", "ana")

        # Assert
        assert logged_in.id == registered.id
        assert logged_in.token != registered.token
        assert logged_in.last_auth_at is not None
        with pytest.raises(UnauthorizedError):
            await service.authenticate(registered.token.root)
        actor = await service.authenticate(logged_in.token.root)
        assert actor.credential.id == registered.id

    @pytest.mark.asyncio
    async def test_login_wrong_password_fails(self, unit_env):
        """A wrong password should be indistinguishable from an unknown user."""
        # Arrange
        service = await unit_env.get(CredentialService)
        await service.register("correct horse", "ana")

        # Act & Assert
        with pytest.raises(UnauthorizedError, match="login failure"):
            await service.login("battery staple", "ana")
        with pytest.raises(UnauthorizedError, match="login failure"):
            await service.login("correct horse", "nobody")

    @pytest.mark.asyncio
    async def test_login_anonymous_by_device_secret(self, unit_env):
        """Anonymous credentials are found by their secret alone."""
        # Arrange
        service = await unit_env.get(CredentialService)
        profile, _ = await service.register("device-fingerprint-1")

        # Act
        credential = await service.login("device-fingerprint-1")

        # Assert
        assert credential.profile_id == profile.id

    @pytest.mark.asyncio
    async def test_login_empty_secret_fails(self, unit_env):
        """An empty secret is a login failure, not a validation error."""
        # Arrange
        service = await unit_env.get(CredentialService)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await service.login("", "ana")

    @pytest.mark.asyncio
    async def test_login_unauthorized_credential_fails(self, unit_env):
        """A credential switched off by its owner cannot log in."""
        # Arrange
        service = await unit_env.get(CredentialService)
        profile, _ = await service.register("correct horse", "ana")
        await service.add_or_update(profile.id, "device-1", None, "old phone", False)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await service.login("device-1")


class TestLogout:
    """Tests for logout method."""

    @pytest.mark.asyncio
    async def test_logout_clears_token(self, unit_env):
        """After logout the token no longer authenticates."""
        # Arrange
        service = await unit_env.get(CredentialService)
        credential_repo = await unit_env.get(CredentialRepository)
        _, credential = await service.register("correct horse", "ana")

        # Act
        await service.logout(credential.token.root)

        # Assert
        with pytest.raises(UnauthorizedError):
            await service.authenticate(credential.token.root)
        stored = await credential_repo.find_by_username(credential.username)
        assert stored.token is None

    @pytest.mark.asyncio
    async def test_logout_unknown_token_raises(self, unit_env):
        """Logging out with a token nobody holds is unauthorized."""
        # Arrange
        service = await unit_env.get(CredentialService)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await service.logout("not-a-real-token")


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_authenticate_returns_actor(self, unit_env):
        """A valid token resolves to its profile and credential."""
        # Arrange
        service = await unit_env.get(CredentialService)
        profile, credential = await service.register("correct horse", "ana")

        # Act
        actor = await service.authenticate(credential.token.root)

        # Assert
        assert actor.profile == profile
        assert actor.credential.id == credential.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "x" * 300, "unknown"])
    async def test_authenticate_bad_token_raises(self, unit_env, token):
        """Missing, malformed or unknown tokens are rejected."""
        # Arrange
        service = await unit_env.get(CredentialService)

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await service.authenticate(token)

    @pytest.mark.asyncio
    async def test_authenticate_unauthorized_credential_raises(self, unit_env):
        """A credential marked unauthorized cannot authenticate requests."""
        # Arrange
        service = await unit_env.get(CredentialService)
        credential_repo = await unit_env.get(CredentialRepository)
        _, credential = await service.register("correct horse", "ana")
        await credential_repo.save(credential.evolve(authorized=False))

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await service.authenticate(credential.token.root)


class TestAddOrUpdate:
    """Tests for add_or_update method."""

    @pytest.mark.asyncio
    async def test_add_new_credential(self, unit_env):
        """A fresh credential is attached to the actor's profile."""
        # Arrange
        service = await unit_env.get(CredentialService)
        profile, _ = await service.register("correct horse", "ana")

        # Act
        credential = await service.add_or_update(
            profile.id, "device-1", None, "phone", True
        )

        # Assert
        assert credential.profile_id == profile.id
        assert credential.kind == CredentialKind.ANONYMOUS
        credentials = await service.list_for_profile(profile.id)
        assert [c.id for c in credentials] == [1, credential.id]

    @pytest.mark.asyncio
    async def test_update_own_credential_changes_password(self, unit_env):
        """Updating an owned named credential re-hashes the password."""
        # Arrange
        service = await unit_env.get(CredentialService)
        profile, _ = await service.register("correct horse", "ana")

        # Act
        await service.add_or_update(profile.id, "battery staple", "ana", "desk", True)

        # Assert
        with pytest.raises(UnauthorizedError):
            await service.login("correct horse", "ana")
        credential = await service.login("battery staple", "ana")
        assert credential.display_name == "desk"

    @pytest.mark.asyncio
    async def test_named_credential_of_other_profile_is_forbidden(self, unit_env):
        """A username owned by someone else cannot be taken over."""
        # Arrange
        service = await unit_env.get(CredentialService)
        await service.register("correct horse", "ana")
        ben, _ = await service.register("secret", "ben")

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.add_or_update(ben.id, "whatever", "ana", "", True)

    @pytest.mark.asyncio
    async def test_anonymous_credential_of_other_profile_is_claimed(self, unit_env):
        """A device secret known to another profile moves to the actor."""
        # Arrange
        service = await unit_env.get(CredentialService)
        ana, _ = await service.register("device-1")
        ben, _ = await service.register("secret", "ben")

        # Act
        credential = await service.add_or_update(ben.id, "device-1", None, "", True)

        # Assert
        assert credential.profile_id == ben.id
        assert await service.list_for_profile(ana.id) == []


class TestTokens:
    """Tests for token lookup helpers."""

    def test_session_token_rejects_empty(self):
        """Tokens must not be empty."""
        with pytest.raises(ValueError):
            SessionToken("")
