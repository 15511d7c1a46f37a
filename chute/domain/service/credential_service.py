"""Credential domain service."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from chute.config import AuthSettings
from chute.domain.error import (
    ConflictError,
    ForbiddenError,
    UnauthorizedError,
    ValidationError,
)
from chute.domain.model.credential import Actor, Credential
from chute.domain.model.profile import Profile
from chute.domain.repository import (
    CredentialRepository,
    ProfileRepository,
    TransactionManager,
)
from chute.domain.value import (
    CredentialKind,
    ProfileId,
    SessionToken,
    Username,
    UtypeId,
    utcnow,
)
from chute.util.secret import (
    MAX_PASSWORD_BYTES,
    SecretScheme,
    build_schemes,
    new_token,
)

from .base import Service

# New profiles start as "Model" until they say otherwise
DEFAULT_UTYPE_ID = UtypeId(1)


class CredentialService(Service):
    """Domain service for registration, login and session tokens."""

    def __init__(
        self,
        credential_repository: CredentialRepository,
        profile_repository: ProfileRepository,
        transactions: TransactionManager,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize credential service.

        Args:
            credential_repository: Credential repository
            profile_repository: Profile repository
            transactions: Transaction scope for multi-row writes
            auth_settings: Authentication settings
        """
        self.credential_repository = credential_repository
        self.profile_repository = profile_repository
        self.transactions = transactions
        self.auth_settings = auth_settings
        self.schemes: dict[CredentialKind, SecretScheme] = build_schemes(auth_settings)

    async def register(
        self, secret: str, username: str | None = None, display_name: str = ""
    ) -> tuple[Profile, Credential]:
        """Create a new profile with its first credential.

        Args:
            secret: Password (named) or device secret (anonymous)
            username: Optional login name; absent means an anonymous credential
            display_name: Label for the credential

        Returns:
            The new profile and its logged-in credential

        Raises:
            ValidationError: If the secret or username is malformed, or a
                password is longer than bcrypt accepts
            ConflictError: If a matching credential already exists
        """
        kind, name = self._parse(secret, username)
        with logfire.span("credential_service.register", kind=kind.value):
            if await self._lookup(kind, secret, name) is not None:
                logfire.warn("Credential already exists", kind=kind.value)
                raise ConflictError("credential already exists")

            now = utcnow()
            utypes = await self.profile_repository.find_utypes([DEFAULT_UTYPE_ID])
            async with self.transactions.atomic():
                profile = Profile(
                    id=await self.profile_repository.next_id(),
                    folder=new_token(self.auth_settings.token_length),
                    utypes=utypes,
                    created_at=now,
                    updated_at=now,
                )
                await self.profile_repository.save(profile)
                credential = await self._create(
                    profile.id, kind, secret, name, display_name, True, now
                )

            logfire.info(
                "Profile registered",
                profile_id=profile.id,
                credential_id=credential.id,
                kind=kind.value,
            )
            return profile, credential

    async def login(self, secret: str, username: str | None = None) -> Credential:
        """Verify a secret and issue a fresh session token.

        Any previous token of the credential stops working.

        Raises:
            UnauthorizedError: If no credential matches or the secret is wrong
        """
        try:
            kind, name = self._parse(secret, username)
        except ValidationError:
            raise UnauthorizedError("login failure")

        with logfire.span("credential_service.login", kind=kind.value):
            credential = await self._lookup(kind, secret, name)
            if credential is None or not self.schemes[kind].verify(
                secret, credential.digest
            ):
                logfire.warn("Login failed", kind=kind.value)
                raise UnauthorizedError("login failure")
            if not credential.authorized:
                logfire.warn("Login with unauthorized credential", credential_id=credential.id)
                raise UnauthorizedError("login failure")

            now = utcnow()
            rotated = credential.evolve(
                token=SessionToken(new_token(self.auth_settings.token_length)),
                last_auth_at=now,
                updated_at=now,
            )
            saved = await self.credential_repository.save(rotated)
            logfire.info(
                "Logged in", credential_id=saved.id, profile_id=saved.profile_id
            )
            return saved

    async def logout(self, token: str) -> None:
        """Clear the session token.

        Raises:
            UnauthorizedError: If the token is unknown
        """
        with logfire.span("credential_service.logout"):
            credential = await self._find_by_token(token)
            await self.credential_repository.save(
                credential.evolve(token=None, updated_at=utcnow())
            )
            logfire.info("Logged out", credential_id=credential.id)

    async def authenticate(self, token: str | None) -> Actor:
        """Resolve a session token to the acting profile.

        Raises:
            UnauthorizedError: If the token is empty, unknown or its credential
                is not authorized
        """
        with logfire.span("credential_service.authenticate"):
            credential = await self._find_by_token(token)
            if not credential.authorized:
                raise UnauthorizedError()
            profile = await self.profile_repository.find_by_id(credential.profile_id)
            if profile is None:
                logfire.error(
                    "Credential points at missing profile",
                    credential_id=credential.id,
                    profile_id=credential.profile_id,
                )
                raise UnauthorizedError()
            return Actor(profile=profile, credential=credential)

    async def add_or_update(
        self,
        actor_id: ProfileId,
        secret: str,
        username: str | None,
        display_name: str,
        authorized: bool,
    ) -> Credential:
        """Attach a credential to the actor's profile or update one it owns.

        An anonymous credential belonging to another profile is claimed by the
        actor (the device has moved); a named one is not.

        Raises:
            ValidationError: If the secret or username is malformed
            ForbiddenError: If the username belongs to another profile
        """
        kind, name = self._parse(secret, username)
        with logfire.span(
            "credential_service.add_or_update", actor_id=actor_id, kind=kind.value
        ):
            existing = await self._lookup(kind, secret, name)
            now = utcnow()

            if existing is None:
                credential = await self._create(
                    actor_id, kind, secret, name, display_name, authorized, now
                )
                logfire.info("Credential added", credential_id=credential.id)
                return credential

            if existing.profile_id != actor_id and existing.username is not None:
                logfire.warn(
                    "Credential owned by another profile",
                    credential_id=existing.id,
                    actor_id=actor_id,
                )
                raise ForbiddenError("credential", str(existing.id), str(actor_id))

            changes = {
                "profile_id": actor_id,
                "display_name": display_name,
                "authorized": authorized,
                "updated_at": now,
            }
            if kind is CredentialKind.NAMED:
                changes["digest"] = self.schemes[kind].digest(secret)
            saved = await self.credential_repository.save(existing.evolve(**changes))
            logfire.info("Credential updated", credential_id=saved.id)
            return saved

    async def list_for_profile(self, profile_id: ProfileId) -> list[Credential]:
        """List the credentials of a profile."""
        return await self.credential_repository.find_by_profile(profile_id)

    def _parse(
        self, secret: str, username: str | None
    ) -> tuple[CredentialKind, Optional[Username]]:
        if not secret:
            raise ValidationError("secret must not be empty")
        if username is None:
            return CredentialKind.ANONYMOUS, None
        if len(secret.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"password must not be longer than {MAX_PASSWORD_BYTES} bytes"
            )
        try:
            return CredentialKind.NAMED, Username(username)
        except PydanticValidationError as e:
            raise ValidationError(f"invalid username: {username!r}") from e

    async def _lookup(
        self, kind: CredentialKind, secret: str, username: Optional[Username]
    ) -> Optional[Credential]:
        if kind is CredentialKind.NAMED:
            return await self.credential_repository.find_by_username(username)
        digest = self.schemes[kind].digest(secret)
        return await self.credential_repository.find_anonymous_by_digest(digest)

    async def _find_by_token(self, token: str | None) -> Credential:
        if not token:
            raise UnauthorizedError()
        try:
            session_token = SessionToken(token)
        except PydanticValidationError:
            raise UnauthorizedError()
        credential = await self.credential_repository.find_by_token(session_token)
        if credential is None:
            raise UnauthorizedError()
        return credential

    async def _create(
        self,
        profile_id: ProfileId,
        kind: CredentialKind,
        secret: str,
        username: Optional[Username],
        display_name: str,
        authorized: bool,
        now: datetime,
    ) -> Credential:
        credential = Credential(
            id=await self.credential_repository.next_id(),
            profile_id=profile_id,
            kind=kind,
            username=username,
            digest=self.schemes[kind].digest(secret),
            display_name=display_name,
            token=SessionToken(new_token(self.auth_settings.token_length)),
            authorized=authorized,
            created_at=now,
            updated_at=now,
            last_auth_at=now,
        )
        return await self.credential_repository.save(credential)
