"""In-memory credential repository for testing."""

from typing import Optional

from chute.domain.error import ConflictError
from chute.domain.model import Credential
from chute.domain.repository import CredentialRepository
from chute.domain.value import (
    CredentialId,
    CredentialKind,
    ProfileId,
    SessionToken,
    Username,
)

from .base import InMemoryRepository


class InMemoryCredentialRepository(InMemoryRepository, CredentialRepository):
    """In-memory implementation of CredentialRepository for testing."""

    def __init__(self) -> None:
        self._credentials: dict[CredentialId, Credential] = {}
        self._last_id = 0

    async def next_id(self) -> CredentialId:
        self._last_id += 1
        return CredentialId(self._last_id)

    async def find_by_username(self, username: Username) -> Optional[Credential]:
        for credential in self._credentials.values():
            if credential.username == username:
                return credential
        return None

    async def find_anonymous_by_digest(self, digest: str) -> Optional[Credential]:
        for credential in self._credentials.values():
            if credential.kind is CredentialKind.ANONYMOUS and credential.digest == digest:
                return credential
        return None

    async def find_by_token(self, token: SessionToken) -> Optional[Credential]:
        for credential in self._credentials.values():
            if credential.token == token:
                return credential
        return None

    async def find_by_profile(self, profile_id: ProfileId) -> list[Credential]:
        return [
            c
            for _, c in sorted(self._credentials.items())
            if c.profile_id == profile_id
        ]

    async def save(self, credential: Credential) -> Credential:
        """Save a credential (create or update).

        Raises:
            ConflictError: If username, anonymous digest or token is taken
        """
        for other in self._credentials.values():
            if other.id == credential.id:
                continue
            if credential.username is not None and other.username == credential.username:
                raise ConflictError("username already taken")
            if (
                credential.kind is CredentialKind.ANONYMOUS
                and other.kind is CredentialKind.ANONYMOUS
                and other.digest == credential.digest
            ):
                raise ConflictError("anonymous credential already exists")
            if credential.token is not None and other.token == credential.token:
                raise ConflictError("token already in use")
        self._credentials[credential.id] = credential
        return credential
