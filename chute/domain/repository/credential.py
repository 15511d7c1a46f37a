"""Credential repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from chute.domain.model.credential import Credential
from chute.domain.value import CredentialId, ProfileId, SessionToken, Username


class CredentialRepository(ABC):
    """Repository for Credential entities.

    Implementations must enforce uniqueness of username, of anonymous digest and
    of token, raising ConflictError on violation.
    """

    @abstractmethod
    async def next_id(self) -> CredentialId:
        """Reserve the id for a new credential."""
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Credential]:
        """Find the named credential with this username.

        Args:
            username: Login name

        Returns:
            The credential if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_anonymous_by_digest(self, digest: str) -> Optional[Credential]:
        """Find an anonymous credential by its deterministic digest.

        Args:
            digest: Salted digest of the device secret

        Returns:
            The credential if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: SessionToken) -> Optional[Credential]:
        """Find the credential currently holding a session token.

        Args:
            token: Session token

        Returns:
            The credential if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_profile(self, profile_id: ProfileId) -> list[Credential]:
        """List every credential bound to a profile, oldest first."""
        pass

    @abstractmethod
    async def save(self, credential: Credential) -> Credential:
        """Save a credential (create or update).

        Args:
            credential: The credential to save

        Returns:
            The saved credential

        Raises:
            ConflictError: If username, digest or token is already taken
        """
        pass
