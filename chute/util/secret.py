"""Secret digests and session tokens.

Two schemes exist, selected by credential kind:

- anonymous: the secret is a machine-generated device fingerprint and there is no
  username to look it up by, so the digest must be deterministic and doubles as the
  lookup key (salted SHA-512, hex encoded).
- named: the secret is a human password; the stored value is a bcrypt hash which can
  only be compared against, never looked up by.
"""

import hashlib
import secrets
from abc import ABC, abstractmethod

import bcrypt

from chute.config import AuthSettings
from chute.domain.value import CredentialKind


# bcrypt only reads the first 72 bytes and bcrypt>=5 rejects anything longer
MAX_PASSWORD_BYTES = 72


class SecretScheme(ABC):
    """Derive and check the stored digest for one credential kind."""

    @abstractmethod
    def digest(self, secret: str) -> str:
        pass

    @abstractmethod
    def verify(self, secret: str, digest: str) -> bool:
        pass


class AnonymousScheme(SecretScheme):
    """Salted SHA-512 of a device secret."""

    def __init__(self, salt: str) -> None:
        self.salt = salt

    def digest(self, secret: str) -> str:
        return hashlib.sha512((self.salt + secret).encode("utf-8")).hexdigest()

    def verify(self, secret: str, digest: str) -> bool:
        return secrets.compare_digest(self.digest(secret), digest)


class NamedScheme(SecretScheme):
    """bcrypt hash of a password."""

    def __init__(self, rounds: int) -> None:
        self.rounds = rounds

    def digest(self, secret: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(secret.encode("utf-8"), salt).decode("utf-8")

    def verify(self, secret: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(secret.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False


def build_schemes(settings: AuthSettings) -> dict[CredentialKind, SecretScheme]:
    """Build the scheme table keyed by credential kind.

    Args:
        settings: Authentication settings

    Returns:
        One scheme per credential kind
    """
    return {
        CredentialKind.ANONYMOUS: AnonymousScheme(settings.anonymous_salt),
        CredentialKind.NAMED: NamedScheme(settings.bcrypt_rounds),
    }


def new_token(length: int) -> str:
    """Return a random URL-safe token of exactly ``length`` characters."""
    # token_urlsafe(n) yields ceil(4n/3) characters
    return secrets.token_urlsafe(length)[:length]
