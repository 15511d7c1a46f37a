"""Domain value objects for chute."""

from chute.domain.value.identifiers import (
    CredentialId,
    FlagId,
    FreetimeId,
    InviteId,
    MessageId,
    PhotoId,
    ProfileId,
    UtypeId,
)
from chute.domain.value.types import (
    AttendeeStatus,
    CredentialKind,
    SessionToken,
    Username,
)
from chute.domain.value.time import UtcDateTime, to_naive_utc, utcnow

__all__ = [
    # Identifiers
    "ProfileId",
    "CredentialId",
    "FreetimeId",
    "PhotoId",
    "InviteId",
    "MessageId",
    "UtypeId",
    "FlagId",
    # Types
    "AttendeeStatus",
    "CredentialKind",
    "SessionToken",
    "Username",
    # Time
    "UtcDateTime",
    "to_naive_utc",
    "utcnow",
]
