"""PostgreSQL repository implementations."""

from chute.persistence.repository.credential import PostgresCredentialRepository
from chute.persistence.repository.freetime import PostgresFreetimeRepository
from chute.persistence.repository.invite import PostgresInviteRepository
from chute.persistence.repository.photo import PostgresPhotoRepository
from chute.persistence.repository.profile import PostgresProfileRepository

__all__ = [
    "PostgresCredentialRepository",
    "PostgresFreetimeRepository",
    "PostgresInviteRepository",
    "PostgresPhotoRepository",
    "PostgresProfileRepository",
]
