"""In-memory repository implementations for testing."""

from .base import InMemoryRepository, InMemoryTransactionManager
from .credential import InMemoryCredentialRepository
from .freetime import InMemoryFreetimeRepository
from .invite import InMemoryInviteRepository
from .photo import InMemoryPhotoRepository
from .profile import DEFAULT_FLAGS, DEFAULT_UTYPES, InMemoryProfileRepository

__all__ = [
    "DEFAULT_FLAGS",
    "DEFAULT_UTYPES",
    "InMemoryCredentialRepository",
    "InMemoryFreetimeRepository",
    "InMemoryInviteRepository",
    "InMemoryPhotoRepository",
    "InMemoryProfileRepository",
    "InMemoryRepository",
    "InMemoryTransactionManager",
]
