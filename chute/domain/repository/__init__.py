"""Repository interfaces for the chute domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from chute.domain.repository.credential import CredentialRepository
from chute.domain.repository.freetime import FreetimeRepository
from chute.domain.repository.invite import InviteRepository
from chute.domain.repository.photo import PhotoRepository
from chute.domain.repository.profile import ProfileRepository
from chute.domain.repository.transaction import TransactionManager

__all__ = [
    "CredentialRepository",
    "FreetimeRepository",
    "InviteRepository",
    "PhotoRepository",
    "ProfileRepository",
    "TransactionManager",
]
