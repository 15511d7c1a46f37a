"""Photo repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from chute.domain.model.photo import Photo
from chute.domain.value import PhotoId, ProfileId


class PhotoRepository(ABC):
    """Read access to photo metadata for ownership checks."""

    @abstractmethod
    async def find_owned(self, photo_id: PhotoId, owner_id: ProfileId) -> Optional[Photo]:
        """Find a photo only if it belongs to ``owner_id``.

        Args:
            photo_id: Photo identifier
            owner_id: Profile expected to own it

        Returns:
            The photo if it exists and is owned by the profile, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, photo: Photo) -> Photo:
        """Record photo metadata after the blob has been stored."""
        pass
