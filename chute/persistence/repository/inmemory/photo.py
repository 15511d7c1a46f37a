"""In-memory photo repository for testing."""

from typing import Optional

from chute.domain.model import Photo
from chute.domain.repository import PhotoRepository
from chute.domain.value import PhotoId, ProfileId

from .base import InMemoryRepository


class InMemoryPhotoRepository(InMemoryRepository, PhotoRepository):
    """In-memory implementation of PhotoRepository for testing."""

    def __init__(self) -> None:
        self._photos: dict[PhotoId, Photo] = {}

    async def find_owned(
        self, photo_id: PhotoId, owner_id: ProfileId
    ) -> Optional[Photo]:
        photo = self._photos.get(photo_id)
        if photo is None or photo.profile_id != owner_id:
            return None
        return photo

    async def save(self, photo: Photo) -> Photo:
        self._photos[photo.id] = photo
        return photo
