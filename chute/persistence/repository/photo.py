"""PostgreSQL implementation of Photo repository."""

from typing import Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from chute.domain.model import Photo
from chute.domain.repository import PhotoRepository
from chute.domain.value import PhotoId, ProfileId
from chute.persistence.errors import storage_errors
from chute.persistence.mappers import photo_to_dict, row_to_photo
from chute.persistence.tables import photos_table


class PostgresPhotoRepository(PhotoRepository):
    """PostgreSQL implementation of PhotoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_owned(
        self, photo_id: PhotoId, owner_id: ProfileId
    ) -> Optional[Photo]:
        async with storage_errors("photo.find_owned"):
            result = await self.session.execute(
                select(photos_table).where(
                    and_(
                        photos_table.c.id == photo_id,
                        photos_table.c.profile_id == owner_id,
                    )
                )
            )
        row = result.mappings().first()
        return row_to_photo(dict(row)) if row else None

    async def save(self, photo: Photo) -> Photo:
        async with storage_errors("photo.save"):
            await self.session.execute(insert(photos_table).values(**photo_to_dict(photo)))
            await self.session.flush()
        return photo
