"""PostgreSQL implementation of Freetime repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from chute.domain.model import Freetime
from chute.domain.repository import FreetimeRepository
from chute.domain.value import FreetimeId, ProfileId
from chute.persistence.errors import storage_errors
from chute.persistence.mappers import freetime_to_dict, row_to_freetime
from chute.persistence.tables import freetimes_id_seq, freetimes_table


class PostgresFreetimeRepository(FreetimeRepository):
    """PostgreSQL implementation of FreetimeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> FreetimeId:
        async with storage_errors("freetime.next_id"):
            return FreetimeId(await self.session.scalar(freetimes_id_seq.next_value()))

    async def find(self, profile_id: ProfileId, start: datetime) -> Optional[Freetime]:
        async with storage_errors("freetime.find"):
            result = await self.session.execute(
                select(freetimes_table).where(
                    and_(
                        freetimes_table.c.profile_id == profile_id,
                        freetimes_table.c.freestart == start,
                    )
                )
            )
        row = result.mappings().first()
        return row_to_freetime(dict(row)) if row else None

    async def save(self, freetime: Freetime) -> Freetime:
        """Save an interval (create or update by id).

        Raises:
            ConflictError: If another interval exists at (profile, start)
        """
        freetime_dict = freetime_to_dict(freetime)

        async with storage_errors("freetime.save"):
            exists = await self.session.scalar(
                select(freetimes_table.c.id).where(freetimes_table.c.id == freetime.id)
            )
            if exists is not None:
                stmt = (
                    update(freetimes_table)
                    .where(freetimes_table.c.id == freetime.id)
                    .values(**freetime_dict)
                )
            else:
                stmt = insert(freetimes_table).values(**freetime_dict)
            await self.session.execute(stmt)
            await self.session.flush()
        return freetime

    async def delete(self, profile_id: ProfileId, start: datetime) -> int:
        async with storage_errors("freetime.delete"):
            result = await self.session.execute(
                delete(freetimes_table).where(
                    and_(
                        freetimes_table.c.profile_id == profile_id,
                        freetimes_table.c.freestart == start,
                    )
                )
            )
        return result.rowcount

    async def delete_all(self, profile_id: ProfileId) -> int:
        async with storage_errors("freetime.delete_all"):
            result = await self.session.execute(
                delete(freetimes_table).where(freetimes_table.c.profile_id == profile_id)
            )
        return result.rowcount

    async def find_starting_after(
        self, profile_id: ProfileId, since: datetime
    ) -> list[Freetime]:
        async with storage_errors("freetime.find_starting_after"):
            result = await self.session.execute(
                select(freetimes_table)
                .where(
                    and_(
                        freetimes_table.c.profile_id == profile_id,
                        freetimes_table.c.freestart > since,
                    )
                )
                .order_by(freetimes_table.c.freestart)
            )
        return [row_to_freetime(dict(row)) for row in result.mappings().all()]

    async def find_profiles_free_at(self, at: datetime) -> list[ProfileId]:
        """Distinct profiles with freestart < at < freeend, ascending."""
        async with storage_errors("freetime.find_profiles_free_at"):
            result = await self.session.execute(
                select(freetimes_table.c.profile_id)
                .where(
                    and_(
                        freetimes_table.c.freestart < at,
                        freetimes_table.c.freeend > at,
                    )
                )
                .distinct()
                .order_by(freetimes_table.c.profile_id)
            )
        return [ProfileId(profile_id) for profile_id in result.scalars().all()]
