"""PostgreSQL implementation of Profile repository."""

from collections import defaultdict
from typing import Iterable, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from chute.domain.model import Flag, Profile, Utype
from chute.domain.repository import ProfileRepository
from chute.domain.value import FlagId, ProfileId, UtypeId
from chute.persistence.errors import storage_errors
from chute.persistence.mappers import (
    profile_to_dict,
    row_to_flag,
    row_to_profile,
    row_to_utype,
)
from chute.persistence.tables import (
    flags_table,
    profile_flags_table,
    profile_utypes_table,
    profiles_id_seq,
    profiles_table,
    utypes_table,
)


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> ProfileId:
        async with storage_errors("profile.next_id"):
            return ProfileId(await self.session.scalar(profiles_id_seq.next_value()))

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID.

        Args:
            profile_id: Profile ID to look up

        Returns:
            Profile if found, None otherwise
        """
        profiles = await self.find_by_ids([profile_id])
        return profiles[0] if profiles else None

    async def find_by_ids(self, profile_ids: Iterable[ProfileId]) -> list[Profile]:
        """Load profiles and their tags in three queries, ordered by id."""
        ids = list(set(profile_ids))
        if not ids:
            return []

        async with storage_errors("profile.find_by_ids"):
            result = await self.session.execute(
                select(profiles_table)
                .where(profiles_table.c.id.in_(ids))
                .order_by(profiles_table.c.id)
            )
            rows = [dict(row) for row in result.mappings().all()]

            utype_result = await self.session.execute(
                select(profile_utypes_table.c.profile_id, utypes_table)
                .select_from(
                    profile_utypes_table.join(
                        utypes_table, profile_utypes_table.c.utype_id == utypes_table.c.id
                    )
                )
                .where(profile_utypes_table.c.profile_id.in_(ids))
                .order_by(utypes_table.c.id)
            )
            flag_result = await self.session.execute(
                select(profile_flags_table.c.profile_id, flags_table)
                .select_from(
                    profile_flags_table.join(
                        flags_table, profile_flags_table.c.flag_id == flags_table.c.id
                    )
                )
                .where(profile_flags_table.c.profile_id.in_(ids))
                .order_by(flags_table.c.id)
            )

        utypes: dict[int, list[Utype]] = defaultdict(list)
        for row in utype_result.mappings().all():
            utypes[row["profile_id"]].append(row_to_utype(dict(row)))
        flags: dict[int, list[Flag]] = defaultdict(list)
        for row in flag_result.mappings().all():
            flags[row["profile_id"]].append(row_to_flag(dict(row)))

        return [
            row_to_profile(row, utypes[row["id"]], flags[row["id"]]) for row in rows
        ]

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update) and replace its tag links.

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        profile_dict = profile_to_dict(profile)

        async with storage_errors("profile.save"):
            exists = await self.session.scalar(
                select(profiles_table.c.id).where(profiles_table.c.id == profile.id)
            )
            if exists is not None:
                await self.session.execute(
                    update(profiles_table)
                    .where(profiles_table.c.id == profile.id)
                    .values(**profile_dict)
                )
            else:
                await self.session.execute(insert(profiles_table).values(**profile_dict))

            await self.session.execute(
                delete(profile_utypes_table).where(
                    profile_utypes_table.c.profile_id == profile.id
                )
            )
            await self.session.execute(
                delete(profile_flags_table).where(
                    profile_flags_table.c.profile_id == profile.id
                )
            )
            if profile.utypes:
                await self.session.execute(
                    insert(profile_utypes_table),
                    [{"profile_id": profile.id, "utype_id": u.id} for u in profile.utypes],
                )
            if profile.flags:
                await self.session.execute(
                    insert(profile_flags_table),
                    [{"profile_id": profile.id, "flag_id": f.id} for f in profile.flags],
                )
            await self.session.flush()
        return profile

    async def list_utypes(self) -> list[Utype]:
        result = await self.session.execute(
            select(utypes_table).order_by(utypes_table.c.id)
        )
        return [row_to_utype(dict(row)) for row in result.mappings().all()]

    async def list_flags(self) -> list[Flag]:
        result = await self.session.execute(
            select(flags_table).order_by(flags_table.c.id)
        )
        return [row_to_flag(dict(row)) for row in result.mappings().all()]

    async def find_utypes(self, utype_ids: Iterable[UtypeId]) -> list[Utype]:
        ids = list(utype_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(utypes_table)
            .where(utypes_table.c.id.in_(ids))
            .order_by(utypes_table.c.id)
        )
        return [row_to_utype(dict(row)) for row in result.mappings().all()]

    async def find_flags(self, flag_ids: Iterable[FlagId]) -> list[Flag]:
        ids = list(flag_ids)
        if not ids:
            return []
        result = await self.session.execute(
            select(flags_table).where(flags_table.c.id.in_(ids)).order_by(flags_table.c.id)
        )
        return [row_to_flag(dict(row)) for row in result.mappings().all()]
