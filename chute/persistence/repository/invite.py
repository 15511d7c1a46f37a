"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from chute.domain.model import Attendee, Invite, Message
from chute.domain.repository import InviteRepository
from chute.domain.value import AttendeeStatus, InviteId, MessageId, ProfileId
from chute.persistence.errors import storage_errors
from chute.persistence.mappers import (
    invite_to_dict,
    message_to_dict,
    row_to_attendee,
    row_to_invite,
    row_to_message,
)
from chute.persistence.tables import (
    attendees_table,
    invites_id_seq,
    invites_table,
    messages_id_seq,
    messages_table,
)


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_invite_id(self) -> InviteId:
        async with storage_errors("invite.next_invite_id"):
            return InviteId(await self.session.scalar(invites_id_seq.next_value()))

    async def next_message_id(self) -> MessageId:
        async with storage_errors("invite.next_message_id"):
            return MessageId(await self.session.scalar(messages_id_seq.next_value()))

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up

        Returns:
            Invite if found, None otherwise
        """
        async with storage_errors("invite.find_by_id"):
            result = await self.session.execute(
                select(invites_table).where(invites_table.c.id == invite_id)
            )
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update).

        Args:
            invite: Invite to save

        Returns:
            Saved invite
        """
        invite_dict = invite_to_dict(invite)

        async with storage_errors("invite.save"):
            exists = await self.session.scalar(
                select(invites_table.c.id).where(invites_table.c.id == invite.id)
            )
            if exists is not None:
                stmt = (
                    update(invites_table)
                    .where(invites_table.c.id == invite.id)
                    .values(**invite_dict)
                )
            else:
                stmt = insert(invites_table).values(**invite_dict)
            await self.session.execute(stmt)
            await self.session.flush()
        return invite

    async def deactivate(self, invite_id: InviteId) -> None:
        async with storage_errors("invite.deactivate"):
            await self.session.execute(
                update(invites_table)
                .where(invites_table.c.id == invite_id)
                .values(active=False)
            )

    async def add_attendees(
        self, invite_id: InviteId, profile_ids: Iterable[ProfileId]
    ) -> list[ProfileId]:
        """Insert Pending attendees, skipping profiles already attending.

        Positions continue after the current last attendee so listing keeps
        insertion order.
        """
        profile_ids = list(dict.fromkeys(profile_ids))
        if not profile_ids:
            return []

        async with storage_errors("invite.add_attendees"):
            last = await self.session.scalar(
                select(func.coalesce(func.max(attendees_table.c.position), 0)).where(
                    attendees_table.c.invite_id == invite_id
                )
            )
            stmt = (
                pg_insert(attendees_table)
                .values(
                    [
                        {
                            "invite_id": invite_id,
                            "profile_id": profile_id,
                            "status": AttendeeStatus.PENDING.value,
                            "position": last + offset,
                        }
                        for offset, profile_id in enumerate(profile_ids, start=1)
                    ]
                )
                .on_conflict_do_nothing(constraint="uq_attendee_invite_profile")
                .returning(attendees_table.c.profile_id)
            )
            result = await self.session.execute(stmt)
            added = set(result.scalars().all())
        return [ProfileId(pid) for pid in profile_ids if pid in added]

    async def find_attendees(self, invite_id: InviteId) -> list[Attendee]:
        async with storage_errors("invite.find_attendees"):
            result = await self.session.execute(
                select(attendees_table)
                .where(attendees_table.c.invite_id == invite_id)
                .order_by(attendees_table.c.position)
            )
        return [row_to_attendee(dict(row)) for row in result.mappings().all()]

    async def update_attendee_status(
        self,
        invite_id: InviteId,
        profile_id: ProfileId,
        status: AttendeeStatus,
        expected: AttendeeStatus,
    ) -> int:
        """Compare-and-set an attendee's status in one statement."""
        async with storage_errors("invite.update_attendee_status"):
            result = await self.session.execute(
                update(attendees_table)
                .where(
                    and_(
                        attendees_table.c.invite_id == invite_id,
                        attendees_table.c.profile_id == profile_id,
                        attendees_table.c.status == expected.value,
                    )
                )
                .values(status=status.value)
            )
        return result.rowcount

    async def add_message(self, message: Message) -> Message:
        async with storage_errors("invite.add_message"):
            await self.session.execute(
                insert(messages_table).values(**message_to_dict(message))
            )
            await self.session.flush()
        return message

    async def find_messages(self, invite_id: InviteId) -> list[Message]:
        async with storage_errors("invite.find_messages"):
            result = await self.session.execute(
                select(messages_table)
                .where(messages_table.c.invite_id == invite_id)
                .order_by(messages_table.c.id)
            )
        return [row_to_message(dict(row)) for row in result.mappings().all()]

    async def find_by_organizer(
        self, organizer_id: ProfileId, since: datetime
    ) -> list[Invite]:
        async with storage_errors("invite.find_by_organizer"):
            result = await self.session.execute(
                select(invites_table)
                .where(
                    and_(
                        invites_table.c.organizer_id == organizer_id,
                        invites_table.c.invitestart > since,
                    )
                )
                .order_by(invites_table.c.created_at, invites_table.c.id)
            )
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def find_by_attendee(
        self, profile_id: ProfileId, status: AttendeeStatus, since: datetime
    ) -> list[Invite]:
        async with storage_errors("invite.find_by_attendee"):
            result = await self.session.execute(
                select(invites_table)
                .select_from(
                    invites_table.join(
                        attendees_table,
                        invites_table.c.id == attendees_table.c.invite_id,
                    )
                )
                .where(
                    and_(
                        attendees_table.c.profile_id == profile_id,
                        attendees_table.c.status == status.value,
                        invites_table.c.invitestart > since,
                    )
                )
                .order_by(invites_table.c.created_at, invites_table.c.id)
            )
        return [row_to_invite(dict(row)) for row in result.mappings().all()]
