"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Iterable, Optional

from chute.domain.model import Attendee, Invite, Message
from chute.domain.repository import InviteRepository
from chute.domain.value import AttendeeStatus, InviteId, MessageId, ProfileId

from .base import InMemoryRepository


class InMemoryInviteRepository(InMemoryRepository, InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: dict[InviteId, Invite] = {}
        # Lists keep insertion order
        self._attendees: list[Attendee] = []
        self._messages: list[Message] = []
        self._last_invite_id = 0
        self._last_message_id = 0

    async def next_invite_id(self) -> InviteId:
        self._last_invite_id += 1
        return InviteId(self._last_invite_id)

    async def next_message_id(self) -> MessageId:
        self._last_message_id += 1
        return MessageId(self._last_message_id)

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        return self._invites.get(invite_id)

    async def save(self, invite: Invite) -> Invite:
        self._invites[invite.id] = invite
        return invite

    async def deactivate(self, invite_id: InviteId) -> None:
        invite = self._invites.get(invite_id)
        if invite is not None:
            self._invites[invite_id] = invite.evolve(active=False)

    async def add_attendees(
        self, invite_id: InviteId, profile_ids: Iterable[ProfileId]
    ) -> list[ProfileId]:
        present = {a.profile_id for a in self._attendees if a.invite_id == invite_id}
        added = []
        for profile_id in profile_ids:
            if profile_id in present:
                continue
            self._attendees.append(Attendee(invite_id=invite_id, profile_id=profile_id))
            present.add(profile_id)
            added.append(profile_id)
        return added

    async def find_attendees(self, invite_id: InviteId) -> list[Attendee]:
        return [a for a in self._attendees if a.invite_id == invite_id]

    async def update_attendee_status(
        self,
        invite_id: InviteId,
        profile_id: ProfileId,
        status: AttendeeStatus,
        expected: AttendeeStatus,
    ) -> int:
        for i, attendee in enumerate(self._attendees):
            if (
                attendee.invite_id == invite_id
                and attendee.profile_id == profile_id
                and attendee.status is expected
            ):
                self._attendees[i] = attendee.evolve(status=status)
                return 1
        return 0

    async def add_message(self, message: Message) -> Message:
        self._messages.append(message)
        return message

    async def find_messages(self, invite_id: InviteId) -> list[Message]:
        return sorted(
            (m for m in self._messages if m.invite_id == invite_id), key=lambda m: m.id
        )

    async def find_by_organizer(
        self, organizer_id: ProfileId, since: datetime
    ) -> list[Invite]:
        return sorted(
            (
                i
                for i in self._invites.values()
                if i.organizer_id == organizer_id and i.start > since
            ),
            key=lambda i: (i.created_at, i.id),
        )

    async def find_by_attendee(
        self, profile_id: ProfileId, status: AttendeeStatus, since: datetime
    ) -> list[Invite]:
        invite_ids = {
            a.invite_id
            for a in self._attendees
            if a.profile_id == profile_id and a.status is status
        }
        return sorted(
            (
                self._invites[iid]
                for iid in invite_ids
                if iid in self._invites and self._invites[iid].start > since
            ),
            key=lambda i: (i.created_at, i.id),
        )
