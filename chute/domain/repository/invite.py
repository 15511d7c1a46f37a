"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, Optional

from chute.domain.model.invite import Attendee, Invite, Message
from chute.domain.value import AttendeeStatus, InviteId, MessageId, ProfileId


class InviteRepository(ABC):
    """Repository for the Invite aggregate: invite rows, attendees and messages."""

    @abstractmethod
    async def next_invite_id(self) -> InviteId:
        """Reserve the id for a new invite."""
        pass

    @abstractmethod
    async def next_message_id(self) -> MessageId:
        """Reserve the id for a new message; ids grow with creation order."""
        pass

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite row by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Save an invite row (create or update)."""
        pass

    @abstractmethod
    async def deactivate(self, invite_id: InviteId) -> None:
        """Set active=false in a single statement. Repeating it is harmless."""
        pass

    @abstractmethod
    async def add_attendees(
        self, invite_id: InviteId, profile_ids: Iterable[ProfileId]
    ) -> list[ProfileId]:
        """Add Pending attendee rows, silently skipping existing attendees.

        Args:
            invite_id: Invite to extend
            profile_ids: Profiles to add

        Returns:
            Profiles actually added
        """
        pass

    @abstractmethod
    async def find_attendees(self, invite_id: InviteId) -> list[Attendee]:
        """List attendees in the order they were added."""
        pass

    @abstractmethod
    async def update_attendee_status(
        self,
        invite_id: InviteId,
        profile_id: ProfileId,
        status: AttendeeStatus,
        expected: AttendeeStatus,
    ) -> int:
        """Set one attendee's status if it currently equals ``expected``.

        Returns:
            Number of rows updated (0 if no such attendee or status moved on)
        """
        pass

    @abstractmethod
    async def add_message(self, message: Message) -> Message:
        """Append a message."""
        pass

    @abstractmethod
    async def find_messages(self, invite_id: InviteId) -> list[Message]:
        """List an invite's messages ascending by id."""
        pass

    @abstractmethod
    async def find_by_organizer(
        self, organizer_id: ProfileId, since: datetime
    ) -> list[Invite]:
        """Invites organized by a profile starting after ``since``, oldest created first."""
        pass

    @abstractmethod
    async def find_by_attendee(
        self, profile_id: ProfileId, status: AttendeeStatus, since: datetime
    ) -> list[Invite]:
        """Invites where the profile attends with ``status``, starting after ``since``."""
        pass
