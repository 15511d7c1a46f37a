"""Invite aggregate.

An invite is a proposed shoot: an organizer asks attendees to meet at a place and
time, and everyone involved can post messages on it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from chute.domain.model.common import DomainModel
from chute.domain.model.profile import Profile
from chute.domain.value import (
    AttendeeStatus,
    InviteId,
    MessageId,
    PhotoId,
    ProfileId,
    UtcDateTime,
    utcnow,
)


class Invite(DomainModel):
    """Invite aggregate root.

    Business rules:
    - Start is required, end is optional but must follow start
    - The organizer is not an attendee
    - Cancelling (active=False) is terminal
    """

    id: InviteId
    organizer_id: ProfileId
    active: bool = True
    start: UtcDateTime
    end: Optional[UtcDateTime] = None
    place: str = ""
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def check_end_after_start(self) -> "Invite":
        if self.end is not None and not self.start < self.end:
            raise ValueError(f"{self.end} is not after {self.start}")
        return self


class Attendee(DomainModel):
    """A profile invited to an invite, with its answer."""

    invite_id: InviteId
    profile_id: ProfileId
    status: AttendeeStatus = AttendeeStatus.PENDING


class Message(DomainModel):
    """Immutable message visible to everyone involved in an invite."""

    id: MessageId
    invite_id: InviteId
    author_id: ProfileId
    body: str
    photo_id: Optional[PhotoId] = None
    sent_at: datetime = Field(default_factory=utcnow)


class AttendeeView(DomainModel):
    """Attendee with its full profile."""

    profile: Profile
    status: AttendeeStatus


class MessageView(DomainModel):
    """Message with its author's full profile."""

    message: Message
    author: Profile


class InviteAggregate(DomainModel):
    """Invite assembled with organizer, attendees and messages.

    Always built fresh from the store; attendees keep insertion order and
    messages ascend by id.
    """

    invite: Invite
    organizer: Profile
    attendees: list[AttendeeView]
    messages: list[MessageView]

    def status_of(self, profile_id: ProfileId) -> AttendeeStatus | None:
        for attendee in self.attendees:
            if attendee.profile.id == profile_id:
                return attendee.status
        return None
