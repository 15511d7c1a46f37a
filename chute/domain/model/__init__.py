"""Domain model entities for chute."""

from chute.domain.model.credential import Actor, Credential
from chute.domain.model.freetime import Freetime
from chute.domain.model.invite import (
    Attendee,
    AttendeeView,
    Invite,
    InviteAggregate,
    Message,
    MessageView,
)
from chute.domain.model.photo import Photo
from chute.domain.model.profile import Flag, Profile, Utype

__all__ = [
    "Actor",
    "Attendee",
    "AttendeeView",
    "Credential",
    "Flag",
    "Freetime",
    "Invite",
    "InviteAggregate",
    "Message",
    "MessageView",
    "Photo",
    "Profile",
    "Utype",
]
