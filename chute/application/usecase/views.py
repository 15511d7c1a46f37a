"""Response models shared by several use cases.

Digests never leave the domain; credentials are shown by kind, username and
display name only.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from chute.domain.model import Credential, Freetime, InviteAggregate, Profile
from chute.domain.value import AttendeeStatus, CredentialKind


class TagInfo(BaseModel):
    """Utype or flag."""

    id: int
    name: str


class ProfileInfo(BaseModel):
    """Public profile."""

    id: int
    name: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    folder: str
    utypes: list[TagInfo]
    flags: list[TagInfo]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileInfo":
        return cls(
            id=profile.id,
            name=profile.name,
            email=profile.email,
            phone=profile.phone,
            folder=profile.folder,
            utypes=[TagInfo(id=u.id, name=u.name) for u in profile.utypes],
            flags=[TagInfo(id=f.id, name=f.name) for f in profile.flags],
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class CredentialInfo(BaseModel):
    """Credential without its digest or token."""

    id: int
    kind: CredentialKind
    username: Optional[str]
    display_name: str
    authorized: bool
    created_at: datetime
    last_auth_at: Optional[datetime]

    @classmethod
    def from_domain(cls, credential: Credential) -> "CredentialInfo":
        return cls(
            id=credential.id,
            kind=credential.kind,
            username=credential.username.root if credential.username else None,
            display_name=credential.display_name,
            authorized=credential.authorized,
            created_at=credential.created_at,
            last_auth_at=credential.last_auth_at,
        )


class FreetimeInfo(BaseModel):
    """Free interval."""

    id: int
    profile_id: int
    start: datetime
    end: datetime

    @classmethod
    def from_domain(cls, freetime: Freetime) -> "FreetimeInfo":
        return cls(
            id=freetime.id,
            profile_id=freetime.profile_id,
            start=freetime.start,
            end=freetime.end,
        )


class AttendeeInfo(BaseModel):
    profile: ProfileInfo
    status: AttendeeStatus


class MessageInfo(BaseModel):
    id: int
    author: ProfileInfo
    body: str
    photo_id: Optional[int]
    sent_at: datetime


class InviteInfo(BaseModel):
    """Invite with organizer, attendees and messages."""

    id: int
    active: bool
    start: datetime
    end: Optional[datetime]
    place: str
    created_at: datetime
    organizer: ProfileInfo
    attendees: list[AttendeeInfo]
    messages: list[MessageInfo]

    @classmethod
    def from_domain(cls, aggregate: InviteAggregate) -> "InviteInfo":
        invite = aggregate.invite
        return cls(
            id=invite.id,
            active=invite.active,
            start=invite.start,
            end=invite.end,
            place=invite.place,
            created_at=invite.created_at,
            organizer=ProfileInfo.from_domain(aggregate.organizer),
            attendees=[
                AttendeeInfo(profile=ProfileInfo.from_domain(a.profile), status=a.status)
                for a in aggregate.attendees
            ],
            messages=[
                MessageInfo(
                    id=m.message.id,
                    author=ProfileInfo.from_domain(m.author),
                    body=m.message.body,
                    photo_id=m.message.photo_id,
                    sent_at=m.message.sent_at,
                )
                for m in aggregate.messages
            ],
        )
