"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from chute.domain.model import (
    Attendee,
    Credential,
    Flag,
    Freetime,
    Invite,
    Message,
    Photo,
    Profile,
    Utype,
)
from chute.domain.value import (
    AttendeeStatus,
    CredentialId,
    CredentialKind,
    FlagId,
    FreetimeId,
    InviteId,
    MessageId,
    PhotoId,
    ProfileId,
    SessionToken,
    Username,
    UtypeId,
)


def row_to_utype(row: Dict[str, Any]) -> Utype:
    return Utype(id=UtypeId(row["id"]), name=row["name"])


def row_to_flag(row: Dict[str, Any]) -> Flag:
    return Flag(id=FlagId(row["id"]), name=row["name"])


def row_to_profile(
    row: Dict[str, Any], utypes: list[Utype], flags: list[Flag]
) -> Profile:
    """Convert database row and its tag rows to a Profile domain model.

    Args:
        row: Profile row as dict
        utypes: Utypes linked to the profile
        flags: Flags linked to the profile

    Returns:
        Profile domain model
    """
    return Profile(
        id=ProfileId(row["id"]),
        folder=row["folder"],
        name=row.get("name"),
        email=row.get("email"),
        phone=row.get("phone"),
        utypes=utypes,
        flags=flags,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to a profiles row; tag links are stored apart."""
    return profile.model_dump(exclude={"utypes", "flags"})


def row_to_credential(row: Dict[str, Any]) -> Credential:
    """Convert database row to Credential domain model.

    Args:
        row: Database row as dict

    Returns:
        Credential domain model
    """
    return Credential(
        id=CredentialId(row["id"]),
        profile_id=ProfileId(row["profile_id"]),
        kind=CredentialKind(row["kind"]),
        username=Username(row["username"]) if row.get("username") else None,
        digest=row["digest"],
        display_name=row.get("display_name") or "",
        token=SessionToken(row["token"]) if row.get("token") else None,
        authorized=row["authorized"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        last_auth_at=row.get("last_auth_at"),
    )


def credential_to_dict(credential: Credential) -> Dict[str, Any]:
    """Convert Credential domain model to database dict.

    Value objects are unwrapped by model_dump.
    """
    data = credential.model_dump()
    data["kind"] = credential.kind.value
    return data


def row_to_freetime(row: Dict[str, Any]) -> Freetime:
    return Freetime(
        id=FreetimeId(row["id"]),
        profile_id=ProfileId(row["profile_id"]),
        start=row["freestart"],
        end=row["freeend"],
        created_at=row["created_at"],
    )


def freetime_to_dict(freetime: Freetime) -> Dict[str, Any]:
    return {
        "id": freetime.id,
        "profile_id": freetime.profile_id,
        "freestart": freetime.start,
        "freeend": freetime.end,
        "created_at": freetime.created_at,
    }


def row_to_photo(row: Dict[str, Any]) -> Photo:
    return Photo(
        id=PhotoId(row["id"]),
        profile_id=ProfileId(row["profile_id"]),
        href=row["href"],
        caption=row.get("caption") or "",
        created_at=row["created_at"],
    )


def photo_to_dict(photo: Photo) -> Dict[str, Any]:
    return photo.model_dump()


def row_to_invite(row: Dict[str, Any]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: Database row as dict

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(row["id"]),
        organizer_id=ProfileId(row["organizer_id"]),
        active=row["active"],
        start=row["invitestart"],
        end=row.get("inviteend"),
        place=row.get("place") or "",
        created_at=row["created_at"],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    return {
        "id": invite.id,
        "organizer_id": invite.organizer_id,
        "active": invite.active,
        "invitestart": invite.start,
        "inviteend": invite.end,
        "place": invite.place,
        "created_at": invite.created_at,
    }


def row_to_attendee(row: Dict[str, Any]) -> Attendee:
    return Attendee(
        invite_id=InviteId(row["invite_id"]),
        profile_id=ProfileId(row["profile_id"]),
        status=AttendeeStatus(row["status"]),
    )


def row_to_message(row: Dict[str, Any]) -> Message:
    return Message(
        id=MessageId(row["id"]),
        invite_id=InviteId(row["invite_id"]),
        author_id=ProfileId(row["author_id"]),
        body=row.get("body") or "",
        photo_id=PhotoId(row["photo_id"]) if row.get("photo_id") is not None else None,
        sent_at=row["sent_at"],
    )


def message_to_dict(message: Message) -> Dict[str, Any]:
    return message.model_dump()
