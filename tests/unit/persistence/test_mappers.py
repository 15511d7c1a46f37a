"""Unit tests for row mappers."""

from datetime import datetime

from chute.domain.model import Credential, Freetime, Invite
from chute.domain.value import (
    AttendeeStatus,
    CredentialId,
    CredentialKind,
    FreetimeId,
    InviteId,
    ProfileId,
    SessionToken,
    Username,
)
from chute.persistence.mappers import (
    credential_to_dict,
    freetime_to_dict,
    invite_to_dict,
    row_to_attendee,
    row_to_credential,
    row_to_freetime,
    row_to_invite,
    row_to_message,
)

NOW = datetime(2030, 1, 2, 3, 4, 5)


class TestCredentialMapping:
    """Tests for credential rows."""

    def test_value_objects_are_unwrapped(self):
        """Rows hold plain strings for username, token and kind."""
        # Arrange
        credential = Credential(
            id=CredentialId(3),
            profile_id=ProfileId(1),
            kind=CredentialKind.NAMED,
            username=Username("ana"),
            digest="$2b$04$hash",
            token=SessionToken("tok"),
            created_at=NOW,
            updated_at=NOW,
        )

        # Act
        row = credential_to_dict(credential)

        # Assert
        assert row["username"] == "ana"
        assert row["token"] == "tok"
        assert row["kind"] == "named"
        assert row_to_credential(row) == credential

    def test_logged_out_anonymous_row(self):
        """Null username and token map back to None."""
        # Arrange
        row = {
            "id": 4,
            "profile_id": 1,
            "kind": "anonymous",
            "username": None,
            "digest": "abc",
            "display_name": None,
            "token": None,
            "authorized": False,
            "created_at": NOW,
            "updated_at": NOW,
            "last_auth_at": None,
        }

        # Act
        credential = row_to_credential(row)

        # Assert
        assert credential.kind == CredentialKind.ANONYMOUS
        assert credential.username is None
        assert credential.token is None
        assert credential.display_name == ""
        assert credential.authorized is False


class TestIntervalColumns:
    """Freetime and invite times live in prefixed columns."""

    def test_freetime_columns(self):
        # Arrange
        freetime = Freetime(
            id=FreetimeId(1),
            profile_id=ProfileId(2),
            start=NOW,
            end=NOW.replace(hour=9),
            created_at=NOW,
        )

        # Act
        row = freetime_to_dict(freetime)

        # Assert
        assert row["freestart"] == NOW
        assert row["freeend"] == NOW.replace(hour=9)
        assert row_to_freetime(row) == freetime

    def test_invite_columns(self):
        # Arrange
        invite = Invite(
            id=InviteId(1), organizer_id=ProfileId(2), start=NOW, created_at=NOW
        )

        # Act
        row = invite_to_dict(invite)

        # Assert
        assert row["invitestart"] == NOW
        assert row["inviteend"] is None
        assert row_to_invite(row) == invite


class TestInviteChildren:
    """Tests for attendee and message rows."""

    def test_attendee_status(self):
        attendee = row_to_attendee({"invite_id": 1, "profile_id": 2, "status": "Accepted"})

        assert attendee.status == AttendeeStatus.ACCEPTED

    def test_message_without_photo(self):
        message = row_to_message(
            {
                "id": 9,
                "invite_id": 1,
                "author_id": 2,
                "body": "hello",
                "photo_id": None,
                "sent_at": NOW,
            }
        )

        assert message.photo_id is None
        assert message.body == "hello"
