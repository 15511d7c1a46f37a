"""API tests for invites."""

from datetime import timedelta

import pytest

from chute.domain.value import utcnow
from tests.conftest import auth_headers, register
from tests.harness import create_client_fixture

client = create_client_fixture()

START = (utcnow() + timedelta(days=5)).replace(microsecond=0)


@pytest.fixture
def people(client):
    """Three registered profiles, keyed by username."""
    return {name: register(client, name) for name in ("ana", "ben", "cat")}


def create_invite(client, organizer: dict, *attendees: dict, **extra):
    body = {
        "attendee_ids": [a["profile"]["id"] for a in attendees],
        "start": START.isoformat(),
        **extra,
    }
    return client.post("/invites", json=body, headers=auth_headers(organizer["token"]))


class TestCreateInvite:
    """Tests for POST /invites."""

    def test_create_invite(self, client, people):
        # Act
        response = create_invite(
            client,
            people["ana"],
            people["ben"],
            people["cat"],
            place="Pier 7",
            message={"body": "Bring the red coat"},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["active"] is True
        assert body["organizer"]["id"] == people["ana"]["profile"]["id"]
        assert [a["status"] for a in body["attendees"]] == ["Pending", "Pending"]
        assert body["messages"][0]["body"] == "Bring the red coat"

    def test_unknown_attendee_is_not_found(self, client, people):
        # Act
        response = client.post(
            "/invites",
            json={"attendee_ids": [99], "start": START.isoformat()},
            headers=auth_headers(people["ana"]["token"]),
        )

        # Assert
        assert response.status_code == 404

    def test_self_invite_is_bad_request(self, client, people):
        # Act
        response = create_invite(client, people["ana"], people["ana"])

        # Assert
        assert response.status_code == 400


class TestInviteLifecycle:
    """Tests for answering, extending and cancelling an invite."""

    def test_accept_then_decline_is_rejected(self, client, people):
        # Arrange
        invite_id = create_invite(client, people["ana"], people["ben"]).json()["id"]
        path = f"/profiles/self/invites/{invite_id}/status"
        ben = auth_headers(people["ben"]["token"])

        # Act
        accepted = client.post(path, json={"status": "Accepted"}, headers=ben)
        declined = client.post(path, json={"status": "Declined"}, headers=ben)

        # Assert
        assert accepted.status_code == 200
        assert accepted.json()["attendees"][0]["status"] == "Accepted"
        assert declined.status_code == 400

    def test_only_organizer_can_cancel(self, client, people):
        # Arrange
        invite_id = create_invite(client, people["ana"], people["ben"]).json()["id"]

        # Act
        by_attendee = client.delete(
            f"/invites/{invite_id}", headers=auth_headers(people["ben"]["token"])
        )
        by_organizer = client.delete(
            f"/invites/{invite_id}", headers=auth_headers(people["ana"]["token"])
        )

        # Assert
        assert by_attendee.status_code == 403
        assert by_organizer.status_code == 200
        assert by_organizer.json()["active"] is False

    def test_add_attendees_and_messages(self, client, people):
        # Arrange
        invite_id = create_invite(client, people["ana"], people["ben"]).json()["id"]

        # Act
        extended = client.post(
            f"/invites/{invite_id}/attendees",
            json={"profile_ids": [people["cat"]["profile"]["id"]]},
            headers=auth_headers(people["ana"]["token"]),
        )
        messaged = client.post(
            f"/invites/{invite_id}/messages",
            json={"body": "Count me in"},
            headers=auth_headers(people["cat"]["token"]),
        )

        # Assert
        assert len(extended.json()["attendees"]) == 2
        assert messaged.status_code == 201
        assert messaged.json()["messages"][-1]["author"]["id"] == people["cat"]["profile"]["id"]

    def test_get_missing_invite(self, client, people):
        # Act
        response = client.get("/invites/77", headers=auth_headers(people["ana"]["token"]))

        # Assert
        assert response.status_code == 404


class TestListInvites:
    """Tests for GET /profiles/self/invites."""

    def test_organized_and_pending_lists(self, client, people):
        # Arrange
        invite_id = create_invite(client, people["ana"], people["ben"]).json()["id"]

        # Act
        organized = client.get(
            "/profiles/self/invites", headers=auth_headers(people["ana"]["token"])
        )
        pending = client.get(
            "/profiles/self/invites",
            params={"status": "Pending"},
            headers=auth_headers(people["ben"]["token"]),
        )
        accepted = client.get(
            "/profiles/self/invites",
            params={"status": "Accepted"},
            headers=auth_headers(people["ben"]["token"]),
        )

        # Assert
        assert [i["id"] for i in organized.json()["invites"]] == [invite_id]
        assert [i["id"] for i in pending.json()["invites"]] == [invite_id]
        assert accepted.json()["invites"] == []


class TestOffsetTimestamps:
    """Invite times may carry an offset and mix with naive ones."""

    def test_z_start_with_naive_end(self, client, people):
        # Act
        response = create_invite(
            client,
            people["ana"],
            people["ben"],
            start="2030-06-01T09:00:00Z",
            end="2030-06-01T10:00:00",
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["start"] == "2030-06-01T09:00:00"
        assert response.json()["end"] == "2030-06-01T10:00:00"

    def test_end_before_start_in_utc_is_bad_request(self, client, people):
        # Act
        response = create_invite(
            client,
            people["ana"],
            people["ben"],
            start="2030-06-01T12:00:00+02:00",
            end="2030-06-01T09:30:00",
        )

        # Assert
        assert response.status_code == 400
