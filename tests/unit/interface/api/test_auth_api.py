"""API tests for registration, login and credentials."""

from tests.conftest import auth_headers, register
from tests.harness import create_client_fixture

client = create_client_fixture()


class TestRegisterEndpoint:
    """Tests for POST /profiles/self."""

    def test_register_returns_token_and_profile(self, client):
        # Act
        body = register(client, "ana")

        # Assert
        assert len(body["token"]) == 40
        assert body["profile"]["id"] == 1
        assert [u["name"] for u in body["profile"]["utypes"]] == ["Model"]

    def test_register_twice_is_conflict(self, client):
        # Arrange
        register(client, "ana")

        # Act
        response = client.post(
            "/profiles/self", json={"username": "ana", "secret": "other"}
        )

        # Assert
        assert response.status_code == 409
        assert "detail" in response.json()

    def test_register_without_secret_is_rejected(self, client):
        # Act
        response = client.post("/profiles/self", json={"username": "ana"})

        # Assert
        assert response.status_code == 422


class TestLoginLogout:
    """Tests for the session actions."""

    def test_login_replaces_token(self, client):
        # Arrange
        old_token = register(client, "ana", "correct horse")["token"]

        # Act
        response = client.post(
            "/actions/login", json={"username": "ana", "secret": "correct horse"}
        )

        # Assert
        assert response.status_code == 200
        new_token = response.json()["token"]
        assert new_token != old_token
        assert client.get("/profiles/self", headers=auth_headers(old_token)).status_code == 401
        assert client.get("/profiles/self", headers=auth_headers(new_token)).status_code == 200

    def test_login_wrong_secret_is_unauthorized(self, client):
        # Arrange
        register(client, "ana", "correct horse")

        # Act
        response = client.post(
            "/actions/login", json={"username": "ana", "secret": "wrong"}
        )

        # Assert
        assert response.status_code == 401
        assert response.json() == {"detail": "login failure"}

    def test_logout_ends_session(self, client):
        # Arrange
        token = register(client, "ana")["token"]

        # Act
        response = client.post("/actions/logout", headers=auth_headers(token))

        # Assert
        assert response.status_code == 204
        assert client.get("/profiles/self", headers=auth_headers(token)).status_code == 401

    def test_logout_without_token_is_unauthorized(self, client):
        # Act
        response = client.post("/actions/logout")

        # Assert
        assert response.status_code == 401


class TestCredentialsEndpoint:
    """Tests for /profiles/self/auths."""

    def test_add_and_list_credentials(self, client):
        # Arrange
        token = register(client, "ana")["token"]

        # Act
        added = client.post(
            "/profiles/self/auths",
            json={"secret": "device-1", "display_name": "phone"},
            headers=auth_headers(token),
        )
        listed = client.get("/profiles/self/auths", headers=auth_headers(token))

        # Assert
        assert added.status_code == 200
        assert added.json()["kind"] == "anonymous"
        credentials = listed.json()["credentials"]
        assert [c["kind"] for c in credentials] == ["named", "anonymous"]
        assert all("digest" not in c and "token" not in c for c in credentials)

    def test_new_device_can_log_in(self, client):
        # Arrange
        token = register(client, "ana")["token"]
        client.post(
            "/profiles/self/auths",
            json={"secret": "device-1"},
            headers=auth_headers(token),
        )

        # Act
        response = client.post("/actions/login", json={"secret": "device-1"})

        # Assert
        assert response.status_code == 200
        assert response.json()["profile_id"] == 1

    def test_taking_another_username_is_forbidden(self, client):
        # Arrange
        register(client, "ana")
        token = register(client, "ben")["token"]

        # Act
        response = client.post(
            "/profiles/self/auths",
            json={"username": "ana", "secret": "hijack"},
            headers=auth_headers(token),
        )

        # Assert
        assert response.status_code == 403


class TestLongSecrets:
    """Passwords are capped at what bcrypt hashes; device secrets are not."""

    LONG = "x" * 100

    def test_register_with_long_password_is_bad_request(self, client):
        # Act
        response = client.post(
            "/profiles/self", json={"username": "longpw", "secret": self.LONG}
        )

        # Assert
        assert response.status_code == 400
        assert "72 bytes" in response.json()["detail"]

    def test_adding_long_password_is_bad_request(self, client):
        # Arrange
        token = register(client, "ana")["token"]

        # Act
        response = client.post(
            "/profiles/self/auths",
            json={"username": "ana2", "secret": self.LONG},
            headers=auth_headers(token),
        )

        # Assert
        assert response.status_code == 400

    def test_login_with_long_password_is_unauthorized(self, client):
        # Arrange
        register(client, "ana")

        # Act
        response = client.post(
            "/actions/login", json={"username": "ana", "secret": self.LONG}
        )

        # Assert
        assert response.status_code == 401
        assert response.json() == {"detail": "login failure"}

    def test_long_device_secret_is_accepted(self, client):
        # Act
        body = register(client, None, self.LONG)

        # Assert
        assert body["profile"]["id"] == 1
