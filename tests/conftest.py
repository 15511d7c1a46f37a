"""Test configuration and fixtures."""

import os

import logfire

# Must be set before the first Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")
# The minimum bcrypt work factor keeps password hashing fast in tests
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)

TOKEN_HEADER = "X-Chute-Token"


def auth_headers(token: str) -> dict[str, str]:
    """Headers carrying a session token."""
    return {TOKEN_HEADER: token}


def register(client, username: str | None = "ana", secret: str = "correct horse") -> dict:
    """Register a profile through the API and return the response body."""
    body: dict = {"secret": secret}
    if username is not None:
        body["username"] = username
    response = client.post("/profiles/self", json=body)
    assert response.status_code == 201, response.text
    return response.json()
