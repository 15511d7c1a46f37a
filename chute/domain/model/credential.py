"""Credential entity.

One way of logging into a profile. A profile may hold any number of credentials,
each authorized or not individually.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from chute.domain.model.common import DomainModel
from chute.domain.model.profile import Profile
from chute.domain.value import (
    CredentialId,
    CredentialKind,
    ProfileId,
    SessionToken,
    Username,
    utcnow,
)


class Credential(DomainModel):
    """Named (username + password) or anonymous (device secret) credential.

    Business rules:
    - Usernames are globally unique
    - Anonymous digests are globally unique and serve as the lookup key
    - A present token means logged in; it rotates on every login
    """

    id: CredentialId
    profile_id: ProfileId
    kind: CredentialKind
    username: Optional[Username] = None
    digest: str
    display_name: str = ""
    token: Optional[SessionToken] = None
    authorized: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    last_auth_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_username_matches_kind(self) -> "Credential":
        if (self.kind is CredentialKind.NAMED) != (self.username is not None):
            raise ValueError("Named credentials need a username, anonymous ones none")
        return self


class Actor(DomainModel):
    """The authenticated profile and the credential it used, for one request."""

    profile: Profile
    credential: Credential
