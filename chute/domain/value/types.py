"""Domain value objects for chute."""

import re
from enum import Enum

from pydantic import field_validator

from chute.domain.value.common import RootValueObject


class CredentialKind(str, Enum):
    """How a credential proves its secret.

    Named credentials carry a username and a human password; anonymous
    credentials carry only a device fingerprint.
    """

    NAMED = "named"
    ANONYMOUS = "anonymous"


class AttendeeStatus(str, Enum):
    """Status of an attendee on an invite."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    DECLINED = "Declined"

    @property
    def is_terminal(self) -> bool:
        return self is not AttendeeStatus.PENDING


class Username(RootValueObject[str]):
    """Login name of a named credential.

    1-64 characters, no whitespace.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^\S{1,64}$", v):
            raise ValueError("Username must be 1-64 characters without whitespace")
        return v


class SessionToken(RootValueObject[str]):
    """Opaque session token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v
