"""Unit tests for the domain error to HTTP status mapping."""

import pytest

from chute.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InternalError,
    InvalidTransitionError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from chute.interface.error import status_for


class TestStatusFor:
    """Tests for status_for function."""

    @pytest.mark.parametrize(
        ("error", "code"),
        [
            (ValidationError("bad"), 400),
            (InvalidTransitionError("attendee", "Accepted", "Declined"), 400),
            (UnauthorizedError(), 401),
            (ForbiddenError("invite", "1", "2"), 403),
            (NotFoundError("Invite", "1"), 404),
            (ConflictError("taken"), 409),
            (InternalError("db down"), 500),
            (DomainError("unknown"), 500),
        ],
    )
    def test_status_codes(self, error, code):
        assert status_for(error) == code
