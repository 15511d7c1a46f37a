"""Timestamps are stored and compared as naive UTC."""

from datetime import UTC, datetime
from typing import Annotated

from pydantic import AfterValidator


def utcnow() -> datetime:
    """Current time as naive UTC."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Convert an offset-aware datetime to naive UTC; naive values pass as-is."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


# Accepts RFC3339 input with any offset ("...Z", "+02:00") or none
UtcDateTime = Annotated[datetime, AfterValidator(to_naive_utc)]
