"""Shared behaviour of the domain services."""

from typing import Optional, TypeVar

import logfire

from chute.domain.error import NotFoundError

T = TypeVar("T")


class Service:
    """Base class for Chute's domain services.

    Services hold the rules spanning more than one aggregate (a credential and
    its profile, an invite and its attendees) and are the only callers of
    ``TransactionManager.atomic``.
    """

    @staticmethod
    def _require(found: Optional[T], resource: str, identifier: object) -> T:
        """Return a repository lookup result or raise NotFoundError."""
        if found is None:
            logfire.warn(f"{resource} not found", identifier=str(identifier))
            raise NotFoundError(resource, str(identifier))
        return found
