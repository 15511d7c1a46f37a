"""Domain layer errors.

Every public operation either returns a value or raises exactly one of these.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input, rejected before any mutation."""

    pass


class InvalidTransitionError(ValidationError):
    """Raised when a state change is not allowed from the current state."""

    def __init__(self, resource: str, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot move {resource} from {current} to {requested}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness rule."""

    pass


class ForbiddenError(DomainError):
    """Raised when the actor lacks rights over a resource."""

    def __init__(self, resource: str, resource_id: str, profile_id: str):
        super().__init__(
            f"Profile {profile_id} is not allowed to modify {resource} {resource_id}"
        )


class UnauthorizedError(DomainError):
    """Missing or invalid credential or session token."""

    def __init__(self, message: str = "please log in"):
        super().__init__(message)


class InternalError(DomainError):
    """Storage failure, surfaced verbatim."""

    pass
