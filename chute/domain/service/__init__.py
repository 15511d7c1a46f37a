"""Domain services."""

from .availability_service import AvailabilityService, matches_tags
from .base import Service
from .credential_service import CredentialService
from .invitation_service import InvitationService
from .profile_service import ProfileService

__all__ = [
    "AvailabilityService",
    "CredentialService",
    "InvitationService",
    "ProfileService",
    "Service",
    "matches_tags",
]
