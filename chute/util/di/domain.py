"""Domain layer DI providers."""

from dishka import Scope, provide

from chute.config import AuthSettings
from chute.domain.repository import (
    CredentialRepository,
    FreetimeRepository,
    InviteRepository,
    PhotoRepository,
    ProfileRepository,
    TransactionManager,
)
from chute.domain.service import (
    AvailabilityService,
    CredentialService,
    InvitationService,
    ProfileService,
)
from chute.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_credential_service(
        self,
        credential_repository: CredentialRepository,
        profile_repository: ProfileRepository,
        transactions: TransactionManager,
        auth_settings: AuthSettings,
    ) -> CredentialService:
        """Provide credential domain service."""
        return CredentialService(
            credential_repository=credential_repository,
            profile_repository=profile_repository,
            transactions=transactions,
            auth_settings=auth_settings,
        )

    @provide
    def get_availability_service(
        self,
        freetime_repository: FreetimeRepository,
        profile_repository: ProfileRepository,
        transactions: TransactionManager,
    ) -> AvailabilityService:
        """Provide availability domain service."""
        return AvailabilityService(
            freetime_repository=freetime_repository,
            profile_repository=profile_repository,
            transactions=transactions,
        )

    @provide
    def get_invitation_service(
        self,
        invite_repository: InviteRepository,
        profile_repository: ProfileRepository,
        photo_repository: PhotoRepository,
        transactions: TransactionManager,
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(
            invite_repository=invite_repository,
            profile_repository=profile_repository,
            photo_repository=photo_repository,
            transactions=transactions,
        )

    @provide
    def get_profile_service(self, profile_repository: ProfileRepository) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)
