"""Mock persistence providers for testing."""

from dishka import Scope, provide

from chute.domain.repository import (
    CredentialRepository,
    FreetimeRepository,
    InviteRepository,
    PhotoRepository,
    ProfileRepository,
    TransactionManager,
)
from chute.persistence.repository.inmemory import (
    InMemoryCredentialRepository,
    InMemoryFreetimeRepository,
    InMemoryInviteRepository,
    InMemoryPhotoRepository,
    InMemoryProfileRepository,
    InMemoryTransactionManager,
)
from chute.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across the requests of one test client;
    each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_profile_repository(self) -> InMemoryProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository()

    @provide(scope=Scope.APP)
    def get_credential_repository(self) -> InMemoryCredentialRepository:
        """Provide in-memory credential repository."""
        return InMemoryCredentialRepository()

    @provide(scope=Scope.APP)
    def get_freetime_repository(self) -> InMemoryFreetimeRepository:
        """Provide in-memory freetime repository."""
        return InMemoryFreetimeRepository()

    @provide(scope=Scope.APP)
    def get_photo_repository(self) -> InMemoryPhotoRepository:
        """Provide in-memory photo repository."""
        return InMemoryPhotoRepository()

    @provide(scope=Scope.APP)
    def get_invite_repository(self) -> InMemoryInviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository()

    @provide(scope=Scope.APP)
    def get_transaction_manager(
        self,
        profiles: InMemoryProfileRepository,
        credentials: InMemoryCredentialRepository,
        freetimes: InMemoryFreetimeRepository,
        photos: InMemoryPhotoRepository,
        invites: InMemoryInviteRepository,
    ) -> TransactionManager:
        """Provide a transaction scope that rolls back every repository."""
        return InMemoryTransactionManager(
            [profiles, credentials, freetimes, photos, invites]
        )

    @provide(scope=Scope.APP)
    def as_profile_repository(
        self, repository: InMemoryProfileRepository
    ) -> ProfileRepository:
        return repository

    @provide(scope=Scope.APP)
    def as_credential_repository(
        self, repository: InMemoryCredentialRepository
    ) -> CredentialRepository:
        return repository

    @provide(scope=Scope.APP)
    def as_freetime_repository(
        self, repository: InMemoryFreetimeRepository
    ) -> FreetimeRepository:
        return repository

    @provide(scope=Scope.APP)
    def as_photo_repository(self, repository: InMemoryPhotoRepository) -> PhotoRepository:
        return repository

    @provide(scope=Scope.APP)
    def as_invite_repository(
        self, repository: InMemoryInviteRepository
    ) -> InviteRepository:
        return repository
