"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from chute.config import Settings
from chute.domain.repository import (
    CredentialRepository,
    FreetimeRepository,
    InviteRepository,
    PhotoRepository,
    ProfileRepository,
    TransactionManager,
)
from chute.persistence.database import create_engine, create_session_factory
from chute.persistence.repository import (
    PostgresCredentialRepository,
    PostgresFreetimeRepository,
    PostgresInviteRepository,
    PostgresPhotoRepository,
    PostgresProfileRepository,
)
from chute.persistence.transaction import SqlAlchemyTransactionManager
from chute.util.di.base import ProviderBase
from chute.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide savepoint-based transaction scope."""
        return SqlAlchemyTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_credential_repository(self, session: AsyncSession) -> CredentialRepository:
        """Provide Credential repository."""
        return PostgresCredentialRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_freetime_repository(self, session: AsyncSession) -> FreetimeRepository:
        """Provide Freetime repository."""
        return PostgresFreetimeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_photo_repository(self, session: AsyncSession) -> PhotoRepository:
        """Provide Photo repository."""
        return PostgresPhotoRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        """Provide Invite repository."""
        return PostgresInviteRepository(session)
