"""PostgreSQL implementation of Credential repository."""

from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from chute.domain.model import Credential
from chute.domain.repository import CredentialRepository
from chute.domain.value import (
    CredentialId,
    CredentialKind,
    ProfileId,
    SessionToken,
    Username,
)
from chute.persistence.errors import storage_errors
from chute.persistence.mappers import credential_to_dict, row_to_credential
from chute.persistence.tables import credentials_id_seq, credentials_table


class PostgresCredentialRepository(CredentialRepository):
    """PostgreSQL implementation of CredentialRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def next_id(self) -> CredentialId:
        async with storage_errors("credential.next_id"):
            return CredentialId(
                await self.session.scalar(credentials_id_seq.next_value())
            )

    async def _find_one(self, *conditions) -> Optional[Credential]:
        async with storage_errors("credential.find"):
            result = await self.session.execute(
                select(credentials_table).where(and_(*conditions))
            )
        row = result.mappings().first()
        return row_to_credential(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[Credential]:
        return await self._find_one(credentials_table.c.username == username.root)

    async def find_anonymous_by_digest(self, digest: str) -> Optional[Credential]:
        return await self._find_one(
            credentials_table.c.kind == CredentialKind.ANONYMOUS.value,
            credentials_table.c.digest == digest,
        )

    async def find_by_token(self, token: SessionToken) -> Optional[Credential]:
        return await self._find_one(credentials_table.c.token == token.root)

    async def find_by_profile(self, profile_id: ProfileId) -> list[Credential]:
        async with storage_errors("credential.find_by_profile"):
            result = await self.session.execute(
                select(credentials_table)
                .where(credentials_table.c.profile_id == profile_id)
                .order_by(credentials_table.c.id)
            )
        return [row_to_credential(dict(row)) for row in result.mappings().all()]

    async def save(self, credential: Credential) -> Credential:
        """Save a credential (create or update).

        Args:
            credential: Credential to save

        Returns:
            Saved credential

        Raises:
            ConflictError: If username, digest or token is already taken
        """
        credential_dict = credential_to_dict(credential)

        async with storage_errors("credential.save"):
            exists = await self.session.scalar(
                select(credentials_table.c.id).where(
                    credentials_table.c.id == credential.id
                )
            )
            if exists is not None:
                stmt = (
                    update(credentials_table)
                    .where(credentials_table.c.id == credential.id)
                    .values(**credential_dict)
                )
            else:
                stmt = insert(credentials_table).values(**credential_dict)
            await self.session.execute(stmt)
            await self.session.flush()
        return credential
