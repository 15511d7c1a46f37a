"""SQLAlchemy transaction scope."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from chute.domain.repository import TransactionManager


class SqlAlchemyTransactionManager(TransactionManager):
    """Transactional scope backed by a savepoint on the request session.

    The request session commits once the request finishes; a failing
    ``atomic()`` block rolls back to its savepoint only.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
