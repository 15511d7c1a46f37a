"""Shared state handling for in-memory repositories."""

import copy
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Iterable

from chute.domain.repository import TransactionManager


class InMemoryRepository:
    """Base for in-memory repositories whose state can be rolled back."""

    def snapshot(self) -> dict[str, Any]:
        return copy.deepcopy(self.__dict__)

    def restore(self, state: dict[str, Any]) -> None:
        self.__dict__.clear()
        self.__dict__.update(state)


class InMemoryTransactionManager(TransactionManager):
    """Restores every participating repository if the block raises."""

    def __init__(self, repositories: Iterable[InMemoryRepository]) -> None:
        self.repositories = list(repositories)

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        states = [(repo, repo.snapshot()) for repo in self.repositories]
        try:
            yield
        except BaseException:
            for repo, state in states:
                repo.restore(state)
            raise
