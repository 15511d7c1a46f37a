"""Transaction scope interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Explicit transactional scope for multi-statement writes.

    Everything written inside ``atomic()`` is rolled back if the block raises.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open a transactional scope.

        Usage:
            async with transactions.atomic():
                await invite_repository.save(invite)
                await invite_repository.add_attendees(invite.id, profile_ids)
        """
        pass
