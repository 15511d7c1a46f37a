"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One API operation: validates nothing itself, delegates to the services
    and shapes their entities into response views."""

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
