"""Remove free time use cases."""

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.domain.service import AvailabilityService
from chute.domain.value import ProfileId, UtcDateTime


class RemoveFreetimeRequest(BaseModel):
    """Remove the interval at ``start``, or all of them when start is None."""

    actor_id: int
    start: UtcDateTime | None = None


class RemoveFreetimeResponse(BaseModel):
    deleted: int


class RemoveFreetimeUseCase(BaseUseCase[RemoveFreetimeRequest, RemoveFreetimeResponse]):
    """Use case for deleting the actor's free time."""

    def __init__(self, availability_service: AvailabilityService) -> None:
        self.availability_service = availability_service

    async def execute(self, request: RemoveFreetimeRequest) -> RemoveFreetimeResponse:
        profile_id = ProfileId(request.actor_id)
        if request.start is None:
            deleted = await self.availability_service.remove_all(profile_id)
        else:
            deleted = await self.availability_service.remove_interval(
                profile_id, request.start
            )
        return RemoveFreetimeResponse(deleted=deleted)
