"""Submit free time use cases."""

from pydantic import BaseModel, Field

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import FreetimeInfo
from chute.domain.service import AvailabilityService
from chute.domain.value import ProfileId, UtcDateTime


class Interval(BaseModel):
    start: UtcDateTime
    end: UtcDateTime


class SubmitFreetimeRequest(BaseModel):
    """Intervals to declare; an existing start gets its end moved."""

    actor_id: int
    intervals: list[Interval] = Field(min_length=1)


class FreetimeListResponse(BaseModel):
    freetimes: list[FreetimeInfo]


class SubmitFreetimeUseCase(BaseUseCase[SubmitFreetimeRequest, FreetimeListResponse]):
    """Use case for declaring one or more free intervals at once."""

    def __init__(self, availability_service: AvailabilityService) -> None:
        self.availability_service = availability_service

    async def execute(self, request: SubmitFreetimeRequest) -> FreetimeListResponse:
        """Store every interval, or none if one is invalid.

        Raises:
            ValidationError: If an end is not after its start
        """
        freetimes = await self.availability_service.submit_intervals(
            ProfileId(request.actor_id),
            [(i.start, i.end) for i in request.intervals],
        )
        return FreetimeListResponse(
            freetimes=[FreetimeInfo.from_domain(f) for f in freetimes]
        )


class UpdateFreetimeRequest(BaseModel):
    actor_id: int
    start: UtcDateTime
    end: UtcDateTime


class UpdateFreetimeUseCase(BaseUseCase[UpdateFreetimeRequest, FreetimeInfo]):
    """Use case for moving the end of an existing interval."""

    def __init__(self, availability_service: AvailabilityService) -> None:
        self.availability_service = availability_service

    async def execute(self, request: UpdateFreetimeRequest) -> FreetimeInfo:
        """Update an interval.

        Raises:
            NotFoundError: If there is no interval at start
            ValidationError: If end is not after start
        """
        freetime = await self.availability_service.update_interval(
            ProfileId(request.actor_id), request.start, request.end
        )
        return FreetimeInfo.from_domain(freetime)
