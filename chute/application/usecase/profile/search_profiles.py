"""Availability search use case."""

from datetime import datetime

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import ProfileInfo
from chute.domain.service import AvailabilityService
from chute.domain.value import FlagId, UtcDateTime, UtypeId, utcnow


class SearchProfilesRequest(BaseModel):
    """Search request; ``at`` defaults to the current time."""

    at: UtcDateTime | None = None
    utype_ids: list[int] = []
    flag_ids: list[int] = []


class SearchProfilesResponse(BaseModel):
    at: datetime
    profiles: list[ProfileInfo]


class SearchProfilesUseCase(BaseUseCase[SearchProfilesRequest, SearchProfilesResponse]):
    """Use case for finding profiles free at a given time."""

    def __init__(self, availability_service: AvailabilityService) -> None:
        self.availability_service = availability_service

    async def execute(self, request: SearchProfilesRequest) -> SearchProfilesResponse:
        at = request.at or utcnow()
        profiles = await self.availability_service.search_available(
            at,
            utype_ids=[UtypeId(u) for u in request.utype_ids],
            flag_ids=[FlagId(f) for f in request.flag_ids],
        )
        return SearchProfilesResponse(
            at=at, profiles=[ProfileInfo.from_domain(p) for p in profiles]
        )
