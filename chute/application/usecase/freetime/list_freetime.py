"""List free time use case."""

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.freetime.submit_freetime import FreetimeListResponse
from chute.application.usecase.views import FreetimeInfo
from chute.domain.service import AvailabilityService, ProfileService
from chute.domain.value import ProfileId


class ListFreetimeRequest(BaseModel):
    profile_id: int


class ListFreetimeUseCase(BaseUseCase[ListFreetimeRequest, FreetimeListResponse]):
    """Use case for listing a profile's upcoming free time."""

    def __init__(
        self,
        availability_service: AvailabilityService,
        profile_service: ProfileService,
    ) -> None:
        self.availability_service = availability_service
        self.profile_service = profile_service

    async def execute(self, request: ListFreetimeRequest) -> FreetimeListResponse:
        """List intervals starting from today.

        Raises:
            NotFoundError: If the profile does not exist
        """
        profile = await self.profile_service.get_by_id(ProfileId(request.profile_id))
        freetimes = await self.availability_service.list_upcoming(profile.id)
        return FreetimeListResponse(
            freetimes=[FreetimeInfo.from_domain(f) for f in freetimes]
        )
