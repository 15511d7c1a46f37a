"""Get profile use case."""

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import ProfileInfo
from chute.domain.service import ProfileService
from chute.domain.value import ProfileId


class GetProfileRequest(BaseModel):
    profile_id: int


class GetProfileUseCase(BaseUseCase[GetProfileRequest, ProfileInfo]):
    """Use case for looking up one profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileInfo:
        """Get a profile by id.

        Raises:
            NotFoundError: If the profile does not exist
        """
        profile = await self.profile_service.get_by_id(ProfileId(request.profile_id))
        return ProfileInfo.from_domain(profile)
