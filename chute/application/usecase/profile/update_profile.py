"""Update profile use case."""

from pydantic import BaseModel, Field

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import ProfileInfo
from chute.domain.service import ProfileService
from chute.domain.value import FlagId, ProfileId, UtypeId


class UpdateProfileRequest(BaseModel):
    """Update profile request. Tag lists replace the current ones."""

    actor_id: int  # From authenticated actor
    name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    utype_ids: list[int]
    flag_ids: list[int] = []


class UpdateProfileUseCase(BaseUseCase[UpdateProfileRequest, ProfileInfo]):
    """Use case for editing the actor's own profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileInfo:
        """Execute update profile flow.

        Raises:
            ValidationError: If utypes are empty or a tag id is unknown
        """
        profile = await self.profile_service.update_profile(
            profile_id=ProfileId(request.actor_id),
            name=request.name,
            email=request.email,
            phone=request.phone,
            utype_ids=[UtypeId(u) for u in request.utype_ids],
            flag_ids=[FlagId(f) for f in request.flag_ids],
        )
        return ProfileInfo.from_domain(profile)
