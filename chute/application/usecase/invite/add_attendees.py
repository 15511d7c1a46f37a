"""Add attendees use case."""

from pydantic import BaseModel, Field

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import InviteInfo
from chute.domain.service import InvitationService
from chute.domain.value import InviteId, ProfileId


class AddAttendeesRequest(BaseModel):
    invite_id: int
    actor_id: int
    profile_ids: list[int] = Field(min_length=1)


class AddAttendeesUseCase(BaseUseCase[AddAttendeesRequest, InviteInfo]):
    """Use case for inviting more profiles to an existing invite."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: AddAttendeesRequest) -> InviteInfo:
        """Add attendees.

        Raises:
            NotFoundError: If the invite does not exist
            ForbiddenError: If the actor is not the organizer
            ValidationError: If a profile id is unknown
        """
        aggregate = await self.invitation_service.add_attendees(
            InviteId(request.invite_id),
            ProfileId(request.actor_id),
            [ProfileId(pid) for pid in request.profile_ids],
        )
        return InviteInfo.from_domain(aggregate)
