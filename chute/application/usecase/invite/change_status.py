"""Change attendee status use case."""

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import InviteInfo
from chute.domain.service import InvitationService
from chute.domain.value import AttendeeStatus, InviteId, ProfileId


class ChangeStatusRequest(BaseModel):
    """The actor answers an invite for itself."""

    invite_id: int
    actor_id: int
    status: AttendeeStatus


class ChangeStatusUseCase(BaseUseCase[ChangeStatusRequest, InviteInfo]):
    """Use case for accepting or declining an invite."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: ChangeStatusRequest) -> InviteInfo:
        """Set the actor's attendee status.

        Raises:
            NotFoundError: If the invite does not exist
            InvalidTransitionError: If the status cannot change that way
        """
        aggregate = await self.invitation_service.change_status(
            InviteId(request.invite_id), ProfileId(request.actor_id), request.status
        )
        return InviteInfo.from_domain(aggregate)
