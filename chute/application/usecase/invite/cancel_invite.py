"""Cancel invite use case."""

import logfire
from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import InviteInfo
from chute.domain.error import ForbiddenError
from chute.domain.service import InvitationService
from chute.domain.value import InviteId


class CancelInviteRequest(BaseModel):
    invite_id: int
    actor_id: int


class CancelInviteUseCase(BaseUseCase[CancelInviteRequest, InviteInfo]):
    """Use case for cancelling an invite. Only its organizer may."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: CancelInviteRequest) -> InviteInfo:
        """Cancel the invite.

        Raises:
            NotFoundError: If the invite does not exist
            ForbiddenError: If the actor is not the organizer
        """
        invite_id = InviteId(request.invite_id)
        invite = await self.invitation_service.get_invite_row(invite_id)
        if invite.organizer_id != request.actor_id:
            logfire.warn(
                "Cancel by non-organizer",
                invite_id=invite_id,
                actor_id=request.actor_id,
            )
            raise ForbiddenError("invite", str(invite_id), str(request.actor_id))
        aggregate = await self.invitation_service.cancel(invite_id)
        return InviteInfo.from_domain(aggregate)
