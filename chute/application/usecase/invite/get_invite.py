"""Get invite use case."""

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import InviteInfo
from chute.domain.service import InvitationService
from chute.domain.value import InviteId


class GetInviteRequest(BaseModel):
    invite_id: int


class GetInviteUseCase(BaseUseCase[GetInviteRequest, InviteInfo]):
    """Use case for reading one invite."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: GetInviteRequest) -> InviteInfo:
        aggregate = await self.invitation_service.get_invite(InviteId(request.invite_id))
        return InviteInfo.from_domain(aggregate)
