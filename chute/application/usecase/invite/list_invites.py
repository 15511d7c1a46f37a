"""List invites use case."""

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import InviteInfo
from chute.domain.service import InvitationService
from chute.domain.value import AttendeeStatus, ProfileId, UtcDateTime


class ListInvitesRequest(BaseModel):
    """Without a status: invites the actor organizes. With one: invites it attends."""

    actor_id: int
    status: AttendeeStatus | None = None
    since: UtcDateTime | None = None


class ListInvitesResponse(BaseModel):
    invites: list[InviteInfo]


class ListInvitesUseCase(BaseUseCase[ListInvitesRequest, ListInvitesResponse]):
    """Use case for the actor's upcoming invites."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: ListInvitesRequest) -> ListInvitesResponse:
        aggregates = await self.invitation_service.list_invites(
            ProfileId(request.actor_id), status=request.status, since=request.since
        )
        return ListInvitesResponse(
            invites=[InviteInfo.from_domain(a) for a in aggregates]
        )
