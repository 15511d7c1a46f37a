"""Add message use case."""

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import InviteInfo
from chute.domain.service import InvitationService
from chute.domain.value import InviteId, PhotoId, ProfileId


class AddMessageRequest(BaseModel):
    invite_id: int
    author_id: int
    body: str = ""
    photo_id: int | None = None


class AddMessageUseCase(BaseUseCase[AddMessageRequest, InviteInfo]):
    """Use case for posting a message on an invite."""

    def __init__(self, invitation_service: InvitationService) -> None:
        self.invitation_service = invitation_service

    async def execute(self, request: AddMessageRequest) -> InviteInfo:
        """Append the message.

        Raises:
            NotFoundError: If the invite does not exist
            ValidationError: If the message is empty or the photo is not the author's
        """
        aggregate = await self.invitation_service.add_message(
            InviteId(request.invite_id),
            ProfileId(request.author_id),
            request.body,
            PhotoId(request.photo_id) if request.photo_id is not None else None,
        )
        return InviteInfo.from_domain(aggregate)
