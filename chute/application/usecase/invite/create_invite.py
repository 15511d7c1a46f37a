"""Create invite use case."""

from pydantic import BaseModel, Field

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import InviteInfo
from chute.domain.service import InvitationService
from chute.domain.value import PhotoId, ProfileId, UtcDateTime


class FirstMessage(BaseModel):
    """Optional message sent along with the invite."""

    body: str = ""
    photo_id: int | None = None


class CreateInviteRequest(BaseModel):
    """Request to create an invite."""

    organizer_id: int  # From authenticated actor
    attendee_ids: list[int] = Field(min_length=1)
    start: UtcDateTime
    end: UtcDateTime | None = None
    place: str = ""
    message: FirstMessage | None = None


class CreateInviteUseCase(BaseUseCase[CreateInviteRequest, InviteInfo]):
    """Use case for proposing a shoot to one or more profiles."""

    def __init__(self, invitation_service: InvitationService) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: CreateInviteRequest) -> InviteInfo:
        """Create the invite.

        Raises:
            ValidationError: For bad times or a photo not owned by the organizer
            NotFoundError: If an attendee is not a profile
        """
        message = request.message
        aggregate = await self.invitation_service.create_invite(
            organizer_id=ProfileId(request.organizer_id),
            attendee_ids=[ProfileId(pid) for pid in request.attendee_ids],
            start=request.start,
            end=request.end,
            place=request.place,
            message_body=message.body if message else None,
            message_photo_id=(
                PhotoId(message.photo_id)
                if message and message.photo_id is not None
                else None
            ),
        )
        return InviteInfo.from_domain(aggregate)
