"""Invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from chute.application.usecase.invite import (
    AddAttendeesRequest,
    AddAttendeesUseCase,
    AddMessageRequest,
    AddMessageUseCase,
    CancelInviteRequest,
    CancelInviteUseCase,
    ChangeStatusRequest,
    ChangeStatusUseCase,
    CreateInviteRequest,
    CreateInviteUseCase,
    FirstMessage,
    GetInviteRequest,
    GetInviteUseCase,
    ListInvitesRequest,
    ListInvitesResponse,
    ListInvitesUseCase,
)
from chute.application.usecase.views import InviteInfo
from chute.domain.model import Actor
from chute.domain.value import AttendeeStatus, UtcDateTime

router = APIRouter(tags=["invites"], route_class=DishkaRoute)


class CreateInviteAPIRequest(BaseModel):
    """API request for creating an invite."""

    attendee_ids: list[int] = Field(min_length=1)
    start: UtcDateTime
    end: UtcDateTime | None = None
    place: str = ""
    message: FirstMessage | None = None


class AddAttendeesAPIRequest(BaseModel):
    profile_ids: list[int] = Field(min_length=1)


class AddMessageAPIRequest(BaseModel):
    body: str = ""
    photo_id: int | None = None


class ChangeStatusAPIRequest(BaseModel):
    status: AttendeeStatus


@router.post("/invites", response_model=InviteInfo, status_code=status.HTTP_201_CREATED)
async def create_invite(
    request: CreateInviteAPIRequest,
    actor: FromDishka[Actor],
    create_invite_use_case: FromDishka[CreateInviteUseCase],
) -> InviteInfo:
    """Invite profiles to a shoot.

    Example:
        POST /invites

        Request:
        {
            "attendee_ids": [4, 9],
            "start": "2026-06-01T14:00:00",
            "place": "Pier 7",
            "message": {"body": "Bring the red coat"}
        }
    """
    return await create_invite_use_case.execute(
        CreateInviteRequest(
            organizer_id=actor.profile.id,
            attendee_ids=request.attendee_ids,
            start=request.start,
            end=request.end,
            place=request.place,
            message=request.message,
        )
    )


@router.get("/invites/{invite_id}", response_model=InviteInfo)
async def get_invite(
    invite_id: int,
    actor: FromDishka[Actor],
    get_invite_use_case: FromDishka[GetInviteUseCase],
) -> InviteInfo:
    """Get an invite with its attendees and messages."""
    return await get_invite_use_case.execute(GetInviteRequest(invite_id=invite_id))


@router.delete("/invites/{invite_id}", response_model=InviteInfo)
async def cancel_invite(
    invite_id: int,
    actor: FromDishka[Actor],
    cancel_invite_use_case: FromDishka[CancelInviteUseCase],
) -> InviteInfo:
    """Cancel an invite. Only the organizer may."""
    return await cancel_invite_use_case.execute(
        CancelInviteRequest(invite_id=invite_id, actor_id=actor.profile.id)
    )


@router.post("/invites/{invite_id}/attendees", response_model=InviteInfo)
async def add_attendees(
    invite_id: int,
    request: AddAttendeesAPIRequest,
    actor: FromDishka[Actor],
    add_attendees_use_case: FromDishka[AddAttendeesUseCase],
) -> InviteInfo:
    """Invite more profiles. Only the organizer may."""
    return await add_attendees_use_case.execute(
        AddAttendeesRequest(
            invite_id=invite_id,
            actor_id=actor.profile.id,
            profile_ids=request.profile_ids,
        )
    )


@router.post(
    "/invites/{invite_id}/messages",
    response_model=InviteInfo,
    status_code=status.HTTP_201_CREATED,
)
async def add_message(
    invite_id: int,
    request: AddMessageAPIRequest,
    actor: FromDishka[Actor],
    add_message_use_case: FromDishka[AddMessageUseCase],
) -> InviteInfo:
    """Post a message on an invite."""
    return await add_message_use_case.execute(
        AddMessageRequest(
            invite_id=invite_id,
            author_id=actor.profile.id,
            body=request.body,
            photo_id=request.photo_id,
        )
    )


@router.post("/profiles/self/invites/{invite_id}/status", response_model=InviteInfo)
async def change_status(
    invite_id: int,
    request: ChangeStatusAPIRequest,
    actor: FromDishka[Actor],
    change_status_use_case: FromDishka[ChangeStatusUseCase],
) -> InviteInfo:
    """Accept or decline an invite on behalf of the current profile."""
    return await change_status_use_case.execute(
        ChangeStatusRequest(
            invite_id=invite_id, actor_id=actor.profile.id, status=request.status
        )
    )


@router.get("/profiles/self/invites", response_model=ListInvitesResponse)
async def list_my_invites(
    actor: FromDishka[Actor],
    list_invites_use_case: FromDishka[ListInvitesUseCase],
    attendee_status: AttendeeStatus | None = Query(
        default=None, alias="status", description="Omit to list invites you organize"
    ),
    since: UtcDateTime | None = Query(default=None, description="Defaults to today"),
) -> ListInvitesResponse:
    """List upcoming invites of the current profile."""
    return await list_invites_use_case.execute(
        ListInvitesRequest(
            actor_id=actor.profile.id, status=attendee_status, since=since
        )
    )
