"""Free time routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from chute.application.usecase.freetime import (
    FreetimeListResponse,
    Interval,
    ListFreetimeRequest,
    ListFreetimeUseCase,
    RemoveFreetimeRequest,
    RemoveFreetimeResponse,
    RemoveFreetimeUseCase,
    SubmitFreetimeRequest,
    SubmitFreetimeUseCase,
    UpdateFreetimeRequest,
    UpdateFreetimeUseCase,
)
from chute.application.usecase.views import FreetimeInfo
from chute.domain.model import Actor
from chute.domain.value import UtcDateTime

router = APIRouter(tags=["freetime"], route_class=DishkaRoute)


class SubmitFreetimeAPIRequest(BaseModel):
    intervals: list[Interval] = Field(min_length=1)


class UpdateFreetimeAPIRequest(BaseModel):
    end: UtcDateTime


@router.post(
    "/profiles/self/frees",
    response_model=FreetimeListResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_freetime(
    request: SubmitFreetimeAPIRequest,
    actor: FromDishka[Actor],
    submit_freetime_use_case: FromDishka[SubmitFreetimeUseCase],
) -> FreetimeListResponse:
    """Declare free intervals; an interval at an existing start replaces its end.

    Example:
        POST /profiles/self/frees

        Request:
        {"intervals": [{"start": "2026-06-01T09:00:00", "end": "2026-06-01T17:00:00"}]}
    """
    return await submit_freetime_use_case.execute(
        SubmitFreetimeRequest(actor_id=actor.profile.id, intervals=request.intervals)
    )


@router.get("/profiles/self/frees", response_model=FreetimeListResponse)
async def list_my_freetime(
    actor: FromDishka[Actor],
    list_freetime_use_case: FromDishka[ListFreetimeUseCase],
) -> FreetimeListResponse:
    """List the current profile's upcoming free time."""
    return await list_freetime_use_case.execute(
        ListFreetimeRequest(profile_id=actor.profile.id)
    )


@router.delete("/profiles/self/frees", response_model=RemoveFreetimeResponse)
async def remove_all_freetime(
    actor: FromDishka[Actor],
    remove_freetime_use_case: FromDishka[RemoveFreetimeUseCase],
) -> RemoveFreetimeResponse:
    """Delete all of the current profile's free time."""
    return await remove_freetime_use_case.execute(
        RemoveFreetimeRequest(actor_id=actor.profile.id)
    )


@router.put("/profiles/self/frees/{start}", response_model=FreetimeInfo)
async def update_freetime(
    start: UtcDateTime,
    request: UpdateFreetimeAPIRequest,
    actor: FromDishka[Actor],
    update_freetime_use_case: FromDishka[UpdateFreetimeUseCase],
) -> FreetimeInfo:
    """Move the end of the interval starting at ``start``."""
    return await update_freetime_use_case.execute(
        UpdateFreetimeRequest(actor_id=actor.profile.id, start=start, end=request.end)
    )


@router.delete("/profiles/self/frees/{start}", response_model=RemoveFreetimeResponse)
async def remove_freetime(
    start: UtcDateTime,
    actor: FromDishka[Actor],
    remove_freetime_use_case: FromDishka[RemoveFreetimeUseCase],
) -> RemoveFreetimeResponse:
    """Delete the interval starting at ``start``; a missing one is not an error."""
    return await remove_freetime_use_case.execute(
        RemoveFreetimeRequest(actor_id=actor.profile.id, start=start)
    )


@router.get("/profiles/{profile_id}/frees", response_model=FreetimeListResponse)
async def list_freetime(
    profile_id: int,
    actor: FromDishka[Actor],
    list_freetime_use_case: FromDishka[ListFreetimeUseCase],
) -> FreetimeListResponse:
    """List another profile's upcoming free time."""
    return await list_freetime_use_case.execute(
        ListFreetimeRequest(profile_id=profile_id)
    )
