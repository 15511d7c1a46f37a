"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from chute.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ListFlagsUseCase,
    ListTagsResponse,
    ListUtypesUseCase,
    SearchProfilesRequest,
    SearchProfilesResponse,
    SearchProfilesUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from chute.application.usecase.views import ProfileInfo
from chute.domain.model import Actor
from chute.domain.value import UtcDateTime

router = APIRouter(tags=["profiles"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the current profile."""

    name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    utype_ids: list[int]
    flag_ids: list[int] = []


@router.get("/profiles/self", response_model=ProfileInfo)
async def get_my_profile(actor: FromDishka[Actor]) -> ProfileInfo:
    """Get the current profile."""
    return ProfileInfo.from_domain(actor.profile)


@router.put("/profiles/self", response_model=ProfileInfo)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    actor: FromDishka[Actor],
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> ProfileInfo:
    """Replace the editable fields and tags of the current profile.

    Example:
        PUT /profiles/self

        Request:
        {"name": "Ana", "utype_ids": [1, 2], "flag_ids": [3]}
    """
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            actor_id=actor.profile.id,
            name=request.name,
            email=request.email,
            phone=request.phone,
            utype_ids=request.utype_ids,
            flag_ids=request.flag_ids,
        )
    )


@router.get("/profiles", response_model=SearchProfilesResponse)
async def search_profiles(
    actor: FromDishka[Actor],
    search_profiles_use_case: FromDishka[SearchProfilesUseCase],
    at: UtcDateTime | None = Query(default=None, description="Defaults to now"),
    utype: list[int] = Query(default=[], description="Any of these utypes"),
    flag: list[int] = Query(default=[], description="All of these flags"),
) -> SearchProfilesResponse:
    """Find profiles free at a point in time.

    Example:
        GET /profiles?at=2026-06-01T14:00:00&utype=1&utype=2&flag=4
    """
    return await search_profiles_use_case.execute(
        SearchProfilesRequest(at=at, utype_ids=utype, flag_ids=flag)
    )


@router.get("/profiles/{profile_id}", response_model=ProfileInfo)
async def get_profile(
    profile_id: int,
    actor: FromDishka[Actor],
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileInfo:
    """Get a profile by id."""
    return await get_profile_use_case.execute(GetProfileRequest(profile_id=profile_id))


@router.get("/types", response_model=ListTagsResponse)
async def list_utypes(
    list_utypes_use_case: FromDishka[ListUtypesUseCase],
) -> ListTagsResponse:
    """List profile types."""
    return await list_utypes_use_case.execute()


@router.get("/flags", response_model=ListTagsResponse)
async def list_flags(
    list_flags_use_case: FromDishka[ListFlagsUseCase],
) -> ListTagsResponse:
    """List search flags."""
    return await list_flags_use_case.execute()
