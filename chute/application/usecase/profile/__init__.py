"""Profile use cases."""

from .get_profile import GetProfileRequest, GetProfileUseCase
from .list_tags import ListFlagsUseCase, ListTagsResponse, ListUtypesUseCase
from .search_profiles import (
    SearchProfilesRequest,
    SearchProfilesResponse,
    SearchProfilesUseCase,
)
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "ListFlagsUseCase",
    "ListTagsResponse",
    "ListUtypesUseCase",
    "SearchProfilesRequest",
    "SearchProfilesResponse",
    "SearchProfilesUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
