"""Tag catalog use cases."""

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import TagInfo
from chute.domain.service import ProfileService


class ListTagsResponse(BaseModel):
    tags: list[TagInfo]


class ListUtypesUseCase(BaseUseCase[None, ListTagsResponse]):
    """List every profile type."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: None = None) -> ListTagsResponse:
        utypes = await self.profile_service.list_utypes()
        return ListTagsResponse(tags=[TagInfo(id=u.id, name=u.name) for u in utypes])


class ListFlagsUseCase(BaseUseCase[None, ListTagsResponse]):
    """List every search flag."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: None = None) -> ListTagsResponse:
        flags = await self.profile_service.list_flags()
        return ListTagsResponse(tags=[TagInfo(id=f.id, name=f.name) for f in flags])
