"""Credential management use cases."""

from pydantic import BaseModel, Field

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import CredentialInfo
from chute.domain.service import CredentialService
from chute.domain.value import ProfileId


class AddCredentialRequest(BaseModel):
    """Attach or update a credential on the actor's profile."""

    actor_id: int
    secret: str = Field(min_length=1)
    username: str | None = None
    display_name: str = ""
    authorized: bool = True


class AddCredentialUseCase(BaseUseCase[AddCredentialRequest, CredentialInfo]):
    """Use case for adding a login method, or updating one already owned."""

    def __init__(self, credential_service: CredentialService) -> None:
        self.credential_service = credential_service

    async def execute(self, request: AddCredentialRequest) -> CredentialInfo:
        """Add or update a credential.

        Raises:
            ForbiddenError: If the username belongs to another profile
            ValidationError: If the username is malformed
        """
        credential = await self.credential_service.add_or_update(
            actor_id=ProfileId(request.actor_id),
            secret=request.secret,
            username=request.username,
            display_name=request.display_name,
            authorized=request.authorized,
        )
        return CredentialInfo.from_domain(credential)


class ListCredentialsRequest(BaseModel):
    actor_id: int


class ListCredentialsResponse(BaseModel):
    credentials: list[CredentialInfo]


class ListCredentialsUseCase(
    BaseUseCase[ListCredentialsRequest, ListCredentialsResponse]
):
    """Use case for listing the actor's credentials."""

    def __init__(self, credential_service: CredentialService) -> None:
        self.credential_service = credential_service

    async def execute(self, request: ListCredentialsRequest) -> ListCredentialsResponse:
        credentials = await self.credential_service.list_for_profile(
            ProfileId(request.actor_id)
        )
        return ListCredentialsResponse(
            credentials=[CredentialInfo.from_domain(c) for c in credentials]
        )
