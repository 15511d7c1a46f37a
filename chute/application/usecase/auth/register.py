"""Register use case."""

from pydantic import BaseModel, Field

from chute.application.usecase.base import BaseUseCase
from chute.application.usecase.views import ProfileInfo
from chute.domain.service import CredentialService


class RegisterRequest(BaseModel):
    """Register request.

    Without a username the secret is treated as an anonymous device secret.
    """

    secret: str = Field(min_length=1)
    username: str | None = None
    display_name: str = ""


class RegisterResponse(BaseModel):
    """Register response with the session token of the new credential."""

    token: str
    profile: ProfileInfo


class RegisterUseCase(BaseUseCase[RegisterRequest, RegisterResponse]):
    """Use case for creating a profile with its first credential."""

    def __init__(self, credential_service: CredentialService) -> None:
        """Initialize register use case.

        Args:
            credential_service: Credential domain service
        """
        self.credential_service = credential_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Register a new profile and log it in.

        Raises:
            ConflictError: If the credential already exists
            ValidationError: If the username is malformed
        """
        profile, credential = await self.credential_service.register(
            secret=request.secret,
            username=request.username,
            display_name=request.display_name,
        )
        return RegisterResponse(
            token=credential.token.root,
            profile=ProfileInfo.from_domain(profile),
        )
