"""Login and logout use cases."""

import logfire
from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.domain.service import CredentialService


class LoginRequest(BaseModel):
    """Login request."""

    secret: str
    username: str | None = None


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    profile_id: int


class LoginUseCase(BaseUseCase[LoginRequest, LoginResponse]):
    """Use case for exchanging a secret for a fresh session token."""

    def __init__(self, credential_service: CredentialService) -> None:
        self.credential_service = credential_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            UnauthorizedError: On any lookup or verification failure
        """
        credential = await self.credential_service.login(
            secret=request.secret, username=request.username
        )
        return LoginResponse(token=credential.token.root, profile_id=credential.profile_id)


class LogoutRequest(BaseModel):
    """Logout request."""

    token: str | None


class LogoutUseCase(BaseUseCase[LogoutRequest, None]):
    """Use case for ending a session."""

    def __init__(self, credential_service: CredentialService) -> None:
        self.credential_service = credential_service

    async def execute(self, request: LogoutRequest) -> None:
        """Clear the session token.

        Raises:
            UnauthorizedError: If the token is unknown
        """
        await self.credential_service.logout(request.token)
        logfire.info("Session ended")
