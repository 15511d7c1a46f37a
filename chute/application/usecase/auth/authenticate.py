"""Authenticate use case."""

from pydantic import BaseModel

from chute.application.usecase.base import BaseUseCase
from chute.domain.model import Actor
from chute.domain.service import CredentialService


class AuthenticateRequest(BaseModel):
    """Token taken from the request header."""

    token: str | None


class AuthenticateUseCase(BaseUseCase[AuthenticateRequest, Actor]):
    """Resolve the session token of a request to its Actor."""

    def __init__(self, credential_service: CredentialService) -> None:
        self.credential_service = credential_service

    async def execute(self, request: AuthenticateRequest) -> Actor:
        """Authenticate a request.

        Raises:
            UnauthorizedError: If the token is missing, unknown or its credential
                is not authorized
        """
        return await self.credential_service.authenticate(request.token)
