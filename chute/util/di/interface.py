"""Interface layer DI providers."""

from dishka import Scope, provide
from fastapi import Request

from chute.application.usecase.auth import AuthenticateRequest, AuthenticateUseCase
from chute.config import AuthSettings
from chute.domain.model import Actor
from chute.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """Resolves the acting profile of an HTTP request - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    async def get_actor(
        self,
        request: Request,
        authenticate_use_case: AuthenticateUseCase,
        auth_settings: AuthSettings,
    ) -> Actor:
        """Authenticate the request by its session token header.

        Raises:
            UnauthorizedError: If the header is missing or the token is invalid
        """
        token = request.headers.get(auth_settings.token_header)
        return await authenticate_use_case.execute(AuthenticateRequest(token=token))
