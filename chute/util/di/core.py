"""Configuration providers."""

import logfire
from dishka import Scope, provide

from chute.config import AuthSettings, Settings
from chute.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings for the whole process; the same in tests and production.

    Tests steer them through the environment (``ENVIRONMENT``,
    ``AUTH__BCRYPT_ROUNDS``) rather than a mock provider.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        settings = Settings()
        logfire.debug(
            "Settings loaded",
            environment=settings.environment,
            git_sha=settings.git_sha,
        )
        return settings

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Credential hashing and session token settings."""
        return settings.auth
