"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chute.config import Settings
from chute.interface.api.routes import auth, freetime, health, invites, profiles
from chute.interface.error import register_error_handlers
from chute.util.di.container import create_container, setup_di
from chute.util.logging import setup_logging
from chute.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container when omitted
    """
    settings = Settings()
    setup_logging(settings)

    app_instance = FastAPI(
        title="Chute API",
        description="Backend API for Chute - arranging photo shoots between models and photographers",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            settings.auth.token_header,
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes; auth first so POST /profiles/self wins over /profiles/{id}
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(profiles.router)
    app_instance.include_router(freetime.router)
    app_instance.include_router(invites.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
