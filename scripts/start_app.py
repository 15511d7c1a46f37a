#!/usr/bin/env python3
"""Serve the Chute API under uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from chute.config import Settings
from chute.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    logfire.info(
        "Starting Chute API",
        environment=settings.environment,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "chute.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development",
        )
    except Exception as e:
        logfire.error(
            "API startup failed",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
