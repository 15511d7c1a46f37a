"""Stdlib logging setup for the API process."""

import logging
import sys

from chute.config import Settings

# Libraries that log every query or request at INFO
_NOISY_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access", "alembic")

_ENVIRONMENT_LEVELS = {
    "test": logging.WARNING,
    "development": logging.INFO,
    "staging": logging.INFO,
    "production": logging.INFO,
}


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the current environment.

    ``debug`` forces DEBUG for the ``chute`` loggers whatever the environment.
    """
    level = logging.DEBUG if settings.debug else _ENVIRONMENT_LEVELS[settings.environment]

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("chute").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
