"""Translation of storage failures into domain errors."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from chute.domain.error import ConflictError, InternalError


@asynccontextmanager
async def storage_errors(operation: str) -> AsyncIterator[None]:
    """Re-raise driver errors as ConflictError or InternalError.

    Unique and foreign-key violations become ConflictError; every other
    SQLAlchemy failure becomes InternalError with the driver message.

    Usage:
        async with storage_errors("credential.save"):
            await self.session.execute(stmt)
    """
    try:
        yield
    except IntegrityError as e:
        logfire.warn("Integrity violation", operation=operation, error=str(e.orig))
        raise ConflictError(f"{operation}: {e.orig}") from e
    except SQLAlchemyError as e:
        logfire.error("Storage failure", operation=operation, error=str(e))
        raise InternalError(f"{operation}: {e}") from e
