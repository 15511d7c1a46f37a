"""Free time use cases."""

from .list_freetime import ListFreetimeRequest, ListFreetimeUseCase
from .remove_freetime import (
    RemoveFreetimeRequest,
    RemoveFreetimeResponse,
    RemoveFreetimeUseCase,
)
from .submit_freetime import (
    FreetimeListResponse,
    Interval,
    SubmitFreetimeRequest,
    SubmitFreetimeUseCase,
    UpdateFreetimeRequest,
    UpdateFreetimeUseCase,
)

__all__ = [
    "FreetimeListResponse",
    "Interval",
    "ListFreetimeRequest",
    "ListFreetimeUseCase",
    "RemoveFreetimeRequest",
    "RemoveFreetimeResponse",
    "RemoveFreetimeUseCase",
    "SubmitFreetimeRequest",
    "SubmitFreetimeUseCase",
    "UpdateFreetimeRequest",
    "UpdateFreetimeUseCase",
]
