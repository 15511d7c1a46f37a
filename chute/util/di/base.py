"""Provider base shared by the config, domain, use case and storage providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that can be swapped for an in-process fake in tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """dishka provider carrying the metadata ``get_provider`` selects on.

    A provider listed in ``PROVIDERS`` with subclasses is mockable: one
    subclass sets ``__is_mock__`` and is picked when its ``__mock_component__``
    is mocked, the other serves production.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
