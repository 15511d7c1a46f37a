"""Container assembly for the API process and the test suite."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from chute.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the container from every registered provider.

    Args:
        mocked: Components to replace with their mock provider; production
            builds leave this empty

    Returns:
        Container that also serves the current ``Request`` (the actor
        provider reads the session token from it)
    """
    provider_instances = []
    for base in PROVIDERS:
        use_mock = base.__mock_component__ in mocked
        provider_instances.append(get_provider(base, use_mock=use_mock)())
    return make_async_container(*provider_instances, FastapiProvider())


def mockable_components() -> set[Component]:
    """Names of the components that ship a mock provider."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None and base.__subclasses__()
    }


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    setup_dishka(container, app)
