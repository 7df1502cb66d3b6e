"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from harvest.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container for the API process.

    Every component uses its production implementation; settings come
    from the environment through ``ProdConfigProvider``.

    Returns:
        Configured DI container with production providers
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to request-scoped providers
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the FastAPI app.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
