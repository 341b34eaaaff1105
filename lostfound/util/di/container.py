"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from lostfound.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every production provider; Settings come from the env."""
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve FromDishka dependencies of app from container.

    The container is closed on application shutdown, which disposes the
    database engine.
    """
    setup_dishka(container, app)
