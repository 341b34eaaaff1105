"""Dependency injection wiring for the comments API."""

from typing import Type

from lostfound.util.di.application import ProdApplicationProvider
from lostfound.util.di.base import Component, ProviderBase
from lostfound.util.di.core import ProdConfigProvider
from lostfound.util.di.domain import ProdDomainProvider
from lostfound.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Settings -> repositories -> domain services -> use cases
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    PersistenceProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
]


def mockable_components() -> set[Component]:
    """Components that have a mock implementation registered."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
        and any(impl.__is_mock__ for impl in base.__subclasses__())
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a PROVIDERS entry.

    Concrete providers come back unchanged. For a mockable component the
    subclass whose __is_mock__ equals use_mock is returned.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = {impl.__is_mock__: impl for impl in base.__subclasses__()}
    if not implementations:
        return base
    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        name = base.__mock_component__ or base.__name__
        raise ValueError(f"No {kind} implementation for {name}") from None


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "mockable_components",
]
