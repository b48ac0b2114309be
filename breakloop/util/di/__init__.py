"""Dependency injection wiring.

``PROVIDERS`` lists one class per concern. Concrete providers are used as
they are. Mockable components (those with a ``__mock_component__``) are
abstract bases whose subclasses are the production and mock
implementations; ``get_provider`` picks between them.
"""

from typing import Type

from breakloop.util.di.application import ProdApplicationProvider
from breakloop.util.di.base import Component, ProviderBase
from breakloop.util.di.core import ProdConfigProvider
from breakloop.util.di.domain import ProdDomainProvider
from breakloop.util.di.infrastructure import (
    ClockProvider,
    PersistenceProvider,
    ProdClockProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable
    ClockProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Args:
        base: Entry of ``PROVIDERS``
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the requested implementation is not registered. Mock
            implementations register by being imported (``tests.di``).
    """
    if base.__mock_component__ is None:
        return base

    for impl in base.__subclasses__():
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    # Concrete providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Mockable bases
    "ClockProvider",
    "PersistenceProvider",
    # Production implementations
    "ProdClockProvider",
    "ProdPersistenceProvider",
]
