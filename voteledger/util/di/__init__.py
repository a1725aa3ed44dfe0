"""Dependency injection module."""

from typing import Type

from voteledger.util.di.application import ProdApplicationProvider
from voteledger.util.di.base import Component, DependencyInjectionError, ProviderBase
from voteledger.util.di.core import ProdConfigProvider
from voteledger.util.di.domain import ProdDomainProvider
from voteledger.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Config, domain and application are concrete; persistence is swapped in tests
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get the provider class to instantiate for an entry of PROVIDERS.

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    return base.implementation(use_mock=use_mock)


__all__ = [
    "Component",
    "DependencyInjectionError",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
