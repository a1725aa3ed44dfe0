"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from voteledger.util.di import PROVIDERS, Component


def build_test_container(
    unmock: set[Component] | None = None, with_fastapi: bool = False
) -> AsyncContainer:
    """Build a container with mocks for every swappable component.

    Settings are loaded from environment variables.

    Args:
        unmock: Components to use production implementations for
        with_fastapi: Register FastAPI's request context (for API tests)

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - in-memory votes
        container = build_test_container()

        # Integration tests - PostgreSQL votes
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - swappable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers: list[Provider] = []
    for base in PROVIDERS:
        use_mock = base.is_component() and base.__mock_component__ not in unmock
        providers.append(base.implementation(use_mock=use_mock)())

    if with_fastapi:
        providers.append(FastapiProvider())

    return make_async_container(*providers)


def swappable_components() -> set[str]:
    """Names of the components tests may unmock."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.is_component() and base.__mock_component__
    }
