"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Components with a production and a test implementation
Component = Literal["persistence"]


class DependencyInjectionError(Exception):
    """Raised when a component has no implementation of the requested kind."""

    pass


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class with no subclasses is concrete and used as-is. A class
    with subclasses names a swappable component in ``__mock_component__``;
    its subclasses set ``__is_mock__`` to say which one tests get.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_component(cls) -> bool:
        """True if this class is swapped between production and tests."""
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> Type["ProviderBase"]:
        """The provider class to instantiate for this component.

        Raises:
            DependencyInjectionError: If no implementation of that kind exists
        """
        if not cls.is_component():
            return cls

        by_kind = {impl.__is_mock__: impl for impl in cls.__subclasses__()}
        if use_mock not in by_kind:
            kind = "mock" if use_mock else "production"
            component = cls.__mock_component__ or cls.__name__
            raise DependencyInjectionError(f"No {kind} implementation for {component}")
        return by_kind[use_mock]
