"""Provider base for the comments API container."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-memory stand-in for tests
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Dishka provider tagged with the component it implements.

    A mockable component is declared by a base that sets __mock_component__,
    with one production subclass and one mock subclass (__is_mock__ = True).
    Providers without subclasses are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
