"""Base class for dishka providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable test implementation. Only storage is swapped;
# the push hub is in-process in every environment.
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider with mock metadata.

    A base provider with subclasses is a mockable component named by
    `__mock_component__`; `get_provider` picks the subclass whose
    `__is_mock__` matches the environment. A provider without subclasses is
    used as-is in production and tests alike.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
