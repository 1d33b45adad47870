"""Infrastructure DI providers."""

from .persistence import PersistenceProvider, ProdPersistenceProvider
from .realtime import RealtimeProvider

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "RealtimeProvider",
]
