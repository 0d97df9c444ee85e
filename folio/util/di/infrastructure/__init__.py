"""Infrastructure providers."""

# Import bases
from .cache import CacheWarmerProvider, ProdCacheProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .cache import ProdCacheWarmerProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "CacheWarmerProvider",
    "PersistenceProvider",
    "ProdCacheProvider",
    "ProdCacheWarmerProvider",
    "ProdPersistenceProvider",
]
