"""Mock providers for testing."""

from .cache import MockCacheWarmerProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockCacheWarmerProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
