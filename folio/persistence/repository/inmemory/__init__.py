"""In-memory repository implementations for testing."""

from .category import InMemoryCategoryRepository
from .journal import InMemoryJournalRepository
from .portfolio import InMemoryPortfolioRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryJournalRepository",
    "InMemoryPortfolioRepository",
    "InMemoryStore",
    "InMemoryTagRepository",
]
