"""Domain services."""

from .base import Service
from .category_service import CategoryService
from .journal_service import JournalService
from .portfolio_service import BackfillReport, PortfolioService
from .tag_maintenance import TagCountService, TagDeletionService
from .tag_service import TagService

__all__ = [
    "BackfillReport",
    "CategoryService",
    "JournalService",
    "PortfolioService",
    "Service",
    "TagCountService",
    "TagDeletionService",
    "TagService",
]
