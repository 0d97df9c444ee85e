"""Domain model entities for Folio."""

from folio.domain.model.category import Category
from folio.domain.model.journal import Journal, JournalQuery
from folio.domain.model.portfolio import Portfolio
from folio.domain.model.tag import Tag

__all__ = [
    "Journal",
    "JournalQuery",
    "Tag",
    "Category",
    "Portfolio",
]
