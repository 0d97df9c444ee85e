"""PostgreSQL repository implementations."""

from folio.persistence.repository.category import PostgresCategoryRepository
from folio.persistence.repository.journal import PostgresJournalRepository
from folio.persistence.repository.portfolio import PostgresPortfolioRepository
from folio.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresJournalRepository",
    "PostgresTagRepository",
    "PostgresCategoryRepository",
    "PostgresPortfolioRepository",
]
