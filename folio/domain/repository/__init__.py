"""Repository interfaces for Folio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from folio.domain.repository.category import CategoryRepository
from folio.domain.repository.journal import JournalRepository
from folio.domain.repository.portfolio import PortfolioRepository
from folio.domain.repository.tag import TagRepository

__all__ = [
    "JournalRepository",
    "TagRepository",
    "CategoryRepository",
    "PortfolioRepository",
]
