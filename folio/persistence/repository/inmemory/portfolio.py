"""In-memory portfolio repository for testing."""

from typing import Optional

from folio.domain.model.portfolio import Portfolio
from folio.domain.repository.portfolio import PortfolioRepository
from folio.domain.value import PortfolioId, PublicationStatus, Slug

from .store import InMemoryStore


class InMemoryPortfolioRepository(PortfolioRepository):
    """In-memory implementation of PortfolioRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _portfolios(self) -> dict[PortfolioId, Portfolio]:
        return self._store.portfolios

    async def save(self, portfolio: Portfolio) -> Portfolio:
        """Save a portfolio."""
        self._portfolios[portfolio.id] = portfolio
        return portfolio

    async def find_by_id(self, portfolio_id: PortfolioId) -> Optional[Portfolio]:
        """Find portfolio by ID."""
        return self._portfolios.get(portfolio_id)

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[PortfolioId] = None
    ) -> bool:
        """Check if a slug is used by another portfolio."""
        return any(
            p.slug == slug and p.id != exclude_id for p in self._portfolios.values()
        )

    async def find_published(self, limit: int) -> list[Portfolio]:
        """Find published portfolios, newest first."""
        published = [
            p for p in self._portfolios.values() if p.status == PublicationStatus.PUBLISHED
        ]
        published.sort(key=lambda p: p.published_at, reverse=True)
        return published[:limit]

    async def find_page(self, offset: int, limit: int) -> list[Portfolio]:
        """Find portfolios of any status, oldest first."""
        ordered = sorted(self._portfolios.values(), key=lambda p: p.created_at)
        return ordered[offset : offset + limit]

    async def count(self) -> int:
        """Count all portfolios."""
        return len(self._portfolios)
