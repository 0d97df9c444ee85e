"""Portfolio repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.portfolio import Portfolio
from folio.domain.value import PortfolioId, Slug


class PortfolioRepository(ABC):
    """Repository interface for Portfolio aggregate."""

    @abstractmethod
    async def save(self, portfolio: Portfolio) -> Portfolio:
        """Save or update a portfolio.

        Args:
            portfolio: Portfolio to save

        Returns:
            Saved portfolio
        """
        pass

    @abstractmethod
    async def find_by_id(self, portfolio_id: PortfolioId) -> Optional[Portfolio]:
        """Find portfolio by ID."""
        pass

    @abstractmethod
    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[PortfolioId] = None
    ) -> bool:
        """Check whether a slug is already used by another portfolio."""
        pass

    @abstractmethod
    async def find_published(self, limit: int) -> list[Portfolio]:
        """Find published portfolios, most recently published first.

        Args:
            limit: Maximum number of portfolios to return

        Returns:
            Published portfolios
        """
        pass

    @abstractmethod
    async def find_page(self, offset: int, limit: int) -> list[Portfolio]:
        """Find portfolios of any status in a stable order (oldest first).

        Args:
            offset: Number of portfolios to skip
            limit: Maximum number of portfolios to return

        Returns:
            One page of portfolios
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all portfolios."""
        pass
