"""PostgreSQL implementation of Portfolio repository."""

from typing import Optional

import logfire
from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model.portfolio import Portfolio
from folio.domain.repository.portfolio import PortfolioRepository
from folio.domain.value import PortfolioId, PublicationStatus, Slug
from folio.persistence.mappers import portfolio_to_dict, row_to_portfolio
from folio.persistence.tables import portfolios_table


class PostgresPortfolioRepository(PortfolioRepository):
    """PostgreSQL implementation of PortfolioRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, portfolio: Portfolio) -> Portfolio:
        """Save or update a portfolio."""
        with logfire.span("portfolio_repository.save", portfolio_id=str(portfolio.id)):
            portfolio_dict = portfolio_to_dict(portfolio)

            # Savepoint keeps one failed document from aborting a batch run
            async with self.session.begin_nested():
                existing = await self.session.execute(
                    select(portfolios_table.c.id).where(
                        portfolios_table.c.id == portfolio.id
                    )
                )
                if existing.fetchone():
                    stmt = (
                        update(portfolios_table)
                        .where(portfolios_table.c.id == portfolio.id)
                        .values(**portfolio_dict)
                    )
                else:
                    stmt = insert(portfolios_table).values(**portfolio_dict)
                await self.session.execute(stmt)

            await self.session.flush()
            return portfolio

    async def find_by_id(self, portfolio_id: PortfolioId) -> Optional[Portfolio]:
        """Find portfolio by ID."""
        stmt = select(portfolios_table).where(portfolios_table.c.id == portfolio_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_portfolio(row._asdict()) if row else None

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[PortfolioId] = None
    ) -> bool:
        """Check if a slug is used by another portfolio."""
        stmt = (
            select(func.count())
            .select_from(portfolios_table)
            .where(portfolios_table.c.slug == slug.root)
        )
        if exclude_id is not None:
            stmt = stmt.where(portfolios_table.c.id != exclude_id)
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def find_published(self, limit: int) -> list[Portfolio]:
        """Find published portfolios, newest first."""
        stmt = (
            select(portfolios_table)
            .where(portfolios_table.c.status == PublicationStatus.PUBLISHED.value)
            .order_by(portfolios_table.c.published_at.desc(), portfolios_table.c.id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_portfolio(row._asdict()) for row in result.fetchall()]

    async def find_page(self, offset: int, limit: int) -> list[Portfolio]:
        """Find portfolios of any status, oldest first."""
        stmt = (
            select(portfolios_table)
            .order_by(portfolios_table.c.created_at, portfolios_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_portfolio(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all portfolios."""
        stmt = select(func.count()).select_from(portfolios_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
