"""Portfolio domain service."""

from datetime import datetime
from typing import Any

import logfire
from pydantic import BaseModel

from folio.domain.error import ValidationError
from folio.domain.model.common import utcnow
from folio.domain.model.portfolio import GALLERY_SLOTS, TITLE_MAX_LENGTH, Portfolio
from folio.domain.repository import PortfolioRepository
from folio.domain.value import SEO, PortfolioId, PublicationStatus, Slug
from folio.util.richtext import make_excerpt

from .base import Service
from .content import (
    allocate_slug,
    build_model,
    populate_seo,
    require_title,
    resolve_published_at,
)

BACKFILL_PAGE_SIZE = 50


class BackfillReport(BaseModel):
    """Outcome of a portfolio field backfill run."""

    scanned: int = 0
    updated: int = 0
    failed: int = 0


class PortfolioService(Service):
    """Domain service for portfolio operations."""

    def __init__(self, portfolio_repository: PortfolioRepository) -> None:
        """Initialize portfolio service.

        Args:
            portfolio_repository: Portfolio repository
        """
        self.portfolio_repository = portfolio_repository

    async def list_published(self, limit: int) -> list[Portfolio]:
        """Get published portfolios, newest first."""
        with logfire.span("portfolio_service.list_published", limit=limit):
            portfolios = await self.portfolio_repository.find_published(limit)
            logfire.info("Portfolios retrieved", count=len(portfolios))
            return portfolios

    async def generate_unique_slug(
        self, title: str, portfolio_id: PortfolioId | None = None
    ) -> Slug:
        async def _exists(slug: Slug) -> bool:
            return await self.portfolio_repository.slug_exists(
                slug, exclude_id=portfolio_id
            )

        return await allocate_slug(require_title(title, TITLE_MAX_LENGTH), _exists)

    def build_portfolio(
        self,
        data: dict[str, Any],
        previous: Portfolio | None,
        now: datetime,
    ) -> Portfolio:
        """Apply the derived-field rules and construct the portfolio to write.

        The excerpt defaults to the intro and implementation text joined
        together. Publication date and SEO follow the same rules as journals.

        Raises:
            ValidationError: If any field is invalid
        """
        title = require_title(data.get("title"), TITLE_MAX_LENGTH)

        excerpt = data.get("excerpt")
        excerpt = excerpt.strip() if isinstance(excerpt, str) else None
        if not excerpt:
            parts = [
                data[name]
                for name in ("intro", "implementation")
                if isinstance(data.get(name), str) and data[name]
            ]
            excerpt = make_excerpt(" ".join(parts)) or None

        try:
            status = PublicationStatus(data.get("status") or PublicationStatus.DRAFT)
        except ValueError as e:
            raise ValidationError("Status must be draft or published", field="status") from e

        seo = data.get("seo")
        if isinstance(seo, dict):
            seo = SEO(**seo)

        return build_model(
            Portfolio,
            {
                **data,
                "title": title,
                "excerpt": excerpt,
                "status": status,
                "published_at": resolve_published_at(
                    status,
                    data.get("published_at"),
                    previous.status if previous else None,
                    now,
                ),
                "seo": populate_seo(seo, title, excerpt),
                "created_at": previous.created_at if previous else now,
                "updated_at": now,
            },
        )

    async def save_portfolio(self, portfolio: Portfolio) -> Portfolio:
        with logfire.span(
            "portfolio_service.save_portfolio",
            portfolio_id=str(portfolio.id),
            title=portfolio.title,
        ):
            saved = await self.portfolio_repository.save(portfolio)
            logfire.info("Portfolio saved", portfolio_id=str(saved.id))
            return saved

    async def backfill_missing_fields(
        self, page_size: int = BACKFILL_PAGE_SIZE
    ) -> BackfillReport:
        """Fill optional fields that were never set, without touching set values.

        ``intro`` and ``implementation`` become empty strings and missing
        gallery slots become explicit nulls. Portfolios are processed in pages;
        a portfolio that fails to save is logged and skipped. Running it again
        changes nothing.

        Args:
            page_size: Portfolios loaded per page

        Returns:
            Counts of scanned, updated and failed portfolios
        """
        report = BackfillReport()
        with logfire.span("portfolio_service.backfill_missing_fields", page_size=page_size):
            total = await self.portfolio_repository.count()
            offset = 0
            while offset < total:
                page = await self.portfolio_repository.find_page(offset, page_size)
                if not page:
                    break

                for portfolio in page:
                    report.scanned += 1
                    missing = portfolio.missing_fields
                    if not missing:
                        continue
                    try:
                        await self.portfolio_repository.save(self._fill_missing(portfolio))
                        report.updated += 1
                        logfire.info(
                            "Portfolio backfilled",
                            portfolio_id=str(portfolio.id),
                            fields=missing,
                        )
                    except Exception:
                        report.failed += 1
                        logfire.exception(
                            "Failed to backfill portfolio", portfolio_id=str(portfolio.id)
                        )

                offset += page_size

            logfire.info(
                "Portfolio backfill complete",
                scanned=report.scanned,
                updated=report.updated,
                failed=report.failed,
            )
        return report

    @staticmethod
    def _fill_missing(portfolio: Portfolio) -> Portfolio:
        gallery = {slot: portfolio.gallery.get(slot) for slot in GALLERY_SLOTS}
        return portfolio.model_copy(
            update={
                "intro": "" if portfolio.intro is None else portfolio.intro,
                "implementation": (
                    "" if portfolio.implementation is None else portfolio.implementation
                ),
                "gallery": gallery,
                "updated_at": utcnow(),
            }
        )
