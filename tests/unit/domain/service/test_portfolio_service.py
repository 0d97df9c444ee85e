"""Unit tests for PortfolioService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from folio.domain.error import ValidationError
from folio.domain.model import Portfolio
from folio.domain.model.portfolio import GALLERY_SLOTS
from folio.domain.service import PortfolioService
from folio.domain.value import MediaId, PortfolioId, Slug
from folio.persistence.repository.inmemory import (
    InMemoryPortfolioRepository,
    InMemoryStore,
)

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_portfolio(n: int, **fields) -> Portfolio:
    return Portfolio(
        id=PortfolioId(uuid4()),
        title=f"Project {n}",
        slug=Slug(f"project-{n}"),
        created_at=START + timedelta(minutes=n),
        **fields,
    )


class FailingPortfolioRepository(InMemoryPortfolioRepository):
    def __init__(self, store: InMemoryStore, failing_id: PortfolioId) -> None:
        super().__init__(store)
        self.failing_id = failing_id

    async def save(self, portfolio: Portfolio) -> Portfolio:
        if portfolio.id == self.failing_id:
            raise RuntimeError("disk full")
        return await super().save(portfolio)


class TestBackfillMissingFields:
    @pytest.mark.asyncio
    async def test_fills_only_unset_fields(self):
        repo = InMemoryPortfolioRepository()
        cover = MediaId(uuid4())
        partial = await repo.save(
            make_portfolio(1, intro="Kept", gallery={"image1": cover})
        )

        report = await PortfolioService(repo).backfill_missing_fields()

        assert (report.scanned, report.updated, report.failed) == (1, 1, 0)
        filled = await repo.find_by_id(partial.id)
        assert filled.intro == "Kept"
        assert filled.implementation == ""
        assert filled.gallery["image1"] == cover
        assert set(filled.gallery) == set(GALLERY_SLOTS)
        assert filled.gallery["image8"] is None
        assert filled.missing_fields == []

    @pytest.mark.asyncio
    async def test_second_run_changes_nothing(self):
        repo = InMemoryPortfolioRepository()
        for n in range(3):
            await repo.save(make_portfolio(n))
        service = PortfolioService(repo)

        await service.backfill_missing_fields(page_size=2)
        report = await service.backfill_missing_fields(page_size=2)

        assert (report.scanned, report.updated) == (3, 0)

    @pytest.mark.asyncio
    async def test_pages_through_everything(self):
        repo = InMemoryPortfolioRepository()
        for n in range(5):
            await repo.save(make_portfolio(n))

        report = await PortfolioService(repo).backfill_missing_fields(page_size=2)

        assert (report.scanned, report.updated) == (5, 5)

    @pytest.mark.asyncio
    async def test_failed_save_is_counted_and_skipped(self):
        store = InMemoryStore()
        stuck = make_portfolio(1)
        repo = FailingPortfolioRepository(store, failing_id=stuck.id)
        store.portfolios[stuck.id] = stuck
        await repo.save(make_portfolio(2))

        report = await PortfolioService(repo).backfill_missing_fields()

        assert (report.scanned, report.updated, report.failed) == (2, 1, 1)
        assert (await repo.find_by_id(stuck.id)).intro is None


class TestBuildPortfolio:
    def test_excerpt_from_intro_and_implementation(self):
        service = PortfolioService(InMemoryPortfolioRepository())

        portfolio = service.build_portfolio(
            {
                "id": PortfolioId(uuid4()),
                "slug": Slug("brand"),
                "title": "Brand",
                "intro": "A rebrand.",
                "implementation": "Built in Figma.",
                "status": "published",
            },
            previous=None,
            now=START,
        )

        assert portfolio.excerpt == "A rebrand. Built in Figma."
        assert portfolio.published_at == START
        assert portfolio.seo.description == "A rebrand. Built in Figma."

    def test_rejects_long_title(self):
        service = PortfolioService(InMemoryPortfolioRepository())

        with pytest.raises(ValidationError) as exc:
            service.build_portfolio(
                {"id": PortfolioId(uuid4()), "slug": Slug("long"), "title": "x" * 141},
                previous=None,
                now=START,
            )

        assert exc.value.field == "title"
        assert str(exc.value) == "Title must be 140 characters or less"

    @pytest.mark.asyncio
    async def test_blank_title_rejected_before_slug(self):
        service = PortfolioService(InMemoryPortfolioRepository())

        with pytest.raises(ValidationError) as exc:
            await service.generate_unique_slug("  ")

        assert str(exc.value) == "Title cannot be empty"
