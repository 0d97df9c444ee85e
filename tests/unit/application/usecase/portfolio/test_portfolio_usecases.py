"""Unit tests for the portfolio use cases."""

from uuid import uuid4

import pytest

from folio.application.usecase.portfolio import (
    BackfillPortfolioFieldsRequest,
    BackfillPortfolioFieldsUseCase,
    CreatePortfolioRequest,
    CreatePortfolioUseCase,
    ListPortfoliosRequest,
    ListPortfoliosUseCase,
)
from folio.domain.error import ValidationError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create_portfolio(env, title: str, **fields):
    use_case = await env.get(CreatePortfolioUseCase)
    return (await use_case.execute(CreatePortfolioRequest(title=title, **fields))).portfolio


class TestCreatePortfolio:
    @pytest.mark.asyncio
    async def test_creates_published_portfolio(self, unit_env):
        cover = str(uuid4())

        portfolio = await create_portfolio(
            unit_env,
            "Brand Refresh",
            year=2024,
            categories=["branding", "ui-ux"],
            cover_image_id=cover,
            intro="New identity.",
            gallery={"image1": cover, "image2": None},
            status="published",
        )

        assert portfolio.slug == "brand-refresh"
        assert portfolio.categories == ["branding", "ui-ux"]
        assert portfolio.gallery == {"image1": cover, "image2": None}
        assert portfolio.excerpt == "New identity."
        assert portfolio.published_at is not None

    @pytest.mark.asyncio
    async def test_unknown_gallery_slot(self, unit_env):
        with pytest.raises(ValidationError, match="Unknown gallery slots"):
            await create_portfolio(unit_env, "Bad Gallery", gallery={"image9": None})

    @pytest.mark.asyncio
    async def test_unknown_category(self, unit_env):
        with pytest.raises(ValidationError):
            await create_portfolio(unit_env, "Bad Category", categories=["sculpture"])


class TestListPortfolios:
    @pytest.mark.asyncio
    async def test_only_published(self, unit_env):
        await create_portfolio(unit_env, "Shown", status="published")
        await create_portfolio(unit_env, "Hidden")
        use_case = await unit_env.get(ListPortfoliosUseCase)

        result = await use_case.execute(ListPortfoliosRequest())

        assert [p.title for p in result.docs] == ["Shown"]
        assert result.total_docs == 1


class TestBackfillPortfolioFields:
    @pytest.mark.asyncio
    async def test_reports_counts(self, unit_env):
        await create_portfolio(unit_env, "Old One")
        await create_portfolio(
            unit_env,
            "Complete",
            intro="",
            implementation="",
            gallery={f"image{i}": None for i in range(1, 9)},
        )
        use_case = await unit_env.get(BackfillPortfolioFieldsUseCase)

        result = await use_case.execute(BackfillPortfolioFieldsRequest(page_size=1))

        assert (result.scanned, result.updated, result.failed) == (2, 1, 0)
