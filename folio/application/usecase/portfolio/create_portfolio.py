"""Create portfolio use case."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from folio.application.usecase.base import ResponseModel
from folio.application.usecase.items import PortfolioItem
from folio.domain.model.common import utcnow
from folio.domain.service import PortfolioService
from folio.domain.value import PortfolioId


class CreatePortfolioRequest(BaseModel):
    """Create portfolio request.

    Gallery slots left out of ``gallery`` stay unset; slots given as None are
    stored as explicitly empty.
    """

    title: str
    year: int | None = None
    categories: list[str] = Field(default_factory=list)
    cover_image_id: str | None = None
    intro: str | None = None
    implementation: str | None = None
    gallery: dict[str, str | None] = Field(default_factory=dict)
    excerpt: str | None = None
    description: str | None = None
    status: str = "draft"
    published_at: datetime | None = None
    seo: dict[str, Any] | None = None


class CreatePortfolioResponse(ResponseModel):
    """Create portfolio response."""

    portfolio: PortfolioItem


class CreatePortfolioUseCase:
    """Use case for creating a portfolio entry."""

    def __init__(self, portfolio_service: PortfolioService) -> None:
        self.portfolio_service = portfolio_service

    async def execute(self, request: CreatePortfolioRequest) -> CreatePortfolioResponse:
        """Execute create portfolio flow.

        Raises:
            ValidationError: If any field is invalid
        """
        with logfire.span("create_portfolio.execute", title=request.title):
            portfolio = self.portfolio_service.build_portfolio(
                {
                    **request.model_dump(),
                    "id": PortfolioId(uuid4()),
                    "slug": await self.portfolio_service.generate_unique_slug(
                        request.title
                    ),
                },
                previous=None,
                now=utcnow(),
            )

            saved = await self.portfolio_service.save_portfolio(portfolio)
            logfire.info(
                "Portfolio created",
                portfolio_id=str(saved.id),
                slug=saved.slug.root,
                status=saved.status.value,
            )
            return CreatePortfolioResponse(portfolio=PortfolioItem.from_portfolio(saved))
