"""List portfolios use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from folio.application.usecase.base import ResponseModel
from folio.application.usecase.items import PortfolioItem
from folio.domain.service import PortfolioService


class ListPortfoliosRequest(BaseModel):
    """List portfolios request."""

    limit: int = Field(default=50, ge=1, le=100)


class ListPortfoliosResponse(ResponseModel):
    """List portfolios response."""

    docs: list[PortfolioItem]
    total_docs: int
    last_modified: datetime | None = Field(default=None, exclude=True)


class ListPortfoliosUseCase:
    """Use case for listing published portfolios, newest first."""

    def __init__(self, portfolio_service: PortfolioService) -> None:
        self.portfolio_service = portfolio_service

    async def execute(self, request: ListPortfoliosRequest) -> ListPortfoliosResponse:
        with logfire.span("list_portfolios.execute", limit=request.limit):
            portfolios = await self.portfolio_service.list_published(request.limit)
            return ListPortfoliosResponse(
                docs=[PortfolioItem.from_portfolio(p) for p in portfolios],
                total_docs=len(portfolios),
                last_modified=max((p.updated_at for p in portfolios), default=None),
            )
