"""Backfill portfolio fields use case."""

import logfire
from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase, ResponseModel
from folio.domain.service import PortfolioService
from folio.domain.service.portfolio_service import BACKFILL_PAGE_SIZE


class BackfillPortfolioFieldsRequest(BaseModel):
    page_size: int = Field(default=BACKFILL_PAGE_SIZE, ge=1)


class BackfillPortfolioFieldsResponse(ResponseModel):
    scanned: int
    updated: int
    failed: int


class BackfillPortfolioFieldsUseCase(BaseUseCase):
    """Fill never-set portfolio fields after a schema change."""

    def __init__(self, portfolio_service: PortfolioService) -> None:
        self.portfolio_service = portfolio_service

    async def execute(
        self, request: BackfillPortfolioFieldsRequest
    ) -> BackfillPortfolioFieldsResponse:
        with logfire.span("backfill_portfolio_fields.execute", page_size=request.page_size):
            report = await self.portfolio_service.backfill_missing_fields(
                page_size=request.page_size
            )
            return BackfillPortfolioFieldsResponse(**report.model_dump())
