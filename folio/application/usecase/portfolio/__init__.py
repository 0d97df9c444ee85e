"""Portfolio use cases."""

from .backfill_portfolio_fields import (
    BackfillPortfolioFieldsRequest,
    BackfillPortfolioFieldsResponse,
    BackfillPortfolioFieldsUseCase,
)
from .create_portfolio import (
    CreatePortfolioRequest,
    CreatePortfolioResponse,
    CreatePortfolioUseCase,
)
from .list_portfolios import (
    ListPortfoliosRequest,
    ListPortfoliosResponse,
    ListPortfoliosUseCase,
)

__all__ = [
    "BackfillPortfolioFieldsRequest",
    "BackfillPortfolioFieldsResponse",
    "BackfillPortfolioFieldsUseCase",
    "CreatePortfolioRequest",
    "CreatePortfolioResponse",
    "CreatePortfolioUseCase",
    "ListPortfoliosRequest",
    "ListPortfoliosResponse",
    "ListPortfoliosUseCase",
]
