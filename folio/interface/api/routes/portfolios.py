"""Portfolio routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response

from folio.application.usecase.portfolio import (
    ListPortfoliosRequest,
    ListPortfoliosUseCase,
)
from folio.config import Settings
from folio.interface.api.response import cached_response
from folio.interface.api.routes.params import parse_limit
from folio.util.cache import CacheConfigs, CacheKey, CacheMetrics, generate_cache_key

router = APIRouter(prefix="/api/portfolios", tags=["portfolios"], route_class=DishkaRoute)


@router.get(
    "",
    summary="List portfolios",
    description="Published portfolio entries, newest first.",
)
async def list_portfolios(
    request: Request,
    use_case: FromDishka[ListPortfoliosUseCase],
    settings: FromDishka[Settings],
    cache_configs: FromDishka[CacheConfigs],
    cache_metrics: FromDishka[CacheMetrics],
    limit: str | None = None,
) -> Response:
    list_request = ListPortfoliosRequest(
        limit=parse_limit(
            limit,
            ListPortfoliosRequest.model_fields["limit"].default,
            settings.pagination.max_limit,
        )
    )

    with logfire.span("api.list_portfolios", limit=list_request.limit):
        result = await use_case.execute(list_request)
        return cached_response(
            request,
            result,
            cache_key=generate_cache_key(
                CacheKey(
                    collection="portfolios",
                    operation="list",
                    params={"limit": list_request.limit},
                )
            ),
            cache_config=cache_configs.portfolios,
            metrics=cache_metrics,
            last_modified=result.last_modified,
        )
