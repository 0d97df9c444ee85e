"""Cache administration routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from folio.application.usecase.cache import (
    ClearCacheMetricsRequest,
    ClearCacheMetricsUseCase,
    GetCacheMetricsRequest,
    GetCacheMetricsUseCase,
    GetWarmingStatusRequest,
    GetWarmingStatusUseCase,
    WarmCacheRequest,
    WarmCacheUseCase,
)
from folio.interface.api.response import success_response

router = APIRouter(prefix="/api/cache", tags=["cache"], route_class=DishkaRoute)


class WarmCacheAPIRequest(BaseModel):
    """API request for warming the cache."""

    urls: list[str] = Field(default_factory=list)


@router.get("/metrics", summary="Cache hit/miss metrics")
async def get_cache_metrics(
    use_case: FromDishka[GetCacheMetricsUseCase],
) -> JSONResponse:
    result = await use_case.execute(GetCacheMetricsRequest())
    return success_response(result)


@router.delete("/metrics", summary="Clear stale cache metrics")
async def clear_cache_metrics(
    use_case: FromDishka[ClearCacheMetricsUseCase],
    hours: str | None = None,
) -> JSONResponse:
    """Drop metrics for keys not accessed in the last ``hours`` (default 24).

    Example:
        DELETE /api/cache/metrics?hours=6
    """
    try:
        window = int(hours) if hours else 24
    except ValueError:
        window = 0  # rejected by the use case
    result = await use_case.execute(ClearCacheMetricsRequest(hours=window))
    return success_response(result)


@router.get("/warm", summary="Cache warming status")
async def get_warming_status(
    use_case: FromDishka[GetWarmingStatusUseCase],
) -> JSONResponse:
    result = await use_case.execute(GetWarmingStatusRequest())
    return success_response(result)


@router.post("/warm", summary="Warm caches for popular content")
async def warm_cache(
    request: Request,
    use_case: FromDishka[WarmCacheUseCase],
    body: WarmCacheAPIRequest | None = Body(default=None),
) -> JSONResponse:
    """Fetch the popular reads plus any ``urls`` from the body.

    Popular paths are resolved against the host the request came in on.
    """
    base_url = str(request.base_url)
    urls = body.urls if body else []
    with logfire.span("api.warm_cache", base_url=base_url, extra_urls=len(urls)):
        result = await use_case.execute(WarmCacheRequest(base_url=base_url, urls=urls))
        return success_response(result)
