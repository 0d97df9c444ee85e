"""Get cache metrics use case."""

from datetime import datetime

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase, ResponseModel
from folio.domain.model.common import utcnow
from folio.util.cache import CacheMetrics


class GetCacheMetricsRequest(BaseModel):
    pass


class OverallCacheStats(ResponseModel):
    total_hits: int
    total_misses: int
    total_requests: int
    hit_rate: str


class EndpointCacheStats(ResponseModel):
    hits: int
    misses: int
    last_access: datetime
    total: int
    hit_rate: str


class GetCacheMetricsResponse(ResponseModel):
    overall: OverallCacheStats
    by_endpoint: dict[str, EndpointCacheStats]
    timestamp: datetime


class GetCacheMetricsUseCase(BaseUseCase):
    """Report hit/miss counters, overall and per cache key."""

    def __init__(self, cache_metrics: CacheMetrics) -> None:
        self.cache_metrics = cache_metrics

    async def execute(self, request: GetCacheMetricsRequest) -> GetCacheMetricsResponse:
        return GetCacheMetricsResponse(
            overall=OverallCacheStats(**self.cache_metrics.overall()),
            by_endpoint={
                key: EndpointCacheStats(**snapshot.model_dump())
                for key, snapshot in self.cache_metrics.get_metrics().items()
            },
            timestamp=utcnow(),
        )
