"""Clear cache metrics use case."""

from datetime import datetime, timedelta

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase, ResponseModel
from folio.domain.error import ValidationError
from folio.domain.model.common import utcnow
from folio.util.cache import CacheMetrics


class ClearCacheMetricsRequest(BaseModel):
    hours: int = 24


class ClearCacheMetricsResponse(ResponseModel):
    message: str
    removed: int
    cleared_at: datetime


class ClearCacheMetricsUseCase(BaseUseCase):
    """Drop counters for cache keys not accessed in the last ``hours``."""

    def __init__(self, cache_metrics: CacheMetrics) -> None:
        self.cache_metrics = cache_metrics

    async def execute(self, request: ClearCacheMetricsRequest) -> ClearCacheMetricsResponse:
        """Execute clear metrics flow.

        Raises:
            ValidationError: If ``hours`` is below one
        """
        if request.hours < 1:
            raise ValidationError(
                "Invalid hours parameter. Must be a positive integer.", field="hours"
            )

        removed = self.cache_metrics.clear_old_metrics(timedelta(hours=request.hours))
        logfire.info("Cache metrics cleared", hours=request.hours, removed=removed)

        return ClearCacheMetricsResponse(
            message=f"Cleared metrics older than {request.hours} hours",
            removed=removed,
            cleared_at=utcnow(),
        )
