"""Cache administration use cases."""

from .clear_cache_metrics import (
    ClearCacheMetricsRequest,
    ClearCacheMetricsResponse,
    ClearCacheMetricsUseCase,
)
from .get_cache_metrics import (
    GetCacheMetricsRequest,
    GetCacheMetricsResponse,
    GetCacheMetricsUseCase,
)
from .warm_cache import (
    GetWarmingStatusRequest,
    GetWarmingStatusResponse,
    GetWarmingStatusUseCase,
    WarmCacheRequest,
    WarmCacheResponse,
    WarmCacheUseCase,
)

__all__ = [
    "ClearCacheMetricsRequest",
    "ClearCacheMetricsResponse",
    "ClearCacheMetricsUseCase",
    "GetCacheMetricsRequest",
    "GetCacheMetricsResponse",
    "GetCacheMetricsUseCase",
    "GetWarmingStatusRequest",
    "GetWarmingStatusResponse",
    "GetWarmingStatusUseCase",
    "WarmCacheRequest",
    "WarmCacheResponse",
    "WarmCacheUseCase",
]
