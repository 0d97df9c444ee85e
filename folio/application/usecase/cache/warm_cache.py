"""Cache warming use cases."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase, ResponseModel
from folio.domain.model.common import utcnow
from folio.util.cache import CacheWarmer


class WarmCacheRequest(BaseModel):
    """Warm cache request.

    The popular paths are resolved against ``base_url``; ``urls`` are taken
    as given.
    """

    base_url: str
    urls: list[str] = Field(default_factory=list)


class WarmCacheResponse(ResponseModel):
    message: str
    requested_urls: list[str]
    warmed_urls: list[str]
    timestamp: datetime


class WarmCacheUseCase(BaseUseCase):
    """Fetch the popular reads (and any extra URLs) so caches are hot."""

    def __init__(self, cache_warmer: CacheWarmer) -> None:
        self.cache_warmer = cache_warmer

    async def execute(self, request: WarmCacheRequest) -> WarmCacheResponse:
        base_url = request.base_url.rstrip("/")
        urls = [f"{base_url}{path}" for path in self.cache_warmer.get_popular_content()]
        urls.extend(request.urls)

        with logfire.span("warm_cache.execute", url_count=len(urls)):
            for url in urls:
                self.cache_warmer.add_to_warming_queue(url)
            warmed = await self.cache_warmer.warm_cache()

        return WarmCacheResponse(
            message="Cache warming completed",
            requested_urls=urls,
            warmed_urls=warmed,
            timestamp=utcnow(),
        )


class GetWarmingStatusRequest(BaseModel):
    pass


class GetWarmingStatusResponse(ResponseModel):
    popular_urls: list[str]
    queued_urls: list[str]
    description: str
    timestamp: datetime


class GetWarmingStatusUseCase(BaseUseCase):
    """List the paths a warm-up run fetches."""

    def __init__(self, cache_warmer: CacheWarmer) -> None:
        self.cache_warmer = cache_warmer

    async def execute(self, request: GetWarmingStatusRequest) -> GetWarmingStatusResponse:
        return GetWarmingStatusResponse(
            popular_urls=self.cache_warmer.get_popular_content(),
            queued_urls=self.cache_warmer.queue,
            description="These URLs are warmed when cache warming is triggered",
            timestamp=utcnow(),
        )
