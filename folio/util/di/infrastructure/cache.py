"""HTTP cache infrastructure providers.

Metrics, the invalidator and the warmer live for the whole process. The
warmer owns an httpx client which is closed when the container closes.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import httpx

from folio.config import CacheSettings
from folio.util.cache import CacheConfigs, CacheInvalidator, CacheMetrics, CacheWarmer
from folio.util.di.base import ProviderBase


class ProdCacheProvider(ProviderBase):
    """Cache bookkeeping provider - concrete, no mocks needed."""

    scope = Scope.APP

    @provide
    def get_cache_metrics(self) -> CacheMetrics:
        """Provide process-wide cache metrics."""
        return CacheMetrics()

    @provide
    def get_cache_invalidator(self, cache_metrics: CacheMetrics) -> CacheInvalidator:
        """Provide cache invalidator."""
        return CacheInvalidator(cache_metrics)

    @provide
    def get_cache_configs(self, cache_settings: CacheSettings) -> CacheConfigs:
        """Provide Cache-Control presets."""
        return CacheConfigs(cache_settings)


class CacheWarmerProvider(ProviderBase):
    """Cache warmer component base."""

    __mock_component__ = "cache_warmer"


class ProdCacheWarmerProvider(CacheWarmerProvider):
    """Production cache warmer sending real HTTP requests."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_cache_warmer(
        self, cache_settings: CacheSettings
    ) -> AsyncIterator[CacheWarmer]:
        """Provide cache warmer backed by a pooled httpx client."""
        client = httpx.AsyncClient(
            timeout=cache_settings.warm_timeout_seconds, follow_redirects=True
        )
        warmer = CacheWarmer(
            client,
            popular_paths=cache_settings.popular_paths,
            batch_size=cache_settings.warm_batch_size,
        )
        yield warmer
        await warmer.aclose()
