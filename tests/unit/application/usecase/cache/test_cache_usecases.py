"""Unit tests for the cache administration use cases."""

import pytest

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
from folio.domain.error import ValidationError
from folio.util.cache import CacheMetrics
from tests.di.cache import UNREACHABLE_HOST
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCacheMetricsUseCases:
    @pytest.mark.asyncio
    async def test_reports_recorded_counters(self, unit_env):
        metrics = await unit_env.get(CacheMetrics)
        metrics.record_hit("tags:list")
        metrics.record_miss("tags:list")
        use_case = await unit_env.get(GetCacheMetricsUseCase)

        result = await use_case.execute(GetCacheMetricsRequest())

        assert result.overall.total_requests == 2
        assert result.overall.hit_rate == "50.00%"
        assert result.by_endpoint["tags:list"].hits == 1

    @pytest.mark.asyncio
    async def test_clear_keeps_recent(self, unit_env):
        metrics = await unit_env.get(CacheMetrics)
        metrics.record_hit("tags:list")
        use_case = await unit_env.get(ClearCacheMetricsUseCase)

        result = await use_case.execute(ClearCacheMetricsRequest(hours=1))

        assert result.removed == 0
        assert result.message == "Cleared metrics older than 1 hours"
        assert metrics.keys() == ["tags:list"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("hours", [0, -5])
    async def test_clear_rejects_non_positive_hours(self, unit_env, hours):
        use_case = await unit_env.get(ClearCacheMetricsUseCase)

        with pytest.raises(ValidationError, match="Invalid hours parameter"):
            await use_case.execute(ClearCacheMetricsRequest(hours=hours))


class TestWarmCache:
    @pytest.mark.asyncio
    async def test_warms_popular_and_extra_urls(self, unit_env):
        use_case = await unit_env.get(WarmCacheUseCase)

        result = await use_case.execute(
            WarmCacheRequest(
                base_url="http://testserver/",
                urls=[
                    "http://testserver/api/portfolios",
                    f"http://{UNREACHABLE_HOST}/api/tags",
                ],
            )
        )

        assert result.requested_urls[0].startswith("http://testserver/api/journals")
        assert "http://testserver/api/portfolios" in result.warmed_urls
        assert f"http://{UNREACHABLE_HOST}/api/tags" not in result.warmed_urls
        assert len(result.warmed_urls) == len(result.requested_urls) - 1

    @pytest.mark.asyncio
    async def test_status_lists_popular_paths(self, unit_env):
        use_case = await unit_env.get(GetWarmingStatusUseCase)

        result = await use_case.execute(GetWarmingStatusRequest())

        assert "/api/tags" in result.popular_urls
        assert result.queued_urls == []
