"""Unit tests for HTTP caching utilities."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest

from folio.config import CacheSettings
from folio.util.cache import (
    CacheConfig,
    CacheConfigs,
    CacheInvalidator,
    CacheKey,
    CacheMetrics,
    CacheWarmer,
    check_cache_headers,
    generate_cache_control,
    generate_cache_key,
    generate_etag,
)

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class FakeRequest:
    def __init__(self, **headers: str) -> None:
        self.headers = {k.replace("_", "-"): v for k, v in headers.items()}


class TestGenerateCacheKey:
    def test_without_params(self):
        assert generate_cache_key(CacheKey(collection="tags", operation="list")) == (
            "tags:list"
        )

    def test_empty_params_same_as_none(self):
        key = CacheKey(collection="tags", operation="list", params={})

        assert generate_cache_key(key) == "tags:list"

    def test_param_order_does_not_matter(self):
        a = CacheKey(
            collection="journals",
            operation="list",
            params={"page": 1, "limit": 10, "search": "react"},
        )
        b = CacheKey(
            collection="journals",
            operation="list",
            params={"search": "react", "limit": 10, "page": 1},
        )

        assert generate_cache_key(a) == generate_cache_key(b)

    def test_different_params_differ(self):
        a = CacheKey(collection="journals", operation="list", params={"page": 1})
        b = CacheKey(collection="journals", operation="list", params={"page": 2})

        key_a = generate_cache_key(a)
        assert key_a.startswith("journals:list:")
        assert len(key_a.rsplit(":", 1)[1]) == 32
        assert key_a != generate_cache_key(b)


class TestGenerateEtag:
    def test_deterministic_and_quoted(self):
        etag = generate_etag({"b": 2, "a": 1}, NOW)

        assert etag == generate_etag({"a": 1, "b": 2}, NOW)
        assert etag.startswith('"') and etag.endswith('"')
        assert len(etag) == 34

    def test_last_modified_changes_etag(self):
        data = {"id": "1"}

        assert generate_etag(data, NOW) != generate_etag(data, NOW + timedelta(seconds=1))
        assert generate_etag(data) != generate_etag(data, NOW)

    def test_data_changes_etag(self):
        assert generate_etag([1, 2]) != generate_etag([2, 1])


class TestGenerateCacheControl:
    def test_public_with_stale_while_revalidate(self):
        config = CacheConfig(max_age=3600, stale_while_revalidate=300)

        assert generate_cache_control(config) == (
            "public, max-age=3600, stale-while-revalidate=300"
        )

    def test_private(self):
        assert generate_cache_control(CacheConfig(max_age=1800, private=True)) == (
            "private, max-age=1800"
        )

    def test_no_cache_replaces_max_age(self):
        config = CacheConfig(max_age=60, stale_while_revalidate=30, no_cache=True)

        assert generate_cache_control(config) == "public, no-cache"

    def test_must_revalidate_last(self):
        config = CacheConfig(max_age=0, must_revalidate=True)

        assert generate_cache_control(config) == "public, max-age=0, must-revalidate"


class TestCacheConfigs:
    def test_presets_follow_settings(self):
        configs = CacheConfigs(CacheSettings())

        assert configs.journal_list.max_age == 1800
        assert configs.journal_list.stale_while_revalidate == 300
        assert configs.journal_entry_published.max_age == 3600
        assert configs.journal_entry_draft.max_age == 300
        assert configs.tags.max_age == 86400
        assert configs.categories.stale_while_revalidate == 3600
        assert configs.search_results.stale_while_revalidate == 120

    def test_durations_are_configurable(self):
        configs = CacheConfigs(CacheSettings(short=10, medium=20, long=30, very_long=40))

        assert generate_cache_control(configs.tags) == (
            "public, max-age=40, stale-while-revalidate=30"
        )


class TestCheckCacheHeaders:
    etag = '"abc"'

    def test_matching_etag(self):
        assert check_cache_headers(FakeRequest(if_none_match='"abc"'), self.etag)

    def test_mismatched_etag(self):
        assert not check_cache_headers(FakeRequest(if_none_match='"xyz"'), self.etag)

    def test_no_conditional_headers(self):
        assert not check_cache_headers(FakeRequest(), self.etag, NOW)

    def test_if_modified_since_at_last_modified(self):
        request = FakeRequest(if_modified_since="Fri, 01 Mar 2024 12:00:00 GMT")

        assert check_cache_headers(request, self.etag, NOW + timedelta(milliseconds=400))

    def test_if_modified_since_before_last_modified(self):
        request = FakeRequest(if_modified_since="Fri, 01 Mar 2024 11:59:59 GMT")

        assert not check_cache_headers(request, self.etag, NOW)

    def test_if_modified_since_ignored_without_last_modified(self):
        request = FakeRequest(if_modified_since="Fri, 01 Mar 2024 12:00:00 GMT")

        assert not check_cache_headers(request, self.etag)

    def test_malformed_date(self):
        request = FakeRequest(if_modified_since="yesterday")

        assert not check_cache_headers(request, self.etag, NOW)


class TestCacheMetrics:
    def test_counts_and_hit_rate(self):
        metrics = CacheMetrics(clock=FakeClock())
        metrics.record_hit("tags:list")
        metrics.record_hit("tags:list")
        metrics.record_miss("tags:list")
        metrics.record_miss("categories:list")

        snapshot = metrics.get_metrics()

        assert snapshot["tags:list"].hits == 2
        assert snapshot["tags:list"].total == 3
        assert snapshot["tags:list"].hit_rate == "66.67%"
        assert snapshot["categories:list"].hit_rate == "0.00%"
        assert metrics.overall() == {
            "total_hits": 2,
            "total_misses": 2,
            "total_requests": 4,
            "hit_rate": "50.00%",
        }

    def test_empty_overall(self):
        assert CacheMetrics().overall()["hit_rate"] == "0%"

    def test_clear_old_metrics_drops_stale_keys(self):
        clock = FakeClock()
        metrics = CacheMetrics(clock=clock)
        metrics.record_miss("old")
        clock.now = NOW + timedelta(hours=30)
        metrics.record_hit("fresh")

        removed = metrics.clear_old_metrics(timedelta(hours=24))

        assert removed == 1
        assert metrics.keys() == ["fresh"]

    def test_access_refreshes_last_access(self):
        clock = FakeClock()
        metrics = CacheMetrics(clock=clock)
        metrics.record_miss("key")
        clock.now = NOW + timedelta(hours=30)
        metrics.record_hit("key")

        assert metrics.clear_old_metrics(timedelta(hours=24)) == 0
        assert metrics.get_metrics()["key"].last_access == clock.now

    def test_zero_window_clears_everything(self):
        metrics = CacheMetrics(clock=FakeClock())
        metrics.record_hit("a")
        metrics.record_hit("b")

        assert metrics.clear_old_metrics(timedelta(0)) == 2
        assert metrics.get_metrics() == {}

    def test_clear(self):
        metrics = CacheMetrics(clock=FakeClock())
        metrics.record_miss("tags:list")

        metrics.clear()

        assert metrics.keys() == []
        assert metrics.overall()["total_requests"] == 0


class TestCacheInvalidator:
    def test_tag_invalidation_touches_tags_and_journal_lists(self):
        metrics = CacheMetrics(clock=FakeClock())
        for key in ("tags:list", "journals:list:abc", "journals:entry:hello", "categories:list"):
            metrics.record_hit(key)

        CacheInvalidator(metrics).invalidate_tag("t1")

        snapshot = metrics.get_metrics()
        assert snapshot["tags:list"].misses == 1
        assert snapshot["journals:list:abc"].misses == 1
        assert snapshot["journals:entry:hello"].misses == 0
        assert snapshot["categories:list"].misses == 0

    def test_journal_invalidation_touches_all_journal_keys(self):
        metrics = CacheMetrics(clock=FakeClock())
        for key in ("journals:list", "journals:entry:hello", "tags:list"):
            metrics.record_hit(key)

        CacheInvalidator(metrics).invalidate_journal()

        snapshot = metrics.get_metrics()
        assert snapshot["journals:list"].misses == 1
        assert snapshot["journals:entry:hello"].misses == 1
        assert snapshot["tags:list"].misses == 0


def _warmer(seen: list[str], batch_size: int = 2) -> CacheWarmer:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(f"{request.method} {request.url}")
        if request.url.host == "down.invalid":
            raise httpx.ConnectError("refused", request=request)
        return httpx.Response(200)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CacheWarmer(client, popular_paths=["/api/tags"], batch_size=batch_size)


class TestCacheWarmer:
    @pytest.mark.asyncio
    async def test_warms_queued_urls_with_head(self):
        seen: list[str] = []
        warmer = _warmer(seen)
        warmer.add_to_warming_queue("http://site.test/api/tags")
        warmer.add_to_warming_queue("http://site.test/api/categories")
        warmer.add_to_warming_queue("http://site.test/api/tags")

        warmed = await warmer.warm_cache()
        await warmer.aclose()

        assert warmed == ["http://site.test/api/tags", "http://site.test/api/categories"]
        assert all(line.startswith("HEAD ") for line in seen)
        assert warmer.queue == []

    @pytest.mark.asyncio
    async def test_failures_are_skipped(self):
        seen: list[str] = []
        warmer = _warmer(seen, batch_size=1)
        warmer.add_to_warming_queue("http://down.invalid/api/tags")
        warmer.add_to_warming_queue("http://site.test/api/tags")

        warmed = await warmer.warm_cache()
        await warmer.aclose()

        assert warmed == ["http://site.test/api/tags"]
        assert len(seen) == 2

    @pytest.mark.asyncio
    async def test_popular_content_is_a_copy(self):
        warmer = _warmer([])
        warmer.get_popular_content().append("/mutated")

        assert warmer.get_popular_content() == ["/api/tags"]
        await warmer.aclose()
