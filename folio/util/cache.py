"""HTTP caching utilities.

Cache keys, ETags, Cache-Control assembly, conditional request evaluation,
and the in-process cache metrics / warming / invalidation services used by
the read API.
"""

import asyncio
import hashlib
import json
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Protocol

import httpx
import logfire
from pydantic import BaseModel, ConfigDict

from folio.config import CacheSettings


class CacheConfig(BaseModel):
    """Cache-Control directives for a class of responses."""

    model_config = ConfigDict(frozen=True)

    max_age: int
    stale_while_revalidate: int | None = None
    must_revalidate: bool = False
    private: bool = False
    no_cache: bool = False


class CacheKey(BaseModel):
    """Identifies a cacheable read: which collection, which operation, which params."""

    model_config = ConfigDict(frozen=True)

    collection: str
    operation: str
    params: dict[str, Any] | None = None


class CacheConfigs:
    """Cache-Control presets per content type, built from configured durations."""

    def __init__(self, settings: CacheSettings) -> None:
        # Journal lists: medium cache; individual entries: long when published
        self.journal_list = CacheConfig(
            max_age=settings.medium, stale_while_revalidate=settings.short
        )
        self.journal_entry_published = CacheConfig(
            max_age=settings.long, stale_while_revalidate=settings.medium
        )
        self.journal_entry_draft = CacheConfig(
            max_age=settings.short, stale_while_revalidate=60
        )
        # Categories and tags change infrequently
        self.categories = CacheConfig(
            max_age=settings.very_long, stale_while_revalidate=settings.long
        )
        self.tags = CacheConfig(
            max_age=settings.very_long, stale_while_revalidate=settings.long
        )
        self.search_results = CacheConfig(
            max_age=settings.short, stale_while_revalidate=120
        )
        self.portfolios = CacheConfig(
            max_age=settings.long, stale_while_revalidate=settings.medium
        )


NOT_MODIFIED_CACHE_CONTROL = "public, max-age=0, must-revalidate"


def _canonical_json(value: Any) -> str:
    """Serialize with sorted keys and no whitespace so equal values hash equally."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


def generate_cache_key(key: CacheKey) -> str:
    """Generate a cache key that does not depend on parameter order.

    Returns ``"<collection>:<operation>"`` when there are no params, otherwise
    ``"<collection>:<operation>:<md5 of the sorted params>"``.
    """
    if not key.params:
        return f"{key.collection}:{key.operation}"

    digest = hashlib.md5(_canonical_json(key.params).encode("utf-8")).hexdigest()
    return f"{key.collection}:{key.operation}:{digest}"


def generate_etag(data: Any, last_modified: datetime | None = None) -> str:
    """Compute a quoted, 32 hex character ETag for ``data``.

    ``last_modified`` is mixed into the digest when given. Equal inputs always
    produce equal ETags.
    """
    content = {
        "data": data,
        "timestamp": int(last_modified.timestamp() * 1000) if last_modified else None,
    }
    digest = hashlib.md5(_canonical_json(content).encode("utf-8")).hexdigest()
    return f'"{digest}"'


def generate_cache_control(config: CacheConfig) -> str:
    """Build a Cache-Control header value.

    Examples:
        >>> generate_cache_control(CacheConfig(max_age=3600, stale_while_revalidate=300))
        'public, max-age=3600, stale-while-revalidate=300'
        >>> generate_cache_control(CacheConfig(max_age=1800, private=True))
        'private, max-age=1800'
    """
    parts = ["private" if config.private else "public"]

    if config.no_cache:
        parts.append("no-cache")
    else:
        parts.append(f"max-age={config.max_age}")
        if config.stale_while_revalidate:
            parts.append(f"stale-while-revalidate={config.stale_while_revalidate}")

    if config.must_revalidate:
        parts.append("must-revalidate")

    return ", ".join(parts)


class HasHeaders(Protocol):
    """Anything exposing request headers (Starlette requests, httpx requests)."""

    @property
    def headers(self) -> Mapping[str, str]: ...


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def check_cache_headers(
    request: HasHeaders, etag: str, last_modified: datetime | None = None
) -> bool:
    """Decide whether the client's cached copy is still current.

    Returns True (respond 304) when ``If-None-Match`` equals ``etag`` or when
    ``If-Modified-Since`` is at or after ``last_modified``.
    """
    if_none_match = request.headers.get("if-none-match")
    if if_none_match and if_none_match == etag:
        return True

    if last_modified is not None:
        if_modified_since = request.headers.get("if-modified-since")
        if if_modified_since:
            try:
                since = parsedate_to_datetime(if_modified_since)
            except (TypeError, ValueError):
                return False
            # HTTP dates carry whole seconds only
            modified = _as_utc(last_modified).replace(microsecond=0)
            if modified <= _as_utc(since):
                return True

    return False


class CacheMetricSnapshot(BaseModel):
    """Hit/miss counters for one cache key."""

    hits: int
    misses: int
    last_access: datetime
    total: int
    hit_rate: str


class _MetricRecord:
    __slots__ = ("hits", "misses", "last_access")

    def __init__(self, now: datetime) -> None:
        self.hits = 0
        self.misses = 0
        self.last_access = now


def _format_rate(hits: int, total: int) -> str:
    return f"{hits / total * 100:.2f}%" if total > 0 else "0%"


class CacheMetrics:
    """Per-key cache hit/miss counters.

    One instance lives for the lifetime of the process (APP scope). State is
    not shared between processes.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._metrics: dict[str, _MetricRecord] = {}

    def _record(self, cache_key: str) -> _MetricRecord:
        now = self._clock()
        record = self._metrics.get(cache_key)
        if record is None:
            record = _MetricRecord(now)
            self._metrics[cache_key] = record
        record.last_access = now
        return record

    def record_hit(self, cache_key: str) -> None:
        self._record(cache_key).hits += 1

    def record_miss(self, cache_key: str) -> None:
        self._record(cache_key).misses += 1

    def keys(self) -> list[str]:
        return list(self._metrics)

    def get_metrics(self) -> dict[str, CacheMetricSnapshot]:
        """Snapshot all counters with derived totals and hit rates."""
        result = {}
        for key, record in self._metrics.items():
            total = record.hits + record.misses
            result[key] = CacheMetricSnapshot(
                hits=record.hits,
                misses=record.misses,
                last_access=record.last_access,
                total=total,
                hit_rate=_format_rate(record.hits, total),
            )
        return result

    def overall(self) -> dict[str, Any]:
        """Aggregate counters across every key."""
        hits = sum(r.hits for r in self._metrics.values())
        misses = sum(r.misses for r in self._metrics.values())
        total = hits + misses
        return {
            "total_hits": hits,
            "total_misses": misses,
            "total_requests": total,
            "hit_rate": _format_rate(hits, total),
        }

    def clear_old_metrics(self, max_age: timedelta) -> int:
        """Drop keys not accessed within ``max_age``. A zero window clears everything.

        Returns:
            Number of keys removed
        """
        if max_age <= timedelta(0):
            removed = len(self._metrics)
            self._metrics.clear()
            return removed

        cutoff = self._clock() - max_age
        stale = [k for k, r in self._metrics.items() if r.last_access < cutoff]
        for key in stale:
            del self._metrics[key]
        return len(stale)

    def clear(self) -> None:
        self._metrics.clear()


class CacheWarmer:
    """Pre-fetches URLs so downstream caches (CDN, reverse proxy) are hot.

    URLs are queued with :meth:`add_to_warming_queue` and fetched with HEAD
    requests by :meth:`warm_cache`. Individual failures are logged and skipped.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        popular_paths: list[str],
        batch_size: int = 5,
    ) -> None:
        self._client = client
        self._popular_paths = list(popular_paths)
        self._batch_size = max(1, batch_size)
        # dict keeps insertion order and drops duplicates
        self._queue: dict[str, None] = {}

    @property
    def queue(self) -> list[str]:
        return list(self._queue)

    def add_to_warming_queue(self, url: str) -> None:
        self._queue[url] = None

    def get_popular_content(self) -> list[str]:
        """Paths of commonly requested reads."""
        return list(self._popular_paths)

    async def _warm_one(self, url: str) -> bool:
        try:
            await self._client.head(url)
            return True
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logfire.warn("Failed to warm cache", url=url, error=str(e))
            return False

    async def warm_cache(self) -> list[str]:
        """Drain the queue, fetching URLs in small concurrent batches.

        Returns:
            URLs that were fetched successfully
        """
        urls = list(self._queue)
        self._queue.clear()

        warmed: list[str] = []
        with logfire.span("cache_warmer.warm_cache", url_count=len(urls)):
            for start in range(0, len(urls), self._batch_size):
                batch = urls[start : start + self._batch_size]
                results = await asyncio.gather(*(self._warm_one(u) for u in batch))
                warmed.extend(url for url, ok in zip(batch, results) if ok)
            logfire.info("Cache warming finished", requested=len(urls), warmed=len(warmed))
        return warmed

    async def aclose(self) -> None:
        await self._client.aclose()


class CacheInvalidator:
    """Marks cached reads as stale after writes.

    There is no shared response cache in-process, so invalidation is recorded
    as a miss against the affected keys; CDN purging would hook in here.
    """

    def __init__(self, metrics: CacheMetrics) -> None:
        self._metrics = metrics

    def _expire_prefix(self, prefix: str) -> None:
        for key in self._metrics.keys():
            if key.startswith(prefix):
                self._metrics.record_miss(key)

    def invalidate_journal(self, journal_id: str | None = None) -> None:
        logfire.info("Cache invalidation for journal", journal_id=journal_id or "all")
        self._expire_prefix("journals:")

    def invalidate_category(self, category_id: str | None = None) -> None:
        logfire.info("Cache invalidation for category", category_id=category_id or "all")
        self._expire_prefix("journals:list")
        self._expire_prefix("categories:")

    def invalidate_tag(self, tag_id: str | None = None) -> None:
        logfire.info("Cache invalidation for tag", tag_id=tag_id or "all")
        self._expire_prefix("journals:list")
        self._expire_prefix("tags:")

