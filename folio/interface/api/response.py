"""Success envelope and HTTP caching for read endpoints."""

from datetime import datetime
from email.utils import format_datetime
from typing import Any

import logfire
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from folio.domain.model.common import utcnow
from folio.util.cache import (
    NOT_MODIFIED_CACHE_CONTROL,
    CacheConfig,
    CacheMetrics,
    check_cache_headers,
    generate_cache_control,
    generate_etag,
)


def to_payload(data: BaseModel | Any) -> Any:
    """Serialize response data with camelCase keys."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if isinstance(data, list):
        return [to_payload(item) for item in data]
    return data


def success_response(data: BaseModel | Any, status_code: int = 200) -> JSONResponse:
    """Wrap data in the success envelope without caching headers."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": True,
            "data": to_payload(data),
            "timestamp": utcnow().isoformat(),
        },
    )


def http_date(value: datetime) -> str:
    return format_datetime(value, usegmt=True)


def cached_response(
    request: Request,
    data: BaseModel | Any,
    *,
    cache_key: str,
    cache_config: CacheConfig,
    metrics: CacheMetrics,
    last_modified: datetime | None = None,
) -> Response:
    """Answer a read, honouring conditional request headers.

    A client whose copy is current gets an empty 304 and the request counts
    as a cache hit; anyone else gets the full envelope and a miss is recorded.

    Args:
        request: Incoming request (conditional headers are read from it)
        data: Response data, dumped with camelCase keys
        cache_key: Metrics key for this read
        cache_config: Cache-Control directives for a fresh response
        metrics: Process-wide cache metrics
        last_modified: Newest modification time of the content, if known
    """
    payload = to_payload(data)
    etag = generate_etag(payload, last_modified)

    if check_cache_headers(request, etag, last_modified):
        metrics.record_hit(cache_key)
        logfire.debug("Cache hit", cache_key=cache_key)
        headers = {"Cache-Control": NOT_MODIFIED_CACHE_CONTROL, "ETag": etag}
        if last_modified is not None:
            headers["Last-Modified"] = http_date(last_modified)
        return Response(status_code=304, headers=headers)

    metrics.record_miss(cache_key)

    generated = utcnow()
    response = success_response(payload)
    response.headers["Cache-Control"] = generate_cache_control(cache_config)
    response.headers["ETag"] = etag
    # Empty results have no content timestamp; fall back to generation time
    response.headers["Last-Modified"] = http_date(last_modified or generated)
    response.headers["X-Cache-Generated"] = generated.isoformat()
    return response
