"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, Response

from folio.application.usecase.tag import ListTagsRequest, ListTagsUseCase
from folio.domain.value import SortOrder, TaxonomySortField
from folio.interface.api.response import cached_response
from folio.interface.api.routes.params import (
    SORT_ORDERS,
    TAXONOMY_SORT_FIELDS,
    parse_bool,
    parse_choice,
)
from folio.util.cache import CacheConfigs, CacheKey, CacheMetrics, generate_cache_key

router = APIRouter(prefix="/api/tags", tags=["tags"], route_class=DishkaRoute)


@router.get(
    "",
    summary="List tags",
    description="All tags with the number of published journals carrying each.",
)
async def list_tags(
    request: Request,
    use_case: FromDishka[ListTagsUseCase],
    cache_configs: FromDishka[CacheConfigs],
    cache_metrics: FromDishka[CacheMetrics],
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
    hide_empty: str | None = Query(default=None, alias="hideEmpty"),
) -> Response:
    """List all tags.

    Example:
        GET /api/tags?sortBy=journalCount&sortOrder=desc&hideEmpty=true
    """
    list_request = ListTagsRequest(
        sort_by=parse_choice(sort_by, TAXONOMY_SORT_FIELDS, TaxonomySortField.NAME),
        sort_order=parse_choice(sort_order, SORT_ORDERS, SortOrder.ASC),
        hide_empty=parse_bool(hide_empty),
    )

    with logfire.span("api.list_tags", **list_request.model_dump(mode="json")):
        result = await use_case.execute(list_request)
        return cached_response(
            request,
            result.tags,
            cache_key=generate_cache_key(
                CacheKey(
                    collection="tags",
                    operation="list",
                    params=list_request.model_dump(mode="json"),
                )
            ),
            cache_config=cache_configs.tags,
            metrics=cache_metrics,
            last_modified=result.last_modified,
        )
