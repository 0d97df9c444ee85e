"""Category routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, Response

from folio.application.usecase.category import (
    ListCategoriesRequest,
    ListCategoriesUseCase,
)
from folio.domain.value import SortOrder, TaxonomySortField
from folio.interface.api.response import cached_response
from folio.interface.api.routes.params import (
    SORT_ORDERS,
    TAXONOMY_SORT_FIELDS,
    parse_choice,
)
from folio.util.cache import CacheConfigs, CacheKey, CacheMetrics, generate_cache_key

router = APIRouter(prefix="/api/categories", tags=["categories"], route_class=DishkaRoute)


@router.get(
    "",
    summary="List categories",
    description="All categories with the number of published journals in each.",
)
async def list_categories(
    request: Request,
    use_case: FromDishka[ListCategoriesUseCase],
    cache_configs: FromDishka[CacheConfigs],
    cache_metrics: FromDishka[CacheMetrics],
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
) -> Response:
    list_request = ListCategoriesRequest(
        sort_by=parse_choice(sort_by, TAXONOMY_SORT_FIELDS, TaxonomySortField.NAME),
        sort_order=parse_choice(sort_order, SORT_ORDERS, SortOrder.ASC),
    )

    with logfire.span("api.list_categories", **list_request.model_dump(mode="json")):
        result = await use_case.execute(list_request)
        return cached_response(
            request,
            result.categories,
            cache_key=generate_cache_key(
                CacheKey(
                    collection="categories",
                    operation="list",
                    params=list_request.model_dump(mode="json"),
                )
            ),
            cache_config=cache_configs.categories,
            metrics=cache_metrics,
            last_modified=result.last_modified,
        )
