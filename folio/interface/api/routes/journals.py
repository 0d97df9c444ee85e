"""Journal routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, Response

from folio.application.usecase.journal import (
    GetJournalRequest,
    GetJournalUseCase,
    ListJournalsRequest,
    ListJournalsUseCase,
)
from folio.config import Settings
from folio.domain.value import JournalSortField, PublicationStatus, SortOrder
from folio.interface.api.response import cached_response
from folio.interface.api.routes.params import (
    JOURNAL_SORT_FIELDS,
    SORT_ORDERS,
    STATUSES,
    parse_choice,
    parse_limit,
    parse_page,
    parse_slug_list,
)
from folio.util.cache import CacheConfigs, CacheKey, CacheMetrics, generate_cache_key

router = APIRouter(prefix="/api/journals", tags=["journals"], route_class=DishkaRoute)


@router.get(
    "",
    summary="List journal entries",
    description="Paginated journals with category, tag, status and search filters.",
)
async def list_journals(
    request: Request,
    use_case: FromDishka[ListJournalsUseCase],
    settings: FromDishka[Settings],
    cache_configs: FromDishka[CacheConfigs],
    cache_metrics: FromDishka[CacheMetrics],
    page: str | None = None,
    limit: str | None = None,
    category: str | None = None,
    tags: list[str] | None = Query(default=None),
    tags_array: list[str] | None = Query(default=None, alias="tags[]"),
    status: str | None = None,
    search: str | None = None,
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
) -> Response:
    """List journals.

    Example:
        GET /api/journals?page=2&limit=5&tags[]=python&sortBy=title&sortOrder=asc
    """
    list_request = ListJournalsRequest(
        page=parse_page(page),
        limit=parse_limit(
            limit, settings.pagination.default_limit, settings.pagination.max_limit
        ),
        category=(category or "").strip() or None,
        tags=parse_slug_list(tags, tags_array),
        status=parse_choice(status, STATUSES, None),
        search=(search or "").strip() or None,
        sort_by=parse_choice(sort_by, JOURNAL_SORT_FIELDS, JournalSortField.CREATED_AT),
        sort_order=parse_choice(sort_order, SORT_ORDERS, SortOrder.DESC),
    )

    with logfire.span(
        "api.list_journals",
        page=list_request.page,
        limit=list_request.limit,
        search=list_request.search,
    ):
        result = await use_case.execute(list_request)

        cache_key = generate_cache_key(
            CacheKey(
                collection="journals",
                operation="list",
                params=list_request.model_dump(mode="json", exclude_none=True),
            )
        )
        return cached_response(
            request,
            result,
            cache_key=cache_key,
            cache_config=(
                cache_configs.search_results
                if list_request.search
                else cache_configs.journal_list
            ),
            metrics=cache_metrics,
            last_modified=result.last_modified,
        )


@router.get(
    "/{slug}",
    summary="Get a journal entry",
    description="One journal entry by slug, with category and tags resolved.",
)
async def get_journal(
    slug: str,
    request: Request,
    use_case: FromDishka[GetJournalUseCase],
    cache_configs: FromDishka[CacheConfigs],
    cache_metrics: FromDishka[CacheMetrics],
) -> Response:
    """Get a journal entry by slug.

    Raises:
        NotFoundError: If no journal has this slug (rendered as 404)
    """
    with logfire.span("api.get_journal", slug=slug):
        result = await use_case.execute(GetJournalRequest(slug=slug))

        journal = result.journal
        config = (
            cache_configs.journal_entry_published
            if journal.status == PublicationStatus.PUBLISHED.value
            else cache_configs.journal_entry_draft
        )
        return cached_response(
            request,
            result,
            cache_key=generate_cache_key(
                CacheKey(collection="journals", operation="entry", params={"slug": slug})
            ),
            cache_config=config,
            metrics=cache_metrics,
            last_modified=journal.updated_at,
        )
