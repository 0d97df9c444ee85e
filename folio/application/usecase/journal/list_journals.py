"""List journals use case."""

from datetime import datetime
from math import ceil

import logfire
from pydantic import BaseModel, Field

from folio.application.usecase.base import ResponseModel
from folio.application.usecase.items import CategorySummary, JournalItem, TagSummary
from folio.domain.model import JournalQuery
from folio.domain.service import CategoryService, JournalService, TagService
from folio.domain.value import (
    JournalSortField,
    PublicationStatus,
    Slug,
    SortOrder,
)
from folio.util.slug import generate_slug

from .common import to_journal_items


class ListJournalsRequest(BaseModel):
    """List journals request.

    ``category`` and ``tags`` are slugs. A journal matches ``tags`` when it
    carries any of them.
    """

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    status: PublicationStatus | None = None
    search: str | None = None
    sort_by: JournalSortField = JournalSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


class ListJournalsResponse(ResponseModel):
    """One page of journals plus the filter options."""

    docs: list[JournalItem]
    total_docs: int
    limit: int
    page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    next_page: int | None
    prev_page: int | None
    categories: list[CategorySummary]
    tags: list[TagSummary]
    # Newest update among the returned journals; drives HTTP validators
    last_modified: datetime | None = Field(default=None, exclude=True)


class ListJournalsUseCase:
    """Use case for paginated, filtered journal listings."""

    def __init__(
        self,
        journal_service: JournalService,
        tag_service: TagService,
        category_service: CategoryService,
    ) -> None:
        """Initialize list journals use case.

        Args:
            journal_service: Journal domain service
            tag_service: Tag domain service
            category_service: Category domain service
        """
        self.journal_service = journal_service
        self.tag_service = tag_service
        self.category_service = category_service

    async def execute(self, request: ListJournalsRequest) -> ListJournalsResponse:
        """Execute list journals flow.

        Unknown category or tag slugs match nothing rather than being ignored.

        Args:
            request: List journals request

        Returns:
            Page of journals with pagination metadata
        """
        with logfire.span(
            "list_journals.execute",
            page=request.page,
            limit=request.limit,
            category=request.category,
            tags=request.tags,
            search=request.search,
        ):
            journals, total = await self._find(request)

            categories = await self.category_service.get_all_categories()
            tags = await self.tag_service.get_all_tags()

            total_pages = ceil(total / request.limit) if total else 0
            has_next = request.page < total_pages
            has_prev = request.page > 1

            docs = await to_journal_items(journals, self.tag_service, self.category_service)
            logfire.info("Journals listed", count=len(docs), total=total)

            return ListJournalsResponse(
                docs=docs,
                total_docs=total,
                limit=request.limit,
                page=request.page,
                total_pages=total_pages,
                has_next_page=has_next,
                has_prev_page=has_prev,
                next_page=request.page + 1 if has_next else None,
                prev_page=request.page - 1 if has_prev else None,
                categories=[CategorySummary.from_category(c) for c in categories],
                tags=[TagSummary.from_tag(t) for t in tags],
                last_modified=max((j.updated_at for j in journals), default=None),
            )

    async def _find(self, request: ListJournalsRequest):
        category_id = None
        if request.category:
            category = await self._resolve_category(request.category)
            if category is None:
                return [], 0
            category_id = category.id

        tag_ids = []
        if request.tags:
            slugs = [Slug(s) for s in (generate_slug(t) for t in request.tags) if s]
            tags = await self.tag_service.get_tags_by_slugs(slugs) if slugs else []
            if not tags:
                return [], 0
            tag_ids = [t.id for t in tags]

        query = JournalQuery(
            page=request.page,
            limit=request.limit,
            category_id=category_id,
            tag_ids=tag_ids,
            status=request.status,
            search=request.search.strip() if request.search else None,
            sort_by=request.sort_by,
            sort_order=request.sort_order,
        )
        return await self.journal_service.list_journals(query)

    async def _resolve_category(self, value: str):
        slug = generate_slug(value)
        if not slug:
            return None
        return await self.category_service.get_category_by_slug(Slug(slug))
