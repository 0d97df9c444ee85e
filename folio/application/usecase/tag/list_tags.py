"""List tags use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from folio.application.usecase.base import ResponseModel
from folio.application.usecase.items import TagItem
from folio.domain.service import JournalService, TagService
from folio.domain.value import PublicationStatus, SortOrder, TaxonomySortField


class ListTagsRequest(BaseModel):
    """List tags request."""

    sort_by: TaxonomySortField = TaxonomySortField.NAME
    sort_order: SortOrder = SortOrder.ASC
    hide_empty: bool = False


class ListTagsResponse(ResponseModel):
    """List tags response."""

    tags: list[TagItem]
    last_modified: datetime | None = Field(default=None, exclude=True)


def sort_items(items: list, sort_by: TaxonomySortField, sort_order: SortOrder) -> list:
    """Order tag or category items; ties keep name order."""
    reverse = sort_order == SortOrder.DESC
    if sort_by == TaxonomySortField.JOURNAL_COUNT:
        return sorted(items, key=lambda i: i.journal_count, reverse=reverse)
    if sort_by == TaxonomySortField.CREATED_AT:
        return sorted(items, key=lambda i: i.created_at, reverse=reverse)
    return sorted(items, key=lambda i: i.name.lower(), reverse=reverse)


class ListTagsUseCase:
    """Use case for listing tags with published journal counts."""

    def __init__(self, tag_service: TagService, journal_service: JournalService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
            journal_service: Journal domain service (for published counts)
        """
        self.tag_service = tag_service
        self.journal_service = journal_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        ``journal_count`` here counts published journals only, unlike the
        stored count which covers every status.
        """
        with logfire.span(
            "list_tags.execute",
            sort_by=request.sort_by.value,
            sort_order=request.sort_order.value,
            hide_empty=request.hide_empty,
        ):
            tags = await self.tag_service.get_all_tags()

            items = [
                TagItem.from_tag(
                    tag,
                    journal_count=await self.journal_service.count_journals(
                        tag_id=tag.id, status=PublicationStatus.PUBLISHED
                    ),
                )
                for tag in tags
            ]
            items = sort_items(items, request.sort_by, request.sort_order)
            if request.hide_empty:
                items = [i for i in items if i.journal_count > 0]

            logfire.info("Tags listed", count=len(items))

            return ListTagsResponse(
                tags=items,
                last_modified=max((t.updated_at for t in tags), default=None),
            )
