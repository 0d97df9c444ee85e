"""List categories use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from folio.application.usecase.base import ResponseModel
from folio.application.usecase.items import CategoryItem
from folio.application.usecase.tag.list_tags import sort_items
from folio.domain.service import CategoryService, JournalService
from folio.domain.value import PublicationStatus, SortOrder, TaxonomySortField


class ListCategoriesRequest(BaseModel):
    """List categories request."""

    sort_by: TaxonomySortField = TaxonomySortField.NAME
    sort_order: SortOrder = SortOrder.ASC


class ListCategoriesResponse(ResponseModel):
    """List categories response."""

    categories: list[CategoryItem]
    last_modified: datetime | None = Field(default=None, exclude=True)


class ListCategoriesUseCase:
    """Use case for listing categories with published journal counts."""

    def __init__(
        self, category_service: CategoryService, journal_service: JournalService
    ) -> None:
        self.category_service = category_service
        self.journal_service = journal_service

    async def execute(self, request: ListCategoriesRequest) -> ListCategoriesResponse:
        with logfire.span(
            "list_categories.execute",
            sort_by=request.sort_by.value,
            sort_order=request.sort_order.value,
        ):
            categories = await self.category_service.get_all_categories()

            items = [
                CategoryItem.from_category(
                    category,
                    journal_count=await self.journal_service.count_journals(
                        category_id=category.id, status=PublicationStatus.PUBLISHED
                    ),
                )
                for category in categories
            ]

            logfire.info("Categories listed", count=len(items))

            return ListCategoriesResponse(
                categories=sort_items(items, request.sort_by, request.sort_order),
                last_modified=max((c.updated_at for c in categories), default=None),
            )
