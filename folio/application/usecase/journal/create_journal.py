"""Create journal use case."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from folio.application.usecase.base import ResponseModel
from folio.application.usecase.items import JournalItem
from folio.domain.model.common import utcnow
from folio.domain.service import (
    CategoryService,
    JournalService,
    TagCountService,
    TagService,
)
from folio.domain.value import JournalId
from folio.util.cache import CacheInvalidator

from .common import parse_category_id, parse_tag_refs, to_journal_items


class CreateJournalRequest(BaseModel):
    """Create journal request."""

    title: str
    content: dict[str, Any]
    excerpt: str | None = None
    status: str = "draft"
    published_at: datetime | None = None
    category_id: str | None = None
    tags: list[Any] = Field(default_factory=list)  # ids, or objects carrying an id
    cover_image_id: str | None = None
    audio_url: str | None = None
    seo: dict[str, Any] | None = None


class CreateJournalResponse(ResponseModel):
    """Create journal response."""

    journal: JournalItem


class CreateJournalUseCase:
    """Use case for creating a journal entry."""

    def __init__(
        self,
        journal_service: JournalService,
        tag_service: TagService,
        category_service: CategoryService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> None:
        """Initialize create journal use case.

        Args:
            journal_service: Journal domain service
            tag_service: Tag domain service
            category_service: Category domain service
            tag_count_service: Keeps tag journal counts in sync
            cache_invalidator: Marks cached journal reads stale
        """
        self.journal_service = journal_service
        self.tag_service = tag_service
        self.category_service = category_service
        self.tag_count_service = tag_count_service
        self.cache_invalidator = cache_invalidator

    async def execute(self, request: CreateJournalRequest) -> CreateJournalResponse:
        """Execute create journal flow.

        Steps:
        1. Validate the category and tag references
        2. Generate a unique slug from the title
        3. Build the journal (excerpt, publication date, SEO derived)
        4. Save it
        5. Reconcile the counts of the referenced tags

        Raises:
            ValidationError: If any field or reference is invalid
        """
        with logfire.span("create_journal.execute", title=request.title):
            tag_ids = parse_tag_refs(request.tags)
            await self.tag_service.validate_tags_exist(tag_ids)

            category_id = parse_category_id(request.category_id)
            if category_id is not None:
                await self.category_service.validate_category_exists(category_id)

            journal_id = JournalId(uuid4())
            slug = await self.journal_service.generate_unique_slug(request.title)

            journal = self.journal_service.build_journal(
                {
                    **request.model_dump(exclude={"tags", "category_id"}),
                    "id": journal_id,
                    "slug": slug,
                    "tags": tag_ids,
                    "category_id": category_id,
                },
                previous=None,
                now=utcnow(),
            )

            saved = await self.journal_service.save_journal(journal)

            await self.tag_count_service.reconcile(saved.tags)
            self.cache_invalidator.invalidate_journal(str(saved.id))

            logfire.info(
                "Journal created",
                journal_id=str(saved.id),
                slug=saved.slug.root,
                status=saved.status.value,
            )

            [item] = await to_journal_items(
                [saved], self.tag_service, self.category_service
            )
            return CreateJournalResponse(journal=item)
