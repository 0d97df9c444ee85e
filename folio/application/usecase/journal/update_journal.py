"""Update journal use case."""

from datetime import datetime
from typing import Any

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import ResponseModel, parse_id
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


class UpdateJournalRequest(BaseModel):
    """Update journal request.

    Only fields that are explicitly set are changed; ``None`` clears an
    optional field.
    """

    journal_id: str
    title: str | None = None
    content: dict[str, Any] | None = None
    excerpt: str | None = None
    status: str | None = None
    published_at: datetime | None = None
    category_id: str | None = None
    tags: list[Any] | None = None
    cover_image_id: str | None = None
    audio_url: str | None = None
    seo: dict[str, Any] | None = None


class UpdateJournalResponse(ResponseModel):
    """Update journal response."""

    journal: JournalItem


class UpdateJournalUseCase:
    """Use case for editing a journal entry."""

    def __init__(
        self,
        journal_service: JournalService,
        tag_service: TagService,
        category_service: CategoryService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> None:
        self.journal_service = journal_service
        self.tag_service = tag_service
        self.category_service = category_service
        self.tag_count_service = tag_count_service
        self.cache_invalidator = cache_invalidator

    async def execute(self, request: UpdateJournalRequest) -> UpdateJournalResponse:
        """Execute update journal flow.

        The slug is regenerated only when the title changes. After the save,
        counts are reconciled for every tag referenced before or after the
        edit, so tags dropped from the list are corrected too.

        Raises:
            NotFoundError: If the journal does not exist
            ValidationError: If any field or reference is invalid
        """
        journal_id = JournalId(parse_id(request.journal_id, "journal_id"))

        with logfire.span("update_journal.execute", journal_id=str(journal_id)):
            previous = await self.journal_service.get_by_id(journal_id)

            changes = request.model_dump(
                exclude={"journal_id", "tags", "category_id"}, exclude_unset=True
            )
            fields_set = request.model_fields_set

            if "tags" in fields_set:
                tag_ids = parse_tag_refs(request.tags or [])
                await self.tag_service.validate_tags_exist(tag_ids)
                changes["tags"] = tag_ids

            if "category_id" in fields_set:
                category_id = parse_category_id(request.category_id)
                if category_id is not None:
                    await self.category_service.validate_category_exists(category_id)
                changes["category_id"] = category_id

            # Required fields: None means "leave unchanged"
            for required in ("title", "content", "status"):
                if changes.get(required, ...) is None:
                    del changes[required]

            if "title" in changes and changes["title"].strip() != previous.title:
                changes["slug"] = await self.journal_service.generate_unique_slug(
                    changes["title"], journal_id=journal_id
                )

            data = {**previous.model_dump(), **changes}
            if (
                "content" in changes
                and "excerpt" not in changes
                and previous.excerpt == self.journal_service.derive_excerpt(previous.content)
            ):
                # Excerpt was derived from the old content; derive it again
                data["excerpt"] = None

            journal = self.journal_service.build_journal(
                data, previous=previous, now=utcnow()
            )
            saved = await self.journal_service.save_journal(journal)

            await self.tag_count_service.reconcile([*previous.tags, *saved.tags])
            self.cache_invalidator.invalidate_journal(str(saved.id))

            logfire.info(
                "Journal updated",
                journal_id=str(saved.id),
                slug=saved.slug.root,
                status=saved.status.value,
                slug_changed=saved.slug != previous.slug,
            )

            [item] = await to_journal_items(
                [saved], self.tag_service, self.category_service
            )
            return UpdateJournalResponse(journal=item)
