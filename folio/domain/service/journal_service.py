"""Journal domain service."""

from datetime import datetime
from typing import Any

import logfire

from folio.domain.error import NotFoundError, ValidationError
from folio.domain.model.journal import TITLE_MAX_LENGTH, Journal, JournalQuery
from folio.domain.repository import JournalRepository
from folio.domain.value import (
    SEO,
    CategoryId,
    JournalId,
    PublicationStatus,
    Slug,
    TagId,
)
from folio.util.richtext import extract_plain_text, make_excerpt

from .base import Service
from .content import (
    allocate_slug,
    build_model,
    populate_seo,
    require_title,
    resolve_published_at,
)


class JournalService(Service):
    """Domain service for journal operations."""

    def __init__(self, journal_repository: JournalRepository) -> None:
        """Initialize journal service.

        Args:
            journal_repository: Journal repository
        """
        self.journal_repository = journal_repository

    async def save_journal(self, journal: Journal) -> Journal:
        """Save a journal.

        Args:
            journal: Journal to save

        Returns:
            Saved journal
        """
        with logfire.span(
            "journal_service.save_journal",
            journal_id=str(journal.id),
            title=journal.title,
        ):
            saved = await self.journal_repository.save(journal)
            logfire.info(
                "Journal saved",
                journal_id=str(saved.id),
                slug=str(saved.slug),
                status=saved.status.value,
            )
            return saved

    async def get_by_id(self, journal_id: JournalId) -> Journal:
        """Get a journal by ID.

        Raises:
            NotFoundError: If journal not found
        """
        journal = await self.journal_repository.find_by_id(journal_id)
        if not journal:
            logfire.warn("Journal not found", journal_id=str(journal_id))
            raise NotFoundError("Journal", str(journal_id))
        return journal

    async def get_journal_by_slug(self, slug: Slug) -> Journal | None:
        """Get a journal by slug.

        Args:
            slug: Journal slug

        Returns:
            Journal if found, None otherwise
        """
        with logfire.span("journal_service.get_journal_by_slug", slug=str(slug)):
            journal = await self.journal_repository.find_by_slug(slug)

            if journal:
                logfire.info(
                    "Journal found by slug",
                    slug=str(slug),
                    journal_id=str(journal.id),
                )
            else:
                logfire.warn("Journal not found by slug", slug=str(slug))

            return journal

    async def list_journals(self, query: JournalQuery) -> tuple[list[Journal], int]:
        """Get one page of journals and the total number of matches."""
        with logfire.span(
            "journal_service.list_journals",
            page=query.page,
            limit=query.limit,
            sort_by=query.sort_by.value,
            sort_order=query.sort_order.value,
        ):
            journals, total = await self.journal_repository.find_page(query)
            logfire.info("Journals retrieved", count=len(journals), total=total)
            return journals, total

    async def count_journals(
        self,
        tag_id: TagId | None = None,
        category_id: CategoryId | None = None,
        status: PublicationStatus | None = None,
    ) -> int:
        return await self.journal_repository.count(
            tag_id=tag_id, category_id=category_id, status=status
        )

    async def delete_journal(self, journal_id: JournalId) -> None:
        with logfire.span("journal_service.delete_journal", journal_id=str(journal_id)):
            await self.journal_repository.delete(journal_id)
            logfire.info("Journal deleted", journal_id=str(journal_id))

    async def generate_unique_slug(
        self, title: str, journal_id: JournalId | None = None
    ) -> Slug:
        """Generate a unique slug from a title.

        Handles collisions by appending numeric suffixes.

        Args:
            title: Journal title to slugify
            journal_id: Journal being renamed, whose own slug does not count

        Returns:
            Unique slug for the journal

        Raises:
            ValidationError: If the title is invalid or yields an empty slug
        """
        title = require_title(title, TITLE_MAX_LENGTH)

        async def _exists(slug: Slug) -> bool:
            return await self.journal_repository.slug_exists(slug, exclude_id=journal_id)

        with logfire.span("journal_service.generate_unique_slug", title=title):
            return await allocate_slug(title, _exists)

    def build_journal(
        self,
        data: dict[str, Any],
        previous: Journal | None,
        now: datetime,
    ) -> Journal:
        """Apply the derived-field rules and construct the journal to write.

        - Trims the title and excerpt
        - Derives the excerpt from the content when absent
        - Stamps or clears the publication date according to status
        - Fills SEO title and description
        - Maintains created_at / updated_at

        Args:
            data: Journal fields as submitted, merged over the stored version
            previous: Stored version, None on create
            now: Current time

        Returns:
            Validated journal ready to be saved

        Raises:
            ValidationError: If any field is invalid
        """
        title = require_title(data.get("title"), TITLE_MAX_LENGTH)

        excerpt = data.get("excerpt")
        excerpt = excerpt.strip() if isinstance(excerpt, str) else None
        if not excerpt:
            excerpt = self.derive_excerpt(data.get("content"))

        try:
            status = PublicationStatus(data.get("status") or PublicationStatus.DRAFT)
        except ValueError as e:
            raise ValidationError("Status must be draft or published", field="status") from e
        published_at = resolve_published_at(
            status,
            data.get("published_at"),
            previous.status if previous else None,
            now,
        )

        seo = data.get("seo")
        if isinstance(seo, dict):
            seo = SEO(**seo)

        return build_model(
            Journal,
            {
                **data,
                "title": title,
                "excerpt": excerpt,
                "status": status,
                "published_at": published_at,
                "audio_url": (data.get("audio_url") or "").strip() or None,
                "seo": populate_seo(seo, title, excerpt),
                "created_at": previous.created_at if previous else now,
                "updated_at": now,
            },
        )

    @staticmethod
    def derive_excerpt(content: Any) -> str | None:
        """Excerpt from the plain text of rich text content, or None if it has none."""
        text = extract_plain_text(content)
        return make_excerpt(text) if text else None
