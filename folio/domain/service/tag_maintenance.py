"""Tag relationship maintenance.

Keeps each tag's denormalized ``journal_count`` in line with the journals
that reference it, and strips a tag out of journals before the tag is
deleted. Both services are called by the write use cases after (or, for
deletion, before) the triggering write.

Failures never propagate: they are logged and swallowed so the triggering
write always succeeds. Counts are recomputed from a fresh count query every
time, so repeated or reordered calls converge on the same value.
"""

from collections.abc import Iterable

import logfire

from folio.domain.model.common import utcnow
from folio.domain.model.tag import Tag
from folio.domain.repository import JournalRepository, TagRepository
from folio.domain.value import TagId

from .base import Service

DEFAULT_CASCADE_PAGE_SIZE = 1000


class TagCountService(Service):
    """Reconciles stored tag journal counts with the journals table."""

    def __init__(
        self,
        journal_repository: JournalRepository,
        tag_repository: TagRepository,
    ) -> None:
        """Initialize tag count service.

        Args:
            journal_repository: Journal repository (source of the true counts)
            tag_repository: Tag repository (holder of the stored counts)
        """
        self.journal_repository = journal_repository
        self.tag_repository = tag_repository

    def initialize(self, tag: Tag) -> Tag:
        """Return a new tag with its count reset; nothing can reference it yet."""
        return tag.model_copy(update={"journal_count": 0})

    async def reconcile(self, tag_ids: Iterable[TagId]) -> int:
        """Recompute the journal count of each tag and store it if it changed.

        Unknown tags are skipped. A failure on one tag is logged and does not
        stop the others.

        Args:
            tag_ids: Tags whose counts may have changed

        Returns:
            Number of tags whose stored count was updated
        """
        unique_ids = list(dict.fromkeys(tag_ids))
        if not unique_ids:
            return 0

        updated = 0
        with logfire.span("tag_count.reconcile", tag_count=len(unique_ids)):
            for tag_id in unique_ids:
                try:
                    if await self._reconcile_one(tag_id):
                        updated += 1
                except Exception:
                    logfire.exception("Error updating tag count", tag_id=str(tag_id))
            logfire.info(
                "Tag counts reconciled", checked=len(unique_ids), updated=updated
            )
        return updated

    async def _reconcile_one(self, tag_id: TagId) -> bool:
        tag = await self.tag_repository.find_by_id(tag_id)
        if tag is None:
            logfire.warn("Tag not found during count reconciliation", tag_id=str(tag_id))
            return False

        actual = await self.journal_repository.count(tag_id=tag_id)
        if actual == tag.journal_count:
            return False

        await self.tag_repository.update_journal_count(tag_id, actual)
        logfire.info(
            "Tag journal count updated",
            tag_id=str(tag_id),
            tag_name=tag.name.root,
            previous=tag.journal_count,
            current=actual,
        )
        return True

    async def recount_all(self) -> int:
        """Reconcile every tag. Repairs drift left behind by swallowed failures.

        Returns:
            Number of tags whose stored count was updated
        """
        with logfire.span("tag_count.recount_all"):
            try:
                tags = await self.tag_repository.find_all()
            except Exception:
                logfire.exception("Error loading tags for recount")
                return 0
            return await self.reconcile(tag.id for tag in tags)


class TagDeletionService(Service):
    """Removes a tag from every journal that references it."""

    def __init__(
        self,
        journal_repository: JournalRepository,
        page_size: int = DEFAULT_CASCADE_PAGE_SIZE,
    ) -> None:
        """Initialize tag deletion service.

        Args:
            journal_repository: Journal repository
            page_size: Maximum number of journals rewritten per deletion
        """
        self.journal_repository = journal_repository
        self.page_size = page_size

    async def cascade_remove(self, tag_id: TagId) -> int:
        """Rewrite the tag lists of journals referencing ``tag_id`` without it.

        The remaining tags keep their relative order. Each affected journal is
        saved once; a journal that fails to save is logged and skipped.

        Args:
            tag_id: Tag about to be deleted

        Returns:
            Number of journals updated
        """
        updated = 0
        with logfire.span("tag_deletion.cascade_remove", tag_id=str(tag_id)):
            try:
                journals = await self.journal_repository.find_by_tag(
                    tag_id, limit=self.page_size
                )
            except Exception:
                logfire.exception(
                    "Error cleaning up tag references", tag_id=str(tag_id)
                )
                return 0

            if len(journals) >= self.page_size:
                logfire.warn(
                    "Tag cascade hit page size; some journals may keep the reference",
                    tag_id=str(tag_id),
                    page_size=self.page_size,
                )

            for journal in journals:
                remaining = [tid for tid in journal.tags if tid != tag_id]
                try:
                    await self.journal_repository.save(
                        journal.model_copy(
                            update={"tags": remaining, "updated_at": utcnow()}
                        )
                    )
                    updated += 1
                except Exception:
                    logfire.exception(
                        "Error removing tag from journal",
                        tag_id=str(tag_id),
                        journal_id=str(journal.id),
                    )

            logfire.info(
                "Tag references removed",
                tag_id=str(tag_id),
                journals_found=len(journals),
                journals_updated=updated,
            )
        return updated
