"""In-memory journal repository for testing."""

from typing import Optional

from folio.domain.model.journal import Journal, JournalQuery
from folio.domain.repository.journal import JournalRepository
from folio.domain.value import (
    CategoryId,
    JournalId,
    PublicationStatus,
    Slug,
    SortOrder,
    TagId,
)

from .store import InMemoryStore


class InMemoryJournalRepository(JournalRepository):
    """In-memory implementation of JournalRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _journals(self) -> dict[JournalId, Journal]:
        return self._store.journals

    async def save(self, journal: Journal) -> Journal:
        """Save a journal."""
        self._journals[journal.id] = journal
        return journal

    async def find_by_id(self, journal_id: JournalId) -> Optional[Journal]:
        """Find a journal by ID."""
        return self._journals.get(journal_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Journal]:
        """Find a journal by slug."""
        for journal in self._journals.values():
            if journal.slug == slug:
                return journal
        return None

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[JournalId] = None
    ) -> bool:
        """Check if a slug is used by another journal."""
        return any(
            j.slug == slug and j.id != exclude_id for j in self._journals.values()
        )

    def _filter(
        self,
        tag_ids: Optional[list[TagId]] = None,
        category_id: Optional[CategoryId] = None,
        status: Optional[PublicationStatus] = None,
        search: Optional[str] = None,
    ) -> list[Journal]:
        journals = list(self._journals.values())

        if tag_ids:
            wanted = set(tag_ids)
            journals = [j for j in journals if wanted.intersection(j.tags)]
        if category_id is not None:
            journals = [j for j in journals if j.category_id == category_id]
        if status is not None:
            journals = [j for j in journals if j.status == status]
        if search:
            needle = search.lower()
            journals = [
                j
                for j in journals
                if needle in j.title.lower() or needle in (j.excerpt or "").lower()
            ]
        return journals

    async def find_page(self, query: JournalQuery) -> tuple[list[Journal], int]:
        """Find one page of journals with filtering and ordering."""
        journals = self._filter(
            tag_ids=query.tag_ids,
            category_id=query.category_id,
            status=query.status,
            search=query.search,
        )

        # Journals without a value for the sort field go last either way
        field = query.sort_by.value
        present = [j for j in journals if getattr(j, field) is not None]
        absent = [j for j in journals if getattr(j, field) is None]
        present.sort(
            key=lambda j: getattr(j, field),
            reverse=query.sort_order == SortOrder.DESC,
        )
        ordered = present + absent

        return ordered[query.offset : query.offset + query.limit], len(journals)

    async def find_by_tag(self, tag_id: TagId, limit: int) -> list[Journal]:
        """Find journals referencing a tag."""
        journals = [j for j in self._journals.values() if tag_id in j.tags]
        journals.sort(key=lambda j: j.created_at)
        return journals[:limit]

    async def count(
        self,
        tag_id: Optional[TagId] = None,
        category_id: Optional[CategoryId] = None,
        status: Optional[PublicationStatus] = None,
    ) -> int:
        """Count journals matching the given filters."""
        return len(
            self._filter(
                tag_ids=[tag_id] if tag_id is not None else None,
                category_id=category_id,
                status=status,
            )
        )

    async def delete(self, journal_id: JournalId) -> None:
        """Delete a journal."""
        self._journals.pop(journal_id, None)
