"""Journal repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.journal import Journal, JournalQuery
from folio.domain.value import (
    CategoryId,
    JournalId,
    PublicationStatus,
    Slug,
    TagId,
)


class JournalRepository(ABC):
    """Repository interface for Journal aggregate."""

    @abstractmethod
    async def save(self, journal: Journal) -> Journal:
        """Save or update a journal, including its ordered tag list.

        Args:
            journal: Journal to save

        Returns:
            Saved journal
        """
        pass

    @abstractmethod
    async def find_by_id(self, journal_id: JournalId) -> Optional[Journal]:
        """Find journal by ID.

        Args:
            journal_id: Journal identifier

        Returns:
            Journal if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Journal]:
        """Find journal by slug.

        Args:
            slug: Journal slug

        Returns:
            Journal if found, None otherwise
        """
        pass

    @abstractmethod
    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[JournalId] = None
    ) -> bool:
        """Check whether a slug is already used by another journal.

        Args:
            slug: Slug to check
            exclude_id: Journal to ignore (the one being renamed)

        Returns:
            True if the slug is taken
        """
        pass

    @abstractmethod
    async def find_page(self, query: JournalQuery) -> tuple[list[Journal], int]:
        """Find one page of journals matching a query.

        Args:
            query: Filters, ordering and paging

        Returns:
            Tuple of (journals on the requested page, total matching journals)
        """
        pass

    @abstractmethod
    async def find_by_tag(self, tag_id: TagId, limit: int) -> list[Journal]:
        """Find journals whose tag list contains a tag.

        Args:
            tag_id: Tag identifier
            limit: Maximum number of journals to return

        Returns:
            Journals referencing the tag
        """
        pass

    @abstractmethod
    async def count(
        self,
        tag_id: Optional[TagId] = None,
        category_id: Optional[CategoryId] = None,
        status: Optional[PublicationStatus] = None,
    ) -> int:
        """Count journals, optionally restricted by tag, category and status.

        This is the authoritative count used for tag reconciliation and for
        the taxonomy listings.

        Args:
            tag_id: Only journals referencing this tag
            category_id: Only journals in this category
            status: Only journals with this status

        Returns:
            Number of matching journals
        """
        pass

    @abstractmethod
    async def delete(self, journal_id: JournalId) -> None:
        """Delete a journal.

        Args:
            journal_id: Journal identifier
        """
        pass
