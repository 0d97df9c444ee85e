"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.tag import Tag
from folio.domain.value import Slug, TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag aggregate."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slugs(self, slugs: list[Slug]) -> list[Tag]:
        """Find multiple tags by slug in a single query.

        Args:
            slugs: Tag slugs

        Returns:
            Found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name.

        Returns:
            List of tags
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug, exclude_id: Optional[TagId] = None) -> bool:
        """Check whether a slug is already used by another tag.

        Args:
            slug: Slug to check
            exclude_id: Tag to ignore

        Returns:
            True if the slug is taken
        """
        pass

    @abstractmethod
    async def update_journal_count(self, tag_id: TagId, journal_count: int) -> None:
        """Overwrite the stored journal count of a tag.

        Only the count column changes; the rest of the tag is left alone.

        Args:
            tag_id: Tag identifier
            journal_count: New count
        """
        pass

    @abstractmethod
    async def delete(self, tag_id: TagId) -> None:
        """Delete a tag.

        Args:
            tag_id: Tag identifier
        """
        pass
