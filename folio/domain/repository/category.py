"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.category import Category
from folio.domain.value import CategoryId, Slug


class CategoryRepository(ABC):
    """Repository interface for Category aggregate."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save or update a category.

        Args:
            category: Category to save

        Returns:
            Saved category
        """
        pass

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, category_ids: list[CategoryId]) -> list[Category]:
        """Find multiple categories by ID in a single query."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find category by slug."""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find category by exact name."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        pass

    @abstractmethod
    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[CategoryId] = None
    ) -> bool:
        """Check whether a slug is already used by another category."""
        pass
