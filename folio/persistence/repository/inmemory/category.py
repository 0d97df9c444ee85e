"""In-memory category repository for testing."""

from typing import Optional

from folio.domain.model.category import Category
from folio.domain.repository.category import CategoryRepository
from folio.domain.value import CategoryId, Slug

from .store import InMemoryStore


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _categories(self) -> dict[CategoryId, Category]:
        return self._store.categories

    async def save(self, category: Category) -> Category:
        """Save a category."""
        self._categories[category.id] = category
        return category

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID."""
        return self._categories.get(category_id)

    async def find_by_ids(self, category_ids: list[CategoryId]) -> list[Category]:
        """Find multiple categories by ID."""
        return [self._categories[c] for c in category_ids if c in self._categories]

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find category by slug."""
        for category in self._categories.values():
            if category.slug == slug:
                return category
        return None

    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find category by name."""
        for category in self._categories.values():
            if category.name == name:
                return category
        return None

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        return sorted(self._categories.values(), key=lambda c: c.name)

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[CategoryId] = None
    ) -> bool:
        """Check if a slug is used by another category."""
        return any(
            c.slug == slug and c.id != exclude_id for c in self._categories.values()
        )
