"""Category domain service."""

import logfire

from folio.domain.error import BusinessRuleViolationError, ValidationError
from folio.domain.model.category import Category
from folio.domain.repository import CategoryRepository
from folio.domain.value import CategoryId, Slug

from .base import Service
from .content import allocate_slug


class CategoryService(Service):
    """Domain service for category operations."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
        """
        self.category_repository = category_repository

    async def get_all_categories(self) -> list[Category]:
        """Get all categories ordered by name."""
        with logfire.span("category_service.get_all_categories"):
            categories = await self.category_repository.find_all()
            logfire.info("Categories retrieved", count=len(categories))
            return categories

    async def validate_category_exists(self, category_id: CategoryId) -> Category:
        """Validate that a referenced category exists.

        Raises:
            ValidationError: If the category does not exist
        """
        category = await self.category_repository.find_by_id(category_id)
        if not category:
            logfire.warn("Unknown category referenced", category_id=str(category_id))
            raise ValidationError(f"Category not found: {category_id}", field="category")
        return category

    async def get_by_ids(self, category_ids: list[CategoryId]) -> list[Category]:
        if not category_ids:
            return []
        return await self.category_repository.find_by_ids(category_ids)

    async def get_category_by_slug(self, slug: Slug) -> Category | None:
        """Get a category by slug.

        Args:
            slug: Category slug

        Returns:
            Category if found, None otherwise
        """
        with logfire.span("category_service.get_category_by_slug", slug=str(slug)):
            category = await self.category_repository.find_by_slug(slug)
            if not category:
                logfire.warn("Category not found by slug", slug=str(slug))
            return category

    async def ensure_name_available(
        self, name: str, category_id: CategoryId | None = None
    ) -> None:
        """Reject a category name already used by another category.

        Raises:
            BusinessRuleViolationError: If the name is taken
        """
        existing = await self.category_repository.find_by_name(name)
        if existing and existing.id != category_id:
            raise BusinessRuleViolationError(f"Category '{name}' already exists")

    async def generate_unique_slug(
        self, name: str, category_id: CategoryId | None = None
    ) -> Slug:
        async def _exists(slug: Slug) -> bool:
            return await self.category_repository.slug_exists(slug, exclude_id=category_id)

        return await allocate_slug(name, _exists, field="name")

    async def save_category(self, category: Category) -> Category:
        with logfire.span(
            "category_service.save_category",
            category_id=str(category.id),
            category_name=category.name,
        ):
            saved = await self.category_repository.save(category)
            logfire.info("Category saved", category_id=str(saved.id), slug=saved.slug.root)
            return saved
