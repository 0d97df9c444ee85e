"""PostgreSQL implementation of Category repository."""

from typing import Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model.category import Category
from folio.domain.repository.category import CategoryRepository
from folio.domain.value import CategoryId, Slug
from folio.persistence.mappers import category_to_dict, row_to_category
from folio.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        category_dict = category_to_dict(category)

        existing = await self.find_by_id(category.id)
        if existing:
            stmt = (
                update(categories_table)
                .where(categories_table.c.id == category.id)
                .values(**category_dict)
            )
        else:
            stmt = insert(categories_table).values(**category_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return category

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find category by ID."""
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_by_ids(self, category_ids: list[CategoryId]) -> list[Category]:
        """Find multiple categories by ID in a single query."""
        if not category_ids:
            return []
        stmt = select(categories_table).where(categories_table.c.id.in_(category_ids))
        result = await self.session.execute(stmt)
        return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def find_by_slug(self, slug: Slug) -> Optional[Category]:
        """Find category by slug."""
        stmt = select(categories_table).where(categories_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[Category]:
        """Find category by name."""
        stmt = select(categories_table).where(categories_table.c.name == name)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        stmt = select(categories_table).order_by(categories_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[CategoryId] = None
    ) -> bool:
        """Check if a slug is used by another category."""
        stmt = (
            select(func.count())
            .select_from(categories_table)
            .where(categories_table.c.slug == slug.root)
        )
        if exclude_id is not None:
            stmt = stmt.where(categories_table.c.id != exclude_id)
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0
