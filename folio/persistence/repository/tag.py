"""PostgreSQL implementation of Tag repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model.tag import Tag
from folio.domain.repository.tag import TagRepository
from folio.domain.value import Slug, TagId, TagName
from folio.persistence.mappers import row_to_tag, tag_to_dict
from folio.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        tag_dict = tag_to_dict(tag)

        # Try to find existing tag
        existing = await self.find_by_id(tag.id)

        if existing:
            stmt = (
                update(tags_table).where(tags_table.c.id == tag.id).values(**tag_dict)
            )
        else:
            stmt = insert(tags_table).values(**tag_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        stmt = select(tags_table).where(tags_table.c.id == tag_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        if not tag_ids:
            return []

        stmt = select(tags_table).where(tags_table.c.id.in_(tag_ids))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_slugs(self, slugs: list[Slug]) -> list[Tag]:
        """Find multiple tags by slug in a single query."""
        if not slugs:
            return []

        stmt = select(tags_table).where(tags_table.c.slug.in_([s.root for s in slugs]))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def slug_exists(self, slug: Slug, exclude_id: Optional[TagId] = None) -> bool:
        """Check if a slug is used by another tag."""
        stmt = (
            select(func.count())
            .select_from(tags_table)
            .where(tags_table.c.slug == slug.root)
        )
        if exclude_id is not None:
            stmt = stmt.where(tags_table.c.id != exclude_id)
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def update_journal_count(self, tag_id: TagId, journal_count: int) -> None:
        """Overwrite a tag's journal count inside a savepoint."""
        with logfire.span(
            "tag_repository.update_journal_count",
            tag_id=str(tag_id),
            journal_count=journal_count,
        ):
            async with self.session.begin_nested():
                await self.session.execute(
                    update(tags_table)
                    .where(tags_table.c.id == tag_id)
                    .values(journal_count=journal_count)
                )

    async def delete(self, tag_id: TagId) -> None:
        """Delete a tag."""
        stmt = delete(tags_table).where(tags_table.c.id == tag_id)
        await self.session.execute(stmt)
        await self.session.flush()
