"""PostgreSQL implementation of Journal repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, exists, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model.journal import Journal, JournalQuery
from folio.domain.repository.journal import JournalRepository
from folio.domain.value import (
    CategoryId,
    JournalId,
    JournalSortField,
    PublicationStatus,
    Slug,
    SortOrder,
    TagId,
)
from folio.persistence.mappers import journal_to_dict, row_to_journal
from folio.persistence.tables import journal_tags_table, journals_table

_SORT_COLUMNS = {
    JournalSortField.CREATED_AT: journals_table.c.created_at,
    JournalSortField.UPDATED_AT: journals_table.c.updated_at,
    JournalSortField.PUBLISHED_AT: journals_table.c.published_at,
    JournalSortField.TITLE: journals_table.c.title,
}


class PostgresJournalRepository(JournalRepository):
    """PostgreSQL implementation of JournalRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_journals(
        self, journal_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch ordered tag ids for multiple journals in a single query.

        Args:
            journal_ids: List of journal IDs

        Returns:
            Dict mapping journal_id -> tag ids in list order
        """
        if not journal_ids:
            return {}

        stmt = (
            select(journal_tags_table.c.journal_id, journal_tags_table.c.tag_id)
            .where(journal_tags_table.c.journal_id.in_(journal_ids))
            .order_by(journal_tags_table.c.journal_id, journal_tags_table.c.position)
        )
        result = await self.session.execute(stmt)

        journal_tag_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            journal_tag_map[row.journal_id].append(row.tag_id)

        return journal_tag_map

    async def _rows_to_journals(self, rows) -> list[Journal]:
        journal_tag_map = await self._fetch_tags_for_journals([row.id for row in rows])
        return [
            row_to_journal(row._asdict(), tag_ids=journal_tag_map.get(row.id, []))
            for row in rows
        ]

    @staticmethod
    def _tag_filter(tag_ids: list[TagId]):
        return exists().where(
            and_(
                journal_tags_table.c.journal_id == journals_table.c.id,
                journal_tags_table.c.tag_id.in_(tag_ids),
            )
        )

    def _conditions(
        self,
        tag_ids: Optional[list[TagId]] = None,
        category_id: Optional[CategoryId] = None,
        status: Optional[PublicationStatus] = None,
        search: Optional[str] = None,
    ) -> list:
        conditions = []
        if tag_ids:
            conditions.append(self._tag_filter(tag_ids))
        if category_id is not None:
            conditions.append(journals_table.c.category_id == category_id)
        if status is not None:
            conditions.append(journals_table.c.status == status.value)
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    journals_table.c.title.ilike(pattern),
                    journals_table.c.excerpt.ilike(pattern),
                )
            )
        return conditions

    async def find_by_id(self, journal_id: JournalId) -> Optional[Journal]:
        """Find a journal by ID."""
        with logfire.span("journal_repository.find_by_id", journal_id=str(journal_id)):
            stmt = select(journals_table).where(journals_table.c.id == journal_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            journals = await self._rows_to_journals([row])
            return journals[0]

    async def find_by_slug(self, slug: Slug) -> Optional[Journal]:
        """Find a journal by slug."""
        with logfire.span("journal_repository.find_by_slug", slug=str(slug)):
            stmt = select(journals_table).where(journals_table.c.slug == slug.root)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            journals = await self._rows_to_journals([row])
            return journals[0]

    async def slug_exists(
        self, slug: Slug, exclude_id: Optional[JournalId] = None
    ) -> bool:
        """Check if a slug is used by another journal."""
        stmt = (
            select(func.count())
            .select_from(journals_table)
            .where(journals_table.c.slug == slug.root)
        )
        if exclude_id is not None:
            stmt = stmt.where(journals_table.c.id != exclude_id)
        result = await self.session.execute(stmt)
        exists_ = (result.scalar() or 0) > 0
        logfire.debug("Slug existence check", slug=str(slug), exists=exists_)
        return exists_

    async def find_page(self, query: JournalQuery) -> tuple[list[Journal], int]:
        """Find one page of journals with filtering and ordering."""
        with logfire.span(
            "journal_repository.find_page",
            page=query.page,
            limit=query.limit,
            status=query.status.value if query.status else None,
            search=query.search,
        ):
            conditions = self._conditions(
                tag_ids=query.tag_ids,
                category_id=query.category_id,
                status=query.status,
                search=query.search,
            )

            count_stmt = select(func.count()).select_from(journals_table)
            if conditions:
                count_stmt = count_stmt.where(*conditions)
            total = (await self.session.execute(count_stmt)).scalar() or 0

            column = _SORT_COLUMNS[query.sort_by]
            ordering = column.asc() if query.sort_order == SortOrder.ASC else column.desc()

            stmt = select(journals_table)
            if conditions:
                stmt = stmt.where(*conditions)
            stmt = (
                stmt.order_by(ordering.nulls_last(), journals_table.c.id)
                .limit(query.limit)
                .offset(query.offset)
            )

            result = await self.session.execute(stmt)
            journals = await self._rows_to_journals(result.fetchall())

            logfire.info("Found journals", count=len(journals), total=total)
            return journals, total

    async def find_by_tag(self, tag_id: TagId, limit: int) -> list[Journal]:
        """Find journals referencing a tag."""
        with logfire.span("journal_repository.find_by_tag", tag_id=str(tag_id)):
            async with self.session.begin_nested():
                stmt = (
                    select(journals_table)
                    .where(self._tag_filter([tag_id]))
                    .order_by(journals_table.c.created_at, journals_table.c.id)
                    .limit(limit)
                )
                result = await self.session.execute(stmt)
                return await self._rows_to_journals(result.fetchall())

    async def count(
        self,
        tag_id: Optional[TagId] = None,
        category_id: Optional[CategoryId] = None,
        status: Optional[PublicationStatus] = None,
    ) -> int:
        """Count journals matching the given filters.

        Runs inside a savepoint so a failure here leaves the surrounding
        transaction usable.
        """
        with logfire.span(
            "journal_repository.count",
            tag_id=str(tag_id) if tag_id else None,
            category_id=str(category_id) if category_id else None,
            status=status.value if status else None,
        ):
            conditions = self._conditions(
                tag_ids=[tag_id] if tag_id is not None else None,
                category_id=category_id,
                status=status,
            )
            stmt = select(func.count()).select_from(journals_table)
            if conditions:
                stmt = stmt.where(*conditions)

            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, journal: Journal) -> Journal:
        """Save a journal (create or update) and rewrite its tag list."""
        with logfire.span(
            "journal_repository.save",
            journal_id=str(journal.id),
            tags=[str(t) for t in journal.tags],
        ):
            journal_dict = journal_to_dict(journal)  # Note: tags are excluded by mapper

            async with self.session.begin_nested():
                existing = await self.session.execute(
                    select(journals_table.c.id).where(journals_table.c.id == journal.id)
                )

                if existing.fetchone():
                    await self.session.execute(
                        update(journals_table)
                        .where(journals_table.c.id == journal.id)
                        .values(**journal_dict)
                    )
                    await self.session.execute(
                        delete(journal_tags_table).where(
                            journal_tags_table.c.journal_id == journal.id
                        )
                    )
                else:
                    logfire.info("Inserting new journal", journal_id=str(journal.id))
                    await self.session.execute(insert(journals_table).values(**journal_dict))

                if journal.tags:
                    await self.session.execute(
                        insert(journal_tags_table),
                        [
                            {"journal_id": journal.id, "tag_id": tag_id, "position": i}
                            for i, tag_id in enumerate(journal.tags)
                        ],
                    )

            await self.session.flush()
            return journal

    async def delete(self, journal_id: JournalId) -> None:
        """Delete a journal (journal_tags rows cascade)."""
        stmt = delete(journals_table).where(journals_table.c.id == journal_id)
        await self.session.execute(stmt)
        await self.session.flush()
