"""Unit tests for tag count reconciliation and tag deletion cascade."""

from uuid import UUID, uuid4

import pytest

from folio.application.usecase.journal import (
    DeleteJournalRequest,
    DeleteJournalUseCase,
    UpdateJournalRequest,
    UpdateJournalUseCase,
)
from folio.domain.model import Journal, Tag
from folio.domain.repository import TagRepository
from folio.domain.service import TagCountService, TagDeletionService
from folio.domain.value import JournalId, Slug, TagId, TagName
from folio.persistence.repository.inmemory import (
    InMemoryJournalRepository,
    InMemoryStore,
    InMemoryTagRepository,
)
from tests.conftest import create_journal, create_tag, rich_text
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def make_tag(name: str, journal_count: int = 0) -> Tag:
    return Tag(
        id=TagId(uuid4()),
        name=TagName(name),
        slug=Slug(name.lower().replace(" ", "-")),
        journal_count=journal_count,
    )


def make_journal(title: str, tags: list[TagId]) -> Journal:
    return Journal(
        id=JournalId(uuid4()),
        title=title,
        slug=Slug(title.lower().replace(" ", "-")),
        content=rich_text(title),
        tags=tags,
    )


class FailingTagRepository(InMemoryTagRepository):
    """Fails count updates for one tag."""

    def __init__(self, store: InMemoryStore, failing_id: TagId) -> None:
        super().__init__(store)
        self.failing_id = failing_id

    async def update_journal_count(self, tag_id: TagId, journal_count: int) -> None:
        if tag_id == self.failing_id:
            raise RuntimeError("database unavailable")
        await super().update_journal_count(tag_id, journal_count)


class FailingSaveJournalRepository(InMemoryJournalRepository):
    """Fails saves for one journal."""

    def __init__(self, store: InMemoryStore, failing_id: JournalId) -> None:
        super().__init__(store)
        self.failing_id = failing_id

    async def save(self, journal: Journal) -> Journal:
        if journal.id == self.failing_id:
            raise RuntimeError("write conflict")
        return await super().save(journal)


class BrokenTagRepository(InMemoryTagRepository):
    async def find_all(self) -> list[Tag]:
        raise RuntimeError("connection lost")


class TestTagCountLifecycle:
    """Counts follow journals through create, update and delete."""

    @pytest.mark.asyncio
    async def test_counts_follow_journal_writes(self, unit_env):
        tag_repo = await unit_env.get(TagRepository)

        tag1 = await create_tag(unit_env, "Test Tag 1")
        tag2 = await create_tag(unit_env, "Test Tag 2")
        assert tag1.journal_count == 0

        journal = await create_journal(unit_env, "Tagged Entry", tags=[tag1.id])
        stored1 = await tag_repo.find_by_id(TagId(UUID(tag1.id)))
        assert stored1.journal_count == 1

        update = await unit_env.get(UpdateJournalUseCase)
        await update.execute(UpdateJournalRequest(journal_id=journal.id, tags=[tag2.id]))

        assert (await tag_repo.find_by_id(TagId(UUID(tag1.id)))).journal_count == 0
        assert (await tag_repo.find_by_id(TagId(UUID(tag2.id)))).journal_count == 1

        delete = await unit_env.get(DeleteJournalUseCase)
        await delete.execute(DeleteJournalRequest(journal_id=journal.id))

        assert (await tag_repo.find_by_id(TagId(UUID(tag2.id)))).journal_count == 0

    @pytest.mark.asyncio
    async def test_drafts_count_towards_tags(self, unit_env):
        tag_repo = await unit_env.get(TagRepository)
        tag = await create_tag(unit_env, "Drafts")

        await create_journal(unit_env, "Draft One", tags=[tag.id], status="draft")
        await create_journal(unit_env, "Live One", tags=[tag.id], status="published")

        assert (await tag_repo.find_by_id(TagId(UUID(tag.id)))).journal_count == 2


class TestReconcile:
    @pytest.mark.asyncio
    async def test_corrects_drift_and_is_idempotent(self):
        store = InMemoryStore()
        tags = InMemoryTagRepository(store)
        journals = InMemoryJournalRepository(store)
        service = TagCountService(journals, tags)

        tag = await tags.save(make_tag("Drifted", journal_count=7))
        await journals.save(make_journal("one", [tag.id]))

        assert await service.reconcile([tag.id]) == 1
        assert (await tags.find_by_id(tag.id)).journal_count == 1

        # Nothing left to fix
        assert await service.reconcile([tag.id, tag.id]) == 0
        assert (await tags.find_by_id(tag.id)).journal_count == 1

    @pytest.mark.asyncio
    async def test_skips_unknown_tags(self):
        store = InMemoryStore()
        service = TagCountService(
            InMemoryJournalRepository(store), InMemoryTagRepository(store)
        )

        assert await service.reconcile([TagId(uuid4())]) == 0
        assert await service.reconcile([]) == 0

    @pytest.mark.asyncio
    async def test_failure_on_one_tag_does_not_stop_others(self):
        store = InMemoryStore()
        broken = make_tag("Broken", journal_count=5)
        healthy = make_tag("Healthy", journal_count=5)
        tags = FailingTagRepository(store, failing_id=broken.id)
        journals = InMemoryJournalRepository(store)
        await tags.save(broken)
        await tags.save(healthy)

        service = TagCountService(journals, tags)

        assert await service.reconcile([broken.id, healthy.id]) == 1
        assert (await tags.find_by_id(broken.id)).journal_count == 5
        assert (await tags.find_by_id(healthy.id)).journal_count == 0

    @pytest.mark.asyncio
    async def test_recount_all_repairs_every_tag(self):
        store = InMemoryStore()
        tags = InMemoryTagRepository(store)
        journals = InMemoryJournalRepository(store)
        a = await tags.save(make_tag("Alpha", journal_count=3))
        b = await tags.save(make_tag("Beta", journal_count=0))
        await journals.save(make_journal("entry", [b.id]))

        updated = await TagCountService(journals, tags).recount_all()

        assert updated == 2
        assert (await tags.find_by_id(a.id)).journal_count == 0
        assert (await tags.find_by_id(b.id)).journal_count == 1

    @pytest.mark.asyncio
    async def test_recount_all_swallows_load_failure(self):
        store = InMemoryStore()
        service = TagCountService(
            InMemoryJournalRepository(store), BrokenTagRepository(store)
        )

        assert await service.recount_all() == 0

    def test_initialize_resets_count(self):
        service = TagCountService(InMemoryJournalRepository(), InMemoryTagRepository())

        assert service.initialize(make_tag("Fresh", journal_count=9)).journal_count == 0


class TestCascadeRemove:
    @pytest.mark.asyncio
    async def test_removes_tag_and_keeps_order(self):
        store = InMemoryStore()
        journals = InMemoryJournalRepository(store)
        a, b, c = (make_tag(n) for n in ("Alpha", "Beta", "Gamma"))
        tagged = await journals.save(make_journal("tagged", [a.id, b.id, c.id]))
        untouched = await journals.save(make_journal("untouched", [a.id, c.id]))

        updated = await TagDeletionService(journals).cascade_remove(b.id)

        assert updated == 1
        assert (await journals.find_by_id(tagged.id)).tags == [a.id, c.id]
        assert (await journals.find_by_id(untouched.id)) == untouched

    @pytest.mark.asyncio
    async def test_unreferenced_tag_is_a_no_op(self):
        journals = InMemoryJournalRepository()
        await journals.save(make_journal("entry", []))

        assert await TagDeletionService(journals).cascade_remove(TagId(uuid4())) == 0

    @pytest.mark.asyncio
    async def test_failed_save_is_skipped(self):
        store = InMemoryStore()
        tag = make_tag("Shared")
        stuck = make_journal("stuck", [tag.id])
        journals = FailingSaveJournalRepository(store, failing_id=stuck.id)
        store.journals[stuck.id] = stuck
        other = await journals.save(make_journal("other", [tag.id]))

        updated = await TagDeletionService(journals).cascade_remove(tag.id)

        assert updated == 1
        assert (await journals.find_by_id(other.id)).tags == []
        assert (await journals.find_by_id(stuck.id)).tags == [tag.id]

    @pytest.mark.asyncio
    async def test_page_size_bounds_rewrites(self):
        journals = InMemoryJournalRepository()
        tag = make_tag("Popular")
        for i in range(3):
            await journals.save(make_journal(f"entry {i}", [tag.id]))

        updated = await TagDeletionService(journals, page_size=2).cascade_remove(tag.id)

        assert updated == 2
        assert await journals.count(tag_id=tag.id) == 1
