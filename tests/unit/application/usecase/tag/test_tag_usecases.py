"""Unit tests for the tag use cases."""

from uuid import uuid4

import pytest

from folio.application.usecase.journal import GetJournalRequest, GetJournalUseCase
from folio.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    DeleteTagRequest,
    DeleteTagUseCase,
    ListTagsRequest,
    ListTagsUseCase,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from folio.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from folio.domain.value import SortOrder, TaxonomySortField
from tests.conftest import create_journal, create_tag
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateTag:
    @pytest.mark.asyncio
    async def test_creates_with_slug_and_zero_count(self, unit_env):
        tag = await create_tag(unit_env, "  Side Projects ")

        assert tag.name == "Side Projects"
        assert tag.slug == "side-projects"
        assert tag.journal_count == 0

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, unit_env):
        await create_tag(unit_env, "React")

        with pytest.raises(BusinessRuleViolationError, match="already exists"):
            await create_tag(unit_env, "React")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("name", "message"),
        [
            (None, "Tag name is required"),
            (42, "Tag name must be a string"),
            ("x" * 31, "Tag name must be 30 characters or less"),
            ("a/b", "Tag name can only contain"),
        ],
    )
    async def test_invalid_name(self, unit_env, name, message):
        use_case = await unit_env.get(CreateTagUseCase)

        with pytest.raises(ValidationError, match=message) as exc:
            await use_case.execute(CreateTagRequest(name=name))

        assert exc.value.field == "name"

    @pytest.mark.asyncio
    async def test_slug_collision_from_different_name(self, unit_env):
        await create_tag(unit_env, "Web Dev")

        tag = await create_tag(unit_env, "web-dev")

        assert tag.slug == "web-dev-1"


class TestUpdateTag:
    @pytest.mark.asyncio
    async def test_rename_updates_slug_and_keeps_count(self, unit_env):
        tag = await create_tag(unit_env, "Reactjs")
        await create_journal(unit_env, "Hooks", tags=[tag.id])
        use_case = await unit_env.get(UpdateTagUseCase)

        result = await use_case.execute(UpdateTagRequest(tag_id=tag.id, name="React"))

        assert result.tag.slug == "react"
        assert result.tag.journal_count == 1

    @pytest.mark.asyncio
    async def test_same_name_keeps_slug(self, unit_env):
        tag = await create_tag(unit_env, "Design")
        use_case = await unit_env.get(UpdateTagUseCase)

        result = await use_case.execute(UpdateTagRequest(tag_id=tag.id, name="Design"))

        assert result.tag.slug == "design"

    @pytest.mark.asyncio
    async def test_rename_to_taken_name(self, unit_env):
        await create_tag(unit_env, "Taken")
        tag = await create_tag(unit_env, "Free")
        use_case = await unit_env.get(UpdateTagUseCase)

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(UpdateTagRequest(tag_id=tag.id, name="Taken"))


class TestDeleteTag:
    @pytest.mark.asyncio
    async def test_cascades_before_delete(self, unit_env):
        keep = await create_tag(unit_env, "Keep")
        drop = await create_tag(unit_env, "Drop")
        await create_journal(unit_env, "Mixed", tags=[drop.id, keep.id])
        await create_journal(unit_env, "Untagged")
        use_case = await unit_env.get(DeleteTagUseCase)

        result = await use_case.execute(DeleteTagRequest(tag_id=drop.id))

        assert result.journals_updated == 1
        get = await unit_env.get(GetJournalUseCase)
        journal = (await get.execute(GetJournalRequest(slug="mixed"))).journal
        assert [t.name for t in journal.tags] == ["Keep"]

    @pytest.mark.asyncio
    async def test_unknown_tag(self, unit_env):
        use_case = await unit_env.get(DeleteTagUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteTagRequest(tag_id=str(uuid4())))


class TestListTags:
    @pytest.mark.asyncio
    async def test_counts_published_only(self, unit_env):
        tag = await create_tag(unit_env, "Mixed")
        await create_journal(unit_env, "Live", tags=[tag.id], status="published")
        await create_journal(unit_env, "Hidden", tags=[tag.id], status="draft")
        use_case = await unit_env.get(ListTagsUseCase)

        result = await use_case.execute(ListTagsRequest())

        assert result.tags[0].journal_count == 1

    @pytest.mark.asyncio
    async def test_hide_empty_and_sort_by_count(self, unit_env):
        busy = await create_tag(unit_env, "Busy")
        quiet = await create_tag(unit_env, "Quiet")
        await create_tag(unit_env, "Empty")
        for title in ("One", "Two"):
            await create_journal(unit_env, title, tags=[busy.id], status="published")
        await create_journal(unit_env, "Three", tags=[quiet.id], status="published")
        use_case = await unit_env.get(ListTagsUseCase)

        result = await use_case.execute(
            ListTagsRequest(
                sort_by=TaxonomySortField.JOURNAL_COUNT,
                sort_order=SortOrder.DESC,
                hide_empty=True,
            )
        )

        assert [(t.name, t.journal_count) for t in result.tags] == [
            ("Busy", 2),
            ("Quiet", 1),
        ]

    @pytest.mark.asyncio
    async def test_name_order_is_case_insensitive(self, unit_env):
        for name in ("beta", "Alpha", "gamma"):
            await create_tag(unit_env, name)
        use_case = await unit_env.get(ListTagsUseCase)

        result = await use_case.execute(ListTagsRequest())

        assert [t.name for t in result.tags] == ["Alpha", "beta", "gamma"]
        assert result.last_modified is not None
