"""Helpers shared by the journal use cases."""

from typing import Any

from folio.application.usecase.base import parse_id
from folio.application.usecase.items import JournalItem
from folio.domain.error import ValidationError
from folio.domain.model import Journal
from folio.domain.model.journal import tag_ref_id
from folio.domain.service import CategoryService, TagService
from folio.domain.value import CategoryId, TagId


def parse_tag_refs(refs: list[Any]) -> list[TagId]:
    """Normalize tag references (ids, objects or mappings with an id).

    Raises:
        ValidationError: If a reference carries no usable id
    """
    tag_ids: list[TagId] = []
    for ref in refs:
        tag_id = tag_ref_id(ref)
        if tag_id is None:
            raise ValidationError(f"Invalid tag reference: {ref!r}", field="tags")
        if tag_id not in tag_ids:
            tag_ids.append(tag_id)
    return tag_ids


def parse_category_id(value: str | None) -> CategoryId | None:
    if value is None:
        return None
    return CategoryId(parse_id(value, "category"))


async def to_journal_items(
    journals: list[Journal],
    tag_service: TagService,
    category_service: CategoryService,
) -> list[JournalItem]:
    """Resolve categories and tags for a batch of journals."""
    tag_ids = list(dict.fromkeys(tid for j in journals for tid in j.tags))
    category_ids = list(dict.fromkeys(j.category_id for j in journals if j.category_id))

    tags = {t.id: t for t in await tag_service.get_tags_by_ids(tag_ids)}
    categories = {c.id: c for c in await category_service.get_by_ids(category_ids)}

    return [
        JournalItem.from_journal(
            journal,
            categories.get(journal.category_id) if journal.category_id else None,
            [tags[tid] for tid in journal.tags if tid in tags],
        )
        for journal in journals
    ]
