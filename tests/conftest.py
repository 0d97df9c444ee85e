"""Test configuration and shared helpers."""

from typing import Any

import logfire
from dishka import AsyncContainer

from folio.application.usecase.category import (
    CreateCategoryRequest,
    CreateCategoryUseCase,
)
from folio.application.usecase.items import CategoryItem, JournalItem, TagItem
from folio.application.usecase.journal import (
    CreateJournalRequest,
    CreateJournalUseCase,
)
from folio.application.usecase.tag import CreateTagRequest, CreateTagUseCase

# Keep spans and events out of test output
logfire.configure(send_to_logfire=False, console=False)


def rich_text(*paragraphs: str) -> dict[str, Any]:
    """Build a rich text document with one paragraph per argument."""
    return {
        "root": {
            "type": "root",
            "children": [
                {"type": "paragraph", "children": [{"type": "text", "text": text}]}
                for text in paragraphs
            ],
        }
    }


async def create_tag(container: AsyncContainer, name: str) -> TagItem:
    use_case = await container.get(CreateTagUseCase)
    return (await use_case.execute(CreateTagRequest(name=name))).tag


async def create_category(
    container: AsyncContainer, name: str, color: str | None = None
) -> CategoryItem:
    use_case = await container.get(CreateCategoryUseCase)
    result = await use_case.execute(CreateCategoryRequest(name=name, color=color))
    return result.category


async def create_journal(
    container: AsyncContainer, title: str, **fields: Any
) -> JournalItem:
    """Create a journal through the write use case.

    ``content`` defaults to a single paragraph repeating the title.
    """
    fields.setdefault("content", rich_text(f"{title} body"))
    use_case = await container.get(CreateJournalUseCase)
    result = await use_case.execute(CreateJournalRequest(title=title, **fields))
    return result.journal
