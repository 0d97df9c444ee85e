#!/usr/bin/env python3
"""Seed demo categories, tags, journals and portfolios.

Everything is created through the write use cases, so slugs, excerpts and
tag journal counts are derived exactly as they are for real content.
"""

import asyncio
import sys
from datetime import datetime, timezone

import logfire

from folio.application.usecase.category import (
    CreateCategoryRequest,
    CreateCategoryUseCase,
)
from folio.application.usecase.journal import (
    CreateJournalRequest,
    CreateJournalUseCase,
)
from folio.application.usecase.portfolio import (
    CreatePortfolioRequest,
    CreatePortfolioUseCase,
)
from folio.application.usecase.tag import CreateTagRequest, CreateTagUseCase
from folio.config import Settings
from folio.util.di.container import create_container
from folio.util.observability import configure_logfire

CATEGORIES = [
    ("Design", "Thoughts on design, UX, and visual creativity", "#d9fe62"),
    ("Technology", "Insights on web development and emerging tech", "#b2e3ff"),
    ("Life & Growth", "Personal reflections and life lessons", "#ff85b7"),
]

TAGS = ["React", "NextJS", "TypeScript", "UX", "Productivity", "Learning"]

JOURNALS = [
    {
        "title": "Building Modern Web Applications with Next.js 15",
        "paragraphs": [
            "Next.js 15 brings real improvements to the React ecosystem. This "
            "post covers what it is like to build production applications with it.",
            "Highlights: a faster App Router and better Server Components.",
        ],
        "status": "published",
        "published_at": datetime(2024, 12, 1, tzinfo=timezone.utc),
        "category": "Technology",
        "tags": ["NextJS", "TypeScript"],
    },
    {
        "title": "The Art of Minimalist Design in Digital Products",
        "paragraphs": [
            "Minimalism is not about removing things; it is about making room "
            "for what matters.",
        ],
        "status": "published",
        "published_at": datetime(2024, 11, 28, tzinfo=timezone.utc),
        "category": "Design",
        "tags": ["UX"],
    },
    {
        "title": "Lessons Learned from Building My First SaaS Product",
        "paragraphs": [
            "Shipping a product alone teaches you quickly which work matters.",
        ],
        "status": "published",
        "published_at": datetime(2024, 11, 25, tzinfo=timezone.utc),
        "category": "Life & Growth",
        "tags": ["Productivity", "Learning"],
    },
    {
        "title": "React Server Components: The Future of Web Development",
        "paragraphs": [
            "Server Components move data fetching back to the server without "
            "giving up interactivity.",
        ],
        "status": "published",
        "published_at": datetime(2024, 11, 20, tzinfo=timezone.utc),
        "category": "Technology",
        "tags": ["React", "TypeScript"],
    },
    {
        "title": "Finding Balance: Work, Life, and Creative Pursuits",
        "paragraphs": ["Notes on keeping side projects alive without burning out."],
        "status": "draft",
        "published_at": None,
        "category": "Life & Growth",
        "tags": ["Productivity", "Learning"],
    },
]

PORTFOLIOS = [
    {
        "title": "Studio Rebrand",
        "year": 2024,
        "categories": ["branding", "web-design"],
        "intro": "A full identity refresh for an independent design studio.",
        "implementation": "Built as a static site with a headless content API.",
        "status": "published",
    },
    {
        "title": "Habit Tracker App",
        "year": 2023,
        "categories": ["ui-ux", "app-development"],
        "intro": "A calm, offline-first habit tracker.",
        "status": "draft",
    },
]


def rich_text(paragraphs: list[str]) -> dict:
    """Build a minimal rich text document from plain paragraphs."""
    return {
        "root": {
            "type": "root",
            "children": [
                {
                    "type": "paragraph",
                    "children": [{"type": "text", "text": text}],
                }
                for text in paragraphs
            ],
        }
    }


async def seed() -> int:
    container = create_container()
    try:
        category_ids: dict[str, str] = {}
        for name, description, color in CATEGORIES:
            async with container() as request_container:
                use_case = await request_container.get(CreateCategoryUseCase)
                result = await use_case.execute(
                    CreateCategoryRequest(name=name, description=description, color=color)
                )
                category_ids[name] = result.category.id
        logfire.info("Categories created", count=len(category_ids))

        tag_ids: dict[str, str] = {}
        for name in TAGS:
            async with container() as request_container:
                use_case = await request_container.get(CreateTagUseCase)
                result = await use_case.execute(CreateTagRequest(name=name))
                tag_ids[name] = result.tag.id
        logfire.info("Tags created", count=len(tag_ids))

        for entry in JOURNALS:
            async with container() as request_container:
                use_case = await request_container.get(CreateJournalUseCase)
                await use_case.execute(
                    CreateJournalRequest(
                        title=entry["title"],
                        content=rich_text(entry["paragraphs"]),
                        status=entry["status"],
                        published_at=entry["published_at"],
                        category_id=category_ids[entry["category"]],
                        tags=[tag_ids[name] for name in entry["tags"]],
                    )
                )
        logfire.info("Journals created", count=len(JOURNALS))

        for entry in PORTFOLIOS:
            async with container() as request_container:
                use_case = await request_container.get(CreatePortfolioUseCase)
                await use_case.execute(CreatePortfolioRequest(**entry))
        logfire.info("Portfolios created", count=len(PORTFOLIOS))
    finally:
        await container.close()

    return 0


def main() -> int:
    configure_logfire(Settings())
    try:
        return asyncio.run(seed())
    except Exception as e:
        logfire.error(
            "Seeding demo data failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
