"""Response items shared by several use cases."""

from datetime import datetime
from typing import Any

from folio.application.usecase.base import ResponseModel
from folio.domain.model import Category, Journal, Portfolio, Tag


class TagSummary(ResponseModel):
    """Tag as embedded in journals and filter lists."""

    id: str
    name: str
    slug: str

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagSummary":
        return cls(id=str(tag.id), name=tag.name.root, slug=tag.slug.root)


class CategorySummary(ResponseModel):
    """Category as embedded in journals and filter lists."""

    id: str
    name: str
    slug: str
    color: str | None = None

    @classmethod
    def from_category(cls, category: Category) -> "CategorySummary":
        return cls(
            id=str(category.id),
            name=category.name,
            slug=category.slug.root,
            color=category.color.root if category.color else None,
        )


class SeoItem(ResponseModel):
    title: str | None = None
    description: str | None = None


class JournalItem(ResponseModel):
    """Journal with its category and tags resolved."""

    id: str
    title: str
    slug: str
    content: dict[str, Any]
    excerpt: str | None
    status: str
    published_at: datetime | None
    category: CategorySummary | None
    tags: list[TagSummary]
    cover_image_id: str | None
    audio_url: str | None
    seo: SeoItem
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_journal(
        cls,
        journal: Journal,
        category: Category | None,
        tags: list[Tag],
    ) -> "JournalItem":
        """Build the item; ``tags`` must already be in the journal's order."""
        return cls(
            id=str(journal.id),
            title=journal.title,
            slug=journal.slug.root,
            content=journal.content,
            excerpt=journal.excerpt,
            status=journal.status.value,
            published_at=journal.published_at,
            category=CategorySummary.from_category(category) if category else None,
            tags=[TagSummary.from_tag(t) for t in tags],
            cover_image_id=str(journal.cover_image_id) if journal.cover_image_id else None,
            audio_url=journal.audio_url.root if journal.audio_url else None,
            seo=SeoItem(title=journal.seo.title, description=journal.seo.description),
            created_at=journal.created_at,
            updated_at=journal.updated_at,
        )


class TagItem(ResponseModel):
    """Tag with a journal count."""

    id: str
    name: str
    slug: str
    journal_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag, journal_count: int | None = None) -> "TagItem":
        """Build the item, defaulting to the tag's stored count."""
        return cls(
            id=str(tag.id),
            name=tag.name.root,
            slug=tag.slug.root,
            journal_count=tag.journal_count if journal_count is None else journal_count,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )


class CategoryItem(ResponseModel):
    """Category with a computed journal count."""

    id: str
    name: str
    slug: str
    description: str | None
    color: str | None
    journal_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_category(cls, category: Category, journal_count: int) -> "CategoryItem":
        return cls(
            id=str(category.id),
            name=category.name,
            slug=category.slug.root,
            description=category.description,
            color=category.color.root if category.color else None,
            journal_count=journal_count,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class PortfolioItem(ResponseModel):
    """Portfolio as shown on the site; unset gallery slots are omitted."""

    id: str
    title: str
    slug: str
    year: int | None
    categories: list[str]
    cover_image_id: str | None
    intro: str | None
    implementation: str | None
    gallery: dict[str, str | None]
    excerpt: str | None
    description: str | None
    status: str
    published_at: datetime | None
    seo: SeoItem
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_portfolio(cls, portfolio: Portfolio) -> "PortfolioItem":
        return cls(
            id=str(portfolio.id),
            title=portfolio.title,
            slug=portfolio.slug.root,
            year=portfolio.year,
            categories=[c.value for c in portfolio.categories],
            cover_image_id=str(portfolio.cover_image_id)
            if portfolio.cover_image_id
            else None,
            intro=portfolio.intro,
            implementation=portfolio.implementation,
            gallery={
                slot: str(media_id) if media_id else None
                for slot, media_id in portfolio.gallery.items()
            },
            excerpt=portfolio.excerpt,
            description=portfolio.description,
            status=portfolio.status.value,
            published_at=portfolio.published_at,
            seo=SeoItem(title=portfolio.seo.title, description=portfolio.seo.description),
            created_at=portfolio.created_at,
            updated_at=portfolio.updated_at,
        )
