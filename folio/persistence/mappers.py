"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from folio.domain.model import Category, Journal, Portfolio, Tag
from folio.domain.value import (
    SEO,
    AudioUrl,
    CategoryId,
    HexColor,
    JournalId,
    MediaId,
    PortfolioCategory,
    PortfolioId,
    PublicationStatus,
    Slug,
    TagId,
    TagName,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def _seo_to_dict(seo: SEO) -> Dict[str, Any]:
    return seo.model_dump(exclude_none=True)


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        slug=Slug(row["slug"]),
        journal_count=row.get("journal_count") or 0,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Args:
        tag: Tag domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": tag.id,
        "name": tag.name.root,
        "slug": tag.slug.root,
        "journal_count": tag.journal_count,
        "created_at": tag.created_at,
        "updated_at": tag.updated_at,
    }


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=row["name"],
        slug=Slug(row["slug"]),
        description=row.get("description"),
        color=HexColor(row["color"]) if row.get("color") else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict."""
    return {
        "id": category.id,
        "name": category.name,
        "slug": category.slug.root,
        "description": category.description,
        "color": category.color.root if category.color else None,
        "created_at": category.created_at,
        "updated_at": category.updated_at,
    }


def row_to_journal(row: Dict[str, Any], tag_ids: list[UUID] | None = None) -> Journal:
    """Convert database row to Journal domain model.

    Args:
        row: Database row as dict
        tag_ids: Ordered tag ids from journal_tags

    Returns:
        Journal domain model
    """
    category_id = _optional_uuid(row.get("category_id"))
    cover_image_id = _optional_uuid(row.get("cover_image_id"))
    return Journal(
        id=JournalId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        content=row["content"],
        excerpt=row.get("excerpt"),
        status=PublicationStatus(row["status"]),
        published_at=row.get("published_at"),
        category_id=CategoryId(category_id) if category_id else None,
        tags=[TagId(tid) for tid in (tag_ids or [])],
        cover_image_id=MediaId(cover_image_id) if cover_image_id else None,
        audio_url=AudioUrl(row["audio_url"]) if row.get("audio_url") else None,
        seo=SEO(**(row.get("seo") or {})),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def journal_to_dict(journal: Journal) -> Dict[str, Any]:
    """Convert Journal domain model to database dict.

    Tags are excluded; they live in journal_tags.
    """
    return {
        "id": journal.id,
        "title": journal.title,
        "slug": journal.slug.root,
        "content": journal.content,
        "excerpt": journal.excerpt,
        "status": journal.status.value,
        "published_at": journal.published_at,
        "category_id": journal.category_id,
        "cover_image_id": journal.cover_image_id,
        "audio_url": journal.audio_url.root if journal.audio_url else None,
        "seo": _seo_to_dict(journal.seo),
        "created_at": journal.created_at,
        "updated_at": journal.updated_at,
    }


def row_to_portfolio(row: Dict[str, Any]) -> Portfolio:
    """Convert database row to Portfolio domain model.

    Gallery slots absent from the stored mapping stay absent.
    """
    cover_image_id = _optional_uuid(row.get("cover_image_id"))
    gallery = {
        slot: MediaId(_uuid(media_id)) if media_id else None
        for slot, media_id in (row.get("gallery") or {}).items()
    }
    return Portfolio(
        id=PortfolioId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        year=row.get("year"),
        categories=[PortfolioCategory(c) for c in (row.get("categories") or [])],
        cover_image_id=MediaId(cover_image_id) if cover_image_id else None,
        intro=row.get("intro"),
        implementation=row.get("implementation"),
        gallery=gallery,
        excerpt=row.get("excerpt"),
        description=row.get("description"),
        status=PublicationStatus(row["status"]),
        published_at=row.get("published_at"),
        seo=SEO(**(row.get("seo") or {})),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def portfolio_to_dict(portfolio: Portfolio) -> Dict[str, Any]:
    """Convert Portfolio domain model to database dict."""
    return {
        "id": portfolio.id,
        "title": portfolio.title,
        "slug": portfolio.slug.root,
        "year": portfolio.year,
        "categories": [c.value for c in portfolio.categories],
        "cover_image_id": portfolio.cover_image_id,
        "intro": portfolio.intro,
        "implementation": portfolio.implementation,
        # JSONB holds strings; UUIDs are not JSON serializable
        "gallery": {
            slot: str(media_id) if media_id else None
            for slot, media_id in portfolio.gallery.items()
        },
        "excerpt": portfolio.excerpt,
        "description": portfolio.description,
        "status": portfolio.status.value,
        "published_at": portfolio.published_at,
        "seo": _seo_to_dict(portfolio.seo),
        "created_at": portfolio.created_at,
        "updated_at": portfolio.updated_at,
    }
