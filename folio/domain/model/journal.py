"""Journal aggregate root.

Journals are the blog entries of the site: rich text content with a
draft/published workflow, an optional category and an ordered list of tags.
"""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from folio.domain.model.common import DomainModel, utcnow
from folio.domain.value import (
    SEO,
    AudioUrl,
    CategoryId,
    JournalId,
    JournalSortField,
    MediaId,
    PublicationStatus,
    Slug,
    SortOrder,
    TagId,
)
from folio.util.validation import validate_rich_text_content

TITLE_MAX_LENGTH = 100
EXCERPT_MAX_LENGTH = 300


def tag_ref_id(ref: Any) -> TagId | None:
    """Extract the tag id from a tag reference.

    A reference may be a bare id (UUID or string), an object with an ``id``
    attribute, or a mapping with an ``"id"`` key. Returns None when the
    reference carries no usable id.
    """
    if isinstance(ref, dict):
        ref = ref.get("id")
    elif not isinstance(ref, (UUID, str)) and hasattr(ref, "id"):
        ref = ref.id

    if isinstance(ref, UUID):
        return TagId(ref)
    if isinstance(ref, str):
        try:
            return TagId(UUID(ref))
        except ValueError:
            return None
    return None


class Journal(DomainModel):
    """Journal aggregate root.

    ``published_at`` is set exactly when ``status`` is published.
    """

    id: JournalId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    slug: Slug
    content: dict[str, Any]
    excerpt: str | None = Field(default=None, max_length=EXCERPT_MAX_LENGTH)
    status: PublicationStatus = PublicationStatus.DRAFT
    published_at: datetime | None = None
    category_id: CategoryId | None = None
    tags: list[TagId] = Field(default_factory=list)
    cover_image_id: MediaId | None = None
    audio_url: AudioUrl | None = None
    seo: SEO = Field(default_factory=SEO)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: Any) -> Any:
        result = validate_rich_text_content(v)
        if not result.is_valid:
            raise ValueError(result.error)
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tag_refs(cls, v: Any) -> list[TagId]:
        """Accept ids, objects or mappings carrying an id; drop duplicates."""
        if v is None:
            return []
        tag_ids: list[TagId] = []
        for ref in v:
            tag_id = tag_ref_id(ref)
            if tag_id is None:
                raise ValueError(f"Invalid tag reference: {ref!r}")
            if tag_id not in tag_ids:
                tag_ids.append(tag_id)
        return tag_ids

    @model_validator(mode="after")
    def validate_publication_state(self) -> "Journal":
        """Published journals carry a publication date; drafts do not."""
        if self.status == PublicationStatus.PUBLISHED and self.published_at is None:
            raise ValueError("Published journals must have a publication date")
        if self.status == PublicationStatus.DRAFT and self.published_at is not None:
            raise ValueError("Draft journals cannot have a publication date")
        return self

    @property
    def is_published(self) -> bool:
        return self.status == PublicationStatus.PUBLISHED


class JournalQuery(DomainModel):
    """Filter, ordering and paging for journal listings."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    category_id: CategoryId | None = None
    tag_ids: list[TagId] = Field(default_factory=list)  # any-of
    status: PublicationStatus | None = None
    search: str | None = None  # case-insensitive match on title or excerpt
    sort_by: JournalSortField = JournalSortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
