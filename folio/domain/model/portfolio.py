"""Portfolio aggregate root.

A portfolio entry showcases one project: a cover image, two short narrative
sections and up to eight gallery images.
"""

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from folio.domain.model.common import DomainModel, utcnow
from folio.domain.value import (
    SEO,
    MediaId,
    PortfolioCategory,
    PortfolioId,
    PublicationStatus,
    Slug,
)

TITLE_MAX_LENGTH = 140
GALLERY_SLOTS = tuple(f"image{i}" for i in range(1, 9))


class Portfolio(DomainModel):
    """Portfolio aggregate root.

    ``gallery`` maps slot names (``image1`` .. ``image8``) to media ids. A slot
    that is missing from the mapping has never been set, while a slot mapped
    to None was explicitly cleared. ``intro`` and ``implementation`` are
    missing while None; the backfill turns them into empty strings.
    """

    id: PortfolioId
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    slug: Slug
    year: int | None = Field(default=None, ge=1900, le=2100)
    categories: list[PortfolioCategory] = Field(default_factory=list)
    cover_image_id: MediaId | None = None
    intro: str | None = Field(default=None, max_length=1000)
    implementation: str | None = Field(default=None, max_length=1000)
    gallery: dict[str, MediaId | None] = Field(default_factory=dict)
    excerpt: str | None = Field(default=None, max_length=300)
    description: str | None = Field(default=None, max_length=4000)
    status: PublicationStatus = PublicationStatus.DRAFT
    published_at: datetime | None = None
    seo: SEO = Field(default_factory=SEO)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("gallery")
    @classmethod
    def validate_gallery_slots(
        cls, v: dict[str, MediaId | None]
    ) -> dict[str, MediaId | None]:
        unknown = set(v) - set(GALLERY_SLOTS)
        if unknown:
            raise ValueError(f"Unknown gallery slots: {', '.join(sorted(unknown))}")
        return v

    @model_validator(mode="after")
    def validate_publication_state(self) -> "Portfolio":
        if self.status == PublicationStatus.PUBLISHED and self.published_at is None:
            raise ValueError("Published portfolios must have a publication date")
        if self.status == PublicationStatus.DRAFT and self.published_at is not None:
            raise ValueError("Draft portfolios cannot have a publication date")
        return self

    @property
    def missing_fields(self) -> list[str]:
        """Optional fields that have never been set."""
        missing = [
            name for name in ("intro", "implementation") if getattr(self, name) is None
        ]
        missing.extend(slot for slot in GALLERY_SLOTS if slot not in self.gallery)
        return missing
