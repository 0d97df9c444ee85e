"""Category entity for grouping journals."""

from datetime import datetime

from pydantic import Field

from folio.domain.model.common import DomainModel, utcnow
from folio.domain.value import CategoryId, HexColor, Slug


class Category(DomainModel):
    """Category entity.

    A journal belongs to at most one category. The number of journals in a
    category is computed when read and is not stored here.
    """

    id: CategoryId
    name: str = Field(min_length=1, max_length=50)
    slug: Slug
    description: str | None = Field(default=None, max_length=200)
    color: HexColor | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
