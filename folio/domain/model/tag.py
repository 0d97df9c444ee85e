"""Tag entity for labelling journals."""

from datetime import datetime

from pydantic import Field

from folio.domain.model.common import DomainModel, utcnow
from folio.domain.value import Slug, TagId, TagName


class Tag(DomainModel):
    """Tag entity for labelling journals.

    ``journal_count`` is a denormalized count of journals (any status) whose
    tag list contains this tag. It is owned by the tag maintenance services
    and is never set from user input.
    """

    id: TagId
    name: TagName  # Unique
    slug: Slug  # Derived from name, unique
    journal_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
