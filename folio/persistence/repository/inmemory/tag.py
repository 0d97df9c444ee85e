"""In-memory tag repository for testing."""

from typing import Optional

from folio.domain.model.tag import Tag
from folio.domain.repository.tag import TagRepository
from folio.domain.value import Slug, TagId, TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _tags(self) -> dict[TagId, Tag]:
        return self._store.tags

    async def save(self, tag: Tag) -> Tag:
        """Save a tag."""
        self._tags[tag.id] = tag
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self._tags.get(tag_id)

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        return [self._tags[tid] for tid in tag_ids if tid in self._tags]

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        for tag in self._tags.values():
            if tag.name == name:
                return tag
        return None

    async def find_by_slugs(self, slugs: list[Slug]) -> list[Tag]:
        """Find multiple tags by slug."""
        wanted = {s.root for s in slugs}
        return [t for t in self._tags.values() if t.slug.root in wanted]

    async def find_all(self) -> list[Tag]:
        """Find all tags ordered by name."""
        return sorted(self._tags.values(), key=lambda t: t.name.root)

    async def slug_exists(self, slug: Slug, exclude_id: Optional[TagId] = None) -> bool:
        """Check if a slug is used by another tag."""
        return any(t.slug == slug and t.id != exclude_id for t in self._tags.values())

    async def update_journal_count(self, tag_id: TagId, journal_count: int) -> None:
        """Overwrite a tag's journal count."""
        tag = self._tags.get(tag_id)
        if tag is not None:
            self._tags[tag_id] = tag.model_copy(update={"journal_count": journal_count})

    async def delete(self, tag_id: TagId) -> None:
        """Delete a tag."""
        self._tags.pop(tag_id, None)
