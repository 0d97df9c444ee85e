"""Tag domain service."""

import logfire

from folio.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from folio.domain.model.tag import Tag
from folio.domain.repository import TagRepository
from folio.domain.value import Slug, TagId, TagName

from .base import Service
from .content import allocate_slug


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def get_all_tags(self) -> list[Tag]:
        """Get all tags ordered by name."""
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def get_by_id(self, tag_id: TagId) -> Tag:
        """Get a tag by ID.

        Raises:
            NotFoundError: If tag not found
        """
        tag = await self.tag_repository.find_by_id(tag_id)
        if not tag:
            logfire.warn("Tag not found", tag_id=str(tag_id))
            raise NotFoundError("Tag", str(tag_id))
        return tag

    async def get_tags_by_slugs(self, slugs: list[Slug]) -> list[Tag]:
        """Resolve tag slugs; unknown slugs are ignored."""
        with logfire.span("tag_service.get_tags_by_slugs", slugs=[s.root for s in slugs]):
            tags = await self.tag_repository.find_by_slugs(slugs)
            if len(tags) < len(slugs):
                found = {t.slug.root for t in tags}
                logfire.info(
                    "Some tag slugs did not resolve",
                    missing=sorted(s.root for s in slugs if s.root not in found),
                )
            return tags

    async def get_tags_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Load tags, keeping the order of ``tag_ids``."""
        if not tag_ids:
            return []
        by_id = {t.id: t for t in await self.tag_repository.find_by_ids(tag_ids)}
        return [by_id[tid] for tid in tag_ids if tid in by_id]

    async def validate_tags_exist(self, tag_ids: list[TagId]) -> list[Tag]:
        """Validate that all referenced tags exist.

        Raises:
            ValidationError: If any referenced tag does not exist
        """
        tags = await self.get_tags_by_ids(tag_ids)
        found = {t.id for t in tags}
        missing = [str(tid) for tid in tag_ids if tid not in found]
        if missing:
            logfire.warn("Unknown tags referenced", tag_ids=missing)
            raise ValidationError(f"Tags not found: {', '.join(missing)}", field="tags")
        return tags

    async def ensure_name_available(
        self, name: TagName, tag_id: TagId | None = None
    ) -> None:
        """Reject a tag name already used by another tag.

        Raises:
            BusinessRuleViolationError: If the name is taken
        """
        existing = await self.tag_repository.find_by_name(name)
        if existing and existing.id != tag_id:
            logfire.warn("Tag name already exists", tag_name=name.root)
            raise BusinessRuleViolationError(f"Tag '{name.root}' already exists")

    async def generate_unique_slug(self, name: TagName, tag_id: TagId | None = None) -> Slug:
        async def _exists(slug: Slug) -> bool:
            return await self.tag_repository.slug_exists(slug, exclude_id=tag_id)

        return await allocate_slug(name.root, _exists, field="name")

    async def save_tag(self, tag: Tag) -> Tag:
        with logfire.span("tag_service.save_tag", tag_id=str(tag.id), tag_name=tag.name.root):
            saved = await self.tag_repository.save(tag)
            logfire.info("Tag saved", tag_id=str(saved.id), slug=saved.slug.root)
            return saved

    async def delete_tag(self, tag_id: TagId) -> None:
        with logfire.span("tag_service.delete_tag", tag_id=str(tag_id)):
            await self.tag_repository.delete(tag_id)
            logfire.info("Tag deleted", tag_id=str(tag_id))
