"""Update tag use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import ResponseModel, parse_id
from folio.application.usecase.items import TagItem
from folio.domain.model.common import utcnow
from folio.domain.service import TagCountService, TagService
from folio.domain.value import TagId
from folio.util.cache import CacheInvalidator

from .common import parse_tag_name


class UpdateTagRequest(BaseModel):
    """Update tag request (rename)."""

    tag_id: str
    name: Any


class UpdateTagResponse(ResponseModel):
    """Update tag response."""

    tag: TagItem


class UpdateTagUseCase:
    """Use case for renaming a tag."""

    def __init__(
        self,
        tag_service: TagService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> None:
        self.tag_service = tag_service
        self.tag_count_service = tag_count_service
        self.cache_invalidator = cache_invalidator

    async def execute(self, request: UpdateTagRequest) -> UpdateTagResponse:
        """Rename the tag, then recompute its journal count.

        Raises:
            NotFoundError: If the tag does not exist
            ValidationError: If the name is invalid
            BusinessRuleViolationError: If the name is already taken
        """
        tag_id = TagId(parse_id(request.tag_id, "tag_id"))
        name = parse_tag_name(request.name)

        with logfire.span("update_tag.execute", tag_id=str(tag_id), tag_name=name.root):
            tag = await self.tag_service.get_by_id(tag_id)
            await self.tag_service.ensure_name_available(name, tag_id=tag_id)

            slug = tag.slug
            if name != tag.name:
                slug = await self.tag_service.generate_unique_slug(name, tag_id=tag_id)

            await self.tag_service.save_tag(
                tag.model_copy(update={"name": name, "slug": slug, "updated_at": utcnow()})
            )

            await self.tag_count_service.reconcile([tag_id])
            self.cache_invalidator.invalidate_tag(str(tag_id))

            # Re-read so the response carries the reconciled count
            return UpdateTagResponse(
                tag=TagItem.from_tag(await self.tag_service.get_by_id(tag_id))
            )
