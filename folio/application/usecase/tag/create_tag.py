"""Create tag use case."""

from typing import Any
from uuid import uuid4

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import ResponseModel
from folio.application.usecase.items import TagItem
from folio.domain.model import Tag
from folio.domain.model.common import utcnow
from folio.domain.service import TagCountService, TagService
from folio.domain.value import TagId
from folio.util.cache import CacheInvalidator

from .common import parse_tag_name


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: Any


class CreateTagResponse(ResponseModel):
    """Create tag response."""

    tag: TagItem


class CreateTagUseCase:
    """Use case for creating a tag."""

    def __init__(
        self,
        tag_service: TagService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> None:
        self.tag_service = tag_service
        self.tag_count_service = tag_count_service
        self.cache_invalidator = cache_invalidator

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Raises:
            ValidationError: If the name is invalid
            BusinessRuleViolationError: If the name is already taken
        """
        name = parse_tag_name(request.name)

        with logfire.span("create_tag.execute", tag_name=name.root):
            await self.tag_service.ensure_name_available(name)

            tag_id = TagId(uuid4())
            now = utcnow()
            tag = Tag(
                id=tag_id,
                name=name,
                slug=await self.tag_service.generate_unique_slug(name),
                created_at=now,
                updated_at=now,
            )

            saved = await self.tag_service.save_tag(
                self.tag_count_service.initialize(tag)
            )
            self.cache_invalidator.invalidate_tag(str(saved.id))

            return CreateTagResponse(tag=TagItem.from_tag(saved))
