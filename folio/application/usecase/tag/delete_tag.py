"""Delete tag use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import ResponseModel, parse_id
from folio.domain.service import TagDeletionService, TagService
from folio.domain.value import TagId
from folio.util.cache import CacheInvalidator


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    tag_id: str


class DeleteTagResponse(ResponseModel):
    """Delete tag response."""

    journals_updated: int


class DeleteTagUseCase:
    """Use case for deleting a tag."""

    def __init__(
        self,
        tag_service: TagService,
        tag_deletion_service: TagDeletionService,
        cache_invalidator: CacheInvalidator,
    ) -> None:
        self.tag_service = tag_service
        self.tag_deletion_service = tag_deletion_service
        self.cache_invalidator = cache_invalidator

    async def execute(self, request: DeleteTagRequest) -> DeleteTagResponse:
        """Strip the tag from every journal, then delete it.

        Raises:
            NotFoundError: If the tag does not exist
        """
        tag_id = TagId(parse_id(request.tag_id, "tag_id"))

        with logfire.span("delete_tag.execute", tag_id=str(tag_id)):
            await self.tag_service.get_by_id(tag_id)

            journals_updated = await self.tag_deletion_service.cascade_remove(tag_id)
            await self.tag_service.delete_tag(tag_id)

            self.cache_invalidator.invalidate_tag(str(tag_id))
            self.cache_invalidator.invalidate_journal()

            return DeleteTagResponse(journals_updated=journals_updated)
