"""Get journal use case."""

import logfire
from pydantic import BaseModel, ValidationError as PydanticValidationError

from folio.application.usecase.base import ResponseModel
from folio.application.usecase.items import JournalItem
from folio.domain.error import NotFoundError
from folio.domain.service import CategoryService, JournalService, TagService
from folio.domain.value import Slug

from .common import to_journal_items


class GetJournalRequest(BaseModel):
    """Get journal request."""

    slug: str


class GetJournalResponse(ResponseModel):
    """Get journal response."""

    journal: JournalItem


class GetJournalUseCase:
    """Use case for reading one journal entry by slug."""

    def __init__(
        self,
        journal_service: JournalService,
        tag_service: TagService,
        category_service: CategoryService,
    ) -> None:
        self.journal_service = journal_service
        self.tag_service = tag_service
        self.category_service = category_service

    async def execute(self, request: GetJournalRequest) -> GetJournalResponse:
        """Execute get journal flow.

        Drafts are returned too; callers decide how long to cache them.

        Raises:
            NotFoundError: If no journal has the slug
        """
        with logfire.span("get_journal.execute", slug=request.slug):
            try:
                slug = Slug(request.slug)
            except PydanticValidationError:
                # A malformed slug cannot match any journal
                raise NotFoundError("Journal", request.slug)

            journal = await self.journal_service.get_journal_by_slug(slug)
            if journal is None:
                raise NotFoundError("Journal", request.slug)

            if not journal.is_published:
                logfire.warn("Serving draft journal", slug=request.slug)

            [item] = await to_journal_items(
                [journal], self.tag_service, self.category_service
            )
            return GetJournalResponse(journal=item)
