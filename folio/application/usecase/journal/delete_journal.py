"""Delete journal use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import parse_id
from folio.domain.service import JournalService, TagCountService
from folio.domain.value import JournalId
from folio.util.cache import CacheInvalidator


class DeleteJournalRequest(BaseModel):
    """Delete journal request."""

    journal_id: str


class DeleteJournalUseCase:
    """Use case for deleting a journal entry."""

    def __init__(
        self,
        journal_service: JournalService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> None:
        self.journal_service = journal_service
        self.tag_count_service = tag_count_service
        self.cache_invalidator = cache_invalidator

    async def execute(self, request: DeleteJournalRequest) -> None:
        """Delete the journal, then reconcile the tags it referenced.

        Raises:
            NotFoundError: If the journal does not exist
        """
        journal_id = JournalId(parse_id(request.journal_id, "journal_id"))

        with logfire.span("delete_journal.execute", journal_id=str(journal_id)):
            journal = await self.journal_service.get_by_id(journal_id)

            await self.journal_service.delete_journal(journal_id)

            await self.tag_count_service.reconcile(journal.tags)
            self.cache_invalidator.invalidate_journal(str(journal_id))
