"""Journal use cases."""

from .create_journal import (
    CreateJournalRequest,
    CreateJournalResponse,
    CreateJournalUseCase,
)
from .delete_journal import DeleteJournalRequest, DeleteJournalUseCase
from .get_journal import GetJournalRequest, GetJournalResponse, GetJournalUseCase
from .list_journals import (
    ListJournalsRequest,
    ListJournalsResponse,
    ListJournalsUseCase,
)
from .update_journal import (
    UpdateJournalRequest,
    UpdateJournalResponse,
    UpdateJournalUseCase,
)

__all__ = [
    "CreateJournalRequest",
    "CreateJournalResponse",
    "CreateJournalUseCase",
    "DeleteJournalRequest",
    "DeleteJournalUseCase",
    "GetJournalRequest",
    "GetJournalResponse",
    "GetJournalUseCase",
    "ListJournalsRequest",
    "ListJournalsResponse",
    "ListJournalsUseCase",
    "UpdateJournalRequest",
    "UpdateJournalResponse",
    "UpdateJournalUseCase",
]
