"""Query parameter parsing shared by the read routes.

Unknown sort fields and orders fall back to the defaults; malformed
pagination is rejected.
"""

from enum import Enum
from typing import TypeVar

from fastapi import status

from folio.domain.value import (
    JournalSortField,
    PublicationStatus,
    SortOrder,
    TaxonomySortField,
)
from folio.interface.error import APIError, ErrorCode

E = TypeVar("E", bound=Enum)

JOURNAL_SORT_FIELDS = {
    "createdAt": JournalSortField.CREATED_AT,
    "updatedAt": JournalSortField.UPDATED_AT,
    "publishedAt": JournalSortField.PUBLISHED_AT,
    "title": JournalSortField.TITLE,
}

TAXONOMY_SORT_FIELDS = {
    "name": TaxonomySortField.NAME,
    "journalCount": TaxonomySortField.JOURNAL_COUNT,
    "createdAt": TaxonomySortField.CREATED_AT,
}

SORT_ORDERS = {"asc": SortOrder.ASC, "desc": SortOrder.DESC}

STATUSES = {s.value: s for s in PublicationStatus}


def parse_choice(
    value: str | None, choices: dict[str, E], default: E | None
) -> E | None:
    if value is None:
        return default
    return choices.get(value.strip(), default)


def _bad_request(message: str) -> APIError:
    return APIError(ErrorCode.VALIDATION_ERROR, message, status.HTTP_400_BAD_REQUEST)


def parse_page(value: str | None) -> int:
    """Parse ``page``; defaults to 1.

    Raises:
        APIError: If the value is not a positive integer
    """
    if value is None or value == "":
        return 1
    try:
        page = int(value)
    except ValueError:
        page = 0
    if page < 1:
        raise _bad_request("Page must be a positive integer")
    return page


def parse_limit(value: str | None, default: int, maximum: int) -> int:
    """Parse ``limit`` within ``1..maximum``.

    Raises:
        APIError: If the value is out of range or not an integer
    """
    if value is None or value == "":
        return default
    try:
        limit = int(value)
    except ValueError:
        limit = 0
    if not 1 <= limit <= maximum:
        raise _bad_request(f"Limit must be between 1 and {maximum}")
    return limit


def parse_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() in ("1", "true", "yes")


def parse_slug_list(*groups: list[str] | None) -> list[str]:
    """Merge repeated and comma-separated slug parameters, dropping blanks."""
    slugs: list[str] = []
    for group in groups:
        for raw in group or []:
            slugs.extend(s.strip() for s in raw.split(",") if s.strip())
    return list(dict.fromkeys(slugs))
