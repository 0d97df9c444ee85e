"""Domain value objects for Folio."""

from folio.domain.value.identifiers import (
    CategoryId,
    JournalId,
    MediaId,
    PortfolioId,
    TagId,
)
from folio.domain.value.types import (
    SEO,
    AudioUrl,
    HexColor,
    JournalSortField,
    PortfolioCategory,
    PublicationStatus,
    Slug,
    SortOrder,
    TagName,
    TaxonomySortField,
)

__all__ = [
    # Identifiers
    "JournalId",
    "TagId",
    "CategoryId",
    "PortfolioId",
    "MediaId",
    # Types
    "TagName",
    "Slug",
    "HexColor",
    "AudioUrl",
    "SEO",
    "PublicationStatus",
    "PortfolioCategory",
    "SortOrder",
    "JournalSortField",
    "TaxonomySortField",
]
