"""Shared backing store for the in-memory repositories.

Repositories are created per request; the store outlives them so data written
by one request is visible to the next (tests, local runs without Postgres).
"""

from dataclasses import dataclass, field

from folio.domain.model import Category, Journal, Portfolio, Tag
from folio.domain.value import CategoryId, JournalId, PortfolioId, TagId


@dataclass
class InMemoryStore:
    journals: dict[JournalId, Journal] = field(default_factory=dict)
    tags: dict[TagId, Tag] = field(default_factory=dict)
    categories: dict[CategoryId, Category] = field(default_factory=dict)
    portfolios: dict[PortfolioId, Portfolio] = field(default_factory=dict)