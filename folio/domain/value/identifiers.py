"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

JournalId = NewType("JournalId", UUID)
TagId = NewType("TagId", UUID)
CategoryId = NewType("CategoryId", UUID)
PortfolioId = NewType("PortfolioId", UUID)
MediaId = NewType("MediaId", UUID)
