"""Domain layer DI providers."""

from dishka import Scope, provide

from folio.config import Settings
from folio.domain.repository import (
    CategoryRepository,
    JournalRepository,
    PortfolioRepository,
    TagRepository,
)
from folio.domain.service import (
    CategoryService,
    JournalService,
    PortfolioService,
    TagCountService,
    TagDeletionService,
    TagService,
)
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_journal_service(self, journal_repository: JournalRepository) -> JournalService:
        """Provide journal domain service."""
        return JournalService(journal_repository=journal_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_category_service(
        self, category_repository: CategoryRepository
    ) -> CategoryService:
        """Provide category domain service."""
        return CategoryService(category_repository=category_repository)

    @provide
    def get_portfolio_service(
        self, portfolio_repository: PortfolioRepository
    ) -> PortfolioService:
        """Provide portfolio domain service."""
        return PortfolioService(portfolio_repository=portfolio_repository)

    @provide
    def get_tag_count_service(
        self, journal_repository: JournalRepository, tag_repository: TagRepository
    ) -> TagCountService:
        """Provide tag journal count maintenance."""
        return TagCountService(
            journal_repository=journal_repository, tag_repository=tag_repository
        )

    @provide
    def get_tag_deletion_service(
        self, journal_repository: JournalRepository, settings: Settings
    ) -> TagDeletionService:
        """Provide tag deletion cascade, bounded by the configured page size."""
        return TagDeletionService(
            journal_repository=journal_repository,
            page_size=settings.tags.cascade_page_size,
        )
