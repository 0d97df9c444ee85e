"""Application layer DI providers."""

from dishka import Scope, provide

from folio.application.usecase.cache import (
    ClearCacheMetricsUseCase,
    GetCacheMetricsUseCase,
    GetWarmingStatusUseCase,
    WarmCacheUseCase,
)
from folio.application.usecase.category import (
    CreateCategoryUseCase,
    ListCategoriesUseCase,
)
from folio.application.usecase.journal import (
    CreateJournalUseCase,
    DeleteJournalUseCase,
    GetJournalUseCase,
    ListJournalsUseCase,
    UpdateJournalUseCase,
)
from folio.application.usecase.portfolio import (
    BackfillPortfolioFieldsUseCase,
    CreatePortfolioUseCase,
    ListPortfoliosUseCase,
)
from folio.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    ListTagsUseCase,
    UpdateTagUseCase,
)
from folio.domain.service import (
    CategoryService,
    JournalService,
    PortfolioService,
    TagCountService,
    TagDeletionService,
    TagService,
)
from folio.util.cache import CacheInvalidator, CacheMetrics, CacheWarmer
from folio.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Journal use cases
    @provide(scope=Scope.REQUEST)
    def get_create_journal_use_case(
        self,
        journal_service: JournalService,
        tag_service: TagService,
        category_service: CategoryService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> CreateJournalUseCase:
        """Provide create journal use case."""
        return CreateJournalUseCase(
            journal_service=journal_service,
            tag_service=tag_service,
            category_service=category_service,
            tag_count_service=tag_count_service,
            cache_invalidator=cache_invalidator,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_journal_use_case(
        self,
        journal_service: JournalService,
        tag_service: TagService,
        category_service: CategoryService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> UpdateJournalUseCase:
        """Provide update journal use case."""
        return UpdateJournalUseCase(
            journal_service=journal_service,
            tag_service=tag_service,
            category_service=category_service,
            tag_count_service=tag_count_service,
            cache_invalidator=cache_invalidator,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_journal_use_case(
        self,
        journal_service: JournalService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> DeleteJournalUseCase:
        """Provide delete journal use case."""
        return DeleteJournalUseCase(
            journal_service=journal_service,
            tag_count_service=tag_count_service,
            cache_invalidator=cache_invalidator,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_journal_use_case(
        self,
        journal_service: JournalService,
        tag_service: TagService,
        category_service: CategoryService,
    ) -> GetJournalUseCase:
        """Provide get journal use case."""
        return GetJournalUseCase(
            journal_service=journal_service,
            tag_service=tag_service,
            category_service=category_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_journals_use_case(
        self,
        journal_service: JournalService,
        tag_service: TagService,
        category_service: CategoryService,
    ) -> ListJournalsUseCase:
        """Provide list journals use case."""
        return ListJournalsUseCase(
            journal_service=journal_service,
            tag_service=tag_service,
            category_service=category_service,
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_create_tag_use_case(
        self,
        tag_service: TagService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(
            tag_service=tag_service,
            tag_count_service=tag_count_service,
            cache_invalidator=cache_invalidator,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_tag_use_case(
        self,
        tag_service: TagService,
        tag_count_service: TagCountService,
        cache_invalidator: CacheInvalidator,
    ) -> UpdateTagUseCase:
        """Provide update tag use case."""
        return UpdateTagUseCase(
            tag_service=tag_service,
            tag_count_service=tag_count_service,
            cache_invalidator=cache_invalidator,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_tag_use_case(
        self,
        tag_service: TagService,
        tag_deletion_service: TagDeletionService,
        cache_invalidator: CacheInvalidator,
    ) -> DeleteTagUseCase:
        """Provide delete tag use case."""
        return DeleteTagUseCase(
            tag_service=tag_service,
            tag_deletion_service=tag_deletion_service,
            cache_invalidator=cache_invalidator,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(
        self, tag_service: TagService, journal_service: JournalService
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service, journal_service=journal_service)

    # Category use cases
    @provide(scope=Scope.REQUEST)
    def get_create_category_use_case(
        self, category_service: CategoryService, cache_invalidator: CacheInvalidator
    ) -> CreateCategoryUseCase:
        """Provide create category use case."""
        return CreateCategoryUseCase(
            category_service=category_service, cache_invalidator=cache_invalidator
        )

    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, category_service: CategoryService, journal_service: JournalService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(
            category_service=category_service, journal_service=journal_service
        )

    # Portfolio use cases
    @provide(scope=Scope.REQUEST)
    def get_create_portfolio_use_case(
        self, portfolio_service: PortfolioService
    ) -> CreatePortfolioUseCase:
        """Provide create portfolio use case."""
        return CreatePortfolioUseCase(portfolio_service=portfolio_service)

    @provide(scope=Scope.REQUEST)
    def get_list_portfolios_use_case(
        self, portfolio_service: PortfolioService
    ) -> ListPortfoliosUseCase:
        """Provide list portfolios use case."""
        return ListPortfoliosUseCase(portfolio_service=portfolio_service)

    @provide(scope=Scope.REQUEST)
    def get_backfill_portfolio_fields_use_case(
        self, portfolio_service: PortfolioService
    ) -> BackfillPortfolioFieldsUseCase:
        """Provide portfolio field backfill use case."""
        return BackfillPortfolioFieldsUseCase(portfolio_service=portfolio_service)

    # Cache administration use cases
    @provide(scope=Scope.REQUEST)
    def get_get_cache_metrics_use_case(
        self, cache_metrics: CacheMetrics
    ) -> GetCacheMetricsUseCase:
        """Provide cache metrics report use case."""
        return GetCacheMetricsUseCase(cache_metrics=cache_metrics)

    @provide(scope=Scope.REQUEST)
    def get_clear_cache_metrics_use_case(
        self, cache_metrics: CacheMetrics
    ) -> ClearCacheMetricsUseCase:
        """Provide cache metrics cleanup use case."""
        return ClearCacheMetricsUseCase(cache_metrics=cache_metrics)

    @provide(scope=Scope.REQUEST)
    def get_warm_cache_use_case(self, cache_warmer: CacheWarmer) -> WarmCacheUseCase:
        """Provide cache warming use case."""
        return WarmCacheUseCase(cache_warmer=cache_warmer)

    @provide(scope=Scope.REQUEST)
    def get_warming_status_use_case(
        self, cache_warmer: CacheWarmer
    ) -> GetWarmingStatusUseCase:
        """Provide cache warming status use case."""
        return GetWarmingStatusUseCase(cache_warmer=cache_warmer)
