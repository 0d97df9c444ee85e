"""Create category use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from folio.application.usecase.base import ResponseModel
from folio.application.usecase.items import CategoryItem
from folio.domain.model import Category
from folio.domain.model.common import utcnow
from folio.domain.service import CategoryService
from folio.domain.service.content import build_model
from folio.domain.value import CategoryId
from folio.util.cache import CacheInvalidator


class CreateCategoryRequest(BaseModel):
    """Create category request."""

    name: str
    description: str | None = None
    color: str | None = None


class CreateCategoryResponse(ResponseModel):
    """Create category response."""

    category: CategoryItem


class CreateCategoryUseCase:
    """Use case for creating a category."""

    def __init__(
        self,
        category_service: CategoryService,
        cache_invalidator: CacheInvalidator,
    ) -> None:
        self.category_service = category_service
        self.cache_invalidator = cache_invalidator

    async def execute(self, request: CreateCategoryRequest) -> CreateCategoryResponse:
        """Execute create category flow.

        Raises:
            ValidationError: If a field is invalid
            BusinessRuleViolationError: If the name is already taken
        """
        name = request.name.strip()

        with logfire.span("create_category.execute", category_name=name):
            await self.category_service.ensure_name_available(name)

            now = utcnow()
            category = build_model(
                Category,
                {
                    "id": CategoryId(uuid4()),
                    "name": name,
                    "slug": await self.category_service.generate_unique_slug(name),
                    "description": (request.description or "").strip() or None,
                    "color": request.color or None,
                    "created_at": now,
                    "updated_at": now,
                },
            )

            saved = await self.category_service.save_category(category)
            self.cache_invalidator.invalidate_category(str(saved.id))

            # Nothing can reference a new category yet
            return CreateCategoryResponse(
                category=CategoryItem.from_category(saved, journal_count=0)
            )
