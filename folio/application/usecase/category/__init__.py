"""Category use cases."""

from .create_category import (
    CreateCategoryRequest,
    CreateCategoryResponse,
    CreateCategoryUseCase,
)
from .list_categories import (
    ListCategoriesRequest,
    ListCategoriesResponse,
    ListCategoriesUseCase,
)

__all__ = [
    "CreateCategoryRequest",
    "CreateCategoryResponse",
    "CreateCategoryUseCase",
    "ListCategoriesRequest",
    "ListCategoriesResponse",
    "ListCategoriesUseCase",
]
