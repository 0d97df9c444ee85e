"""Base use case and shared DTO configuration."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from folio.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ResponseModel(BaseModel):
    """Base for use case responses.

    Fields are snake_case in Python and camelCase when dumped with
    ``by_alias=True``, which is how the API serializes them.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_id(value: str, field: str) -> UUID:
    """Parse an identifier from a request.

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(str(value))
    except ValueError as e:
        raise ValidationError(f"Invalid {field}: {value}", field=field) from e
