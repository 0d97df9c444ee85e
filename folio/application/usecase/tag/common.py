"""Helpers shared by the tag use cases."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from folio.domain.error import ValidationError
from folio.domain.value import TagName


def parse_tag_name(value: Any) -> TagName:
    """Validate a submitted tag name.

    Raises:
        ValidationError: With the tag name validator's message
    """
    try:
        return TagName(value)
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise ValidationError(message, field="name") from e
