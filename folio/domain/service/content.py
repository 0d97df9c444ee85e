"""Rules shared by publishable content (journals and portfolios)."""

from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any, TypeVar

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from folio.domain.error import ValidationError
from folio.domain.value import SEO, PublicationStatus, Slug
from folio.util.slug import MAX_SLUG_LENGTH, generate_slug
from folio.util.validation import validate_required_string

SEO_TITLE_MAX_LENGTH = 60
SEO_DESCRIPTION_MAX_LENGTH = 160


def resolve_published_at(
    status: PublicationStatus,
    requested: datetime | None,
    previous_status: PublicationStatus | None,
    now: datetime,
) -> datetime | None:
    """Compute the publication date for a write.

    Publishing stamps ``now`` when no date is given or when the previous
    version was a draft. Drafts never carry a date.

    Args:
        status: Status being written
        requested: Publication date supplied by the caller (or carried over)
        previous_status: Status before the write, None on create
        now: Current time

    Returns:
        Publication date to store
    """
    if status == PublicationStatus.DRAFT:
        return None
    if requested is None or previous_status == PublicationStatus.DRAFT:
        return now
    return requested


def populate_seo(seo: SEO | None, title: str, excerpt: str | None) -> SEO:
    """Fill missing SEO fields from the title and excerpt."""
    seo = seo or SEO()
    return SEO(
        title=seo.title or title[:SEO_TITLE_MAX_LENGTH] or None,
        description=seo.description
        or (excerpt[:SEO_DESCRIPTION_MAX_LENGTH] if excerpt else None),
    )


def require_title(title: Any, max_length: int) -> str:
    """Return the trimmed title, or raise if it is missing, blank or too long."""
    result = validate_required_string(title, "Title", max_length)
    if not result.is_valid:
        raise ValidationError(result.error or "Invalid title", field="title")
    return title.strip()


async def allocate_slug(
    name: str,
    slug_exists: Callable[[Slug], Awaitable[bool]],
    field: str = "title",
) -> Slug:
    """Derive a slug from a display name, adding a numeric suffix on collision.

    Args:
        name: Display name to slugify
        slug_exists: Returns True when a candidate is already taken
        field: Field reported when the name yields no slug

    Returns:
        Unused slug

    Raises:
        ValidationError: If the name has no letters or digits
    """
    base = generate_slug(name)
    if not base:
        raise ValidationError(
            f"{field.capitalize()} must contain at least one letter or number",
            field=field,
        )

    candidate = base
    counter = 1
    while await slug_exists(Slug(candidate)):
        suffix = f"-{counter}"
        candidate = base[: MAX_SLUG_LENGTH - len(suffix)].rstrip("-") + suffix
        counter += 1

    if counter > 1:
        logfire.debug("Slug collision resolved", base_slug=base, slug=candidate)
    return Slug(candidate)


M = TypeVar("M", bound=BaseModel)


def build_model(model: type[M], data: dict[str, Any]) -> M:
    """Construct a domain model, reporting the first failure as a ValidationError."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        message = error["msg"].removeprefix("Value error, ")
        raise ValidationError(
            f"{field}: {message}" if field else message, field=field
        ) from e
