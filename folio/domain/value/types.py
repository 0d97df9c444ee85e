"""Domain value objects for Folio.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and delegate format checks to the shared
field validators so the API and the domain report identical messages.
"""

from enum import Enum

from pydantic import field_validator

from folio.domain.value.common import RootValueObject, ValueObject
from folio.util.validation import (
    validate_audio_url,
    validate_hex_color,
    validate_slug,
    validate_tag_name,
)


class PublicationStatus(str, Enum):
    """Publication status shared by journals and portfolios."""

    DRAFT = "draft"
    PUBLISHED = "published"


class PortfolioCategory(str, Enum):
    """Kinds of work a portfolio project can showcase."""

    BRANDING = "branding"
    UI_UX = "ui-ux"
    WEB_DESIGN = "web-design"
    WEB_DEVELOPMENT = "web-development"
    APP_DEVELOPMENT = "app-development"
    BACKEND_DEVELOPMENT = "backend-development"


class TagName(RootValueObject[str]):
    """Tag display name.

    Up to 30 characters of letters, digits, spaces, hyphens and underscores.
    Surrounding whitespace is trimmed.
    Examples: 'Design', 'Side Projects', 'web_dev'
    """

    @field_validator("root", mode="before")
    @classmethod
    def validate_tag_name(cls, v: object) -> str:
        """Validate tag name format."""
        result = validate_tag_name(v)
        if not result.is_valid:
            raise ValueError(result.error)
        return v.strip()  # type: ignore[union-attr]


class Slug(RootValueObject[str]):
    """URL-safe slug.

    Lowercase alphanumerics separated by single hyphens, 1-100 characters.
    Examples: 'designing-for-sound', 'tag-2'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        result = validate_slug(v)
        if not result.is_valid:
            raise ValueError(result.error)
        return v


class HexColor(RootValueObject[str]):
    """CSS hex color, ``#RGB`` or ``#RRGGBB``."""

    @field_validator("root")
    @classmethod
    def validate_color(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Color cannot be empty")
        result = validate_hex_color(v)
        if not result.is_valid:
            raise ValueError(result.error)
        return v


class AudioUrl(RootValueObject[str]):
    """HTTP(S) URL pointing at an audio file."""

    @field_validator("root")
    @classmethod
    def validate_audio(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Audio URL cannot be empty")
        result = validate_audio_url(v)
        if not result.is_valid:
            raise ValueError(result.error)
        return v


class SEO(ValueObject):
    """Search engine metadata attached to published content."""

    title: str | None = None
    description: str | None = None


class SortOrder(str, Enum):
    """Direction of a list ordering."""

    ASC = "asc"
    DESC = "desc"


class JournalSortField(str, Enum):
    """Fields journals can be ordered by."""

    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    PUBLISHED_AT = "published_at"
    TITLE = "title"


class TaxonomySortField(str, Enum):
    """Fields tags and categories can be ordered by."""

    NAME = "name"
    JOURNAL_COUNT = "journal_count"
    CREATED_AT = "created_at"
