"""Field validation utilities.

Every validator returns a :class:`FieldValidationResult` and never raises, so
callers can decide whether a failure becomes a domain error, an API error or a
form message.
"""

import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

SUPPORTED_AUDIO_EXTENSIONS = ("mp3", "wav", "ogg", "m4a", "aac", "flac")

TAG_NAME_MAX_LENGTH = 30
SLUG_MAX_LENGTH = 100

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
HEX_COLOR_PATTERN = re.compile(r"^#(?:[A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
TAG_NAME_PATTERN = re.compile(r"^[A-Za-z0-9 _-]+$")
_HOST_PATTERN = re.compile(r"^[-\w.]+(?::[0-9]+)?$")


@dataclass(frozen=True)
class FieldValidationResult:
    """Outcome of validating a single field."""

    is_valid: bool
    error: str | None = None


VALID = FieldValidationResult(is_valid=True)


def _invalid(message: str) -> FieldValidationResult:
    return FieldValidationResult(is_valid=False, error=message)


def validate_url(url: Any) -> FieldValidationResult:
    """Validate an absolute HTTP or HTTPS URL."""
    if not url or not isinstance(url, str):
        return _invalid("URL is required and must be a string")

    candidate = url.strip()
    if any(ch.isspace() for ch in candidate):
        return _invalid("Invalid URL format. Must be a valid HTTP or HTTPS URL")

    parsed = urlparse(candidate)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return _invalid("Invalid URL format. Must be a valid HTTP or HTTPS URL")
    if not _HOST_PATTERN.match(parsed.netloc):
        return _invalid("Invalid URL format. Must be a valid HTTP or HTTPS URL")

    return VALID


def validate_audio_url(url: Any) -> FieldValidationResult:
    """Validate an optional audio file URL (mp3, wav, ogg, m4a, aac, flac)."""
    if not url:
        return VALID  # Audio URL is optional

    if not isinstance(url, str):
        return _invalid("Audio URL must be a string")

    candidate = url.strip()
    url_result = validate_url(candidate)
    if not url_result.is_valid:
        return url_result

    path = urlparse(candidate).path.lower()
    extension = path.rsplit(".", 1)[-1] if "." in path else ""
    if extension not in SUPPORTED_AUDIO_EXTENSIONS:
        return _invalid(
            "URL must point to a valid audio file (mp3, wav, ogg, m4a, aac, flac)"
        )

    return VALID


def validate_slug(slug: Any) -> FieldValidationResult:
    """Validate a slug: lowercase alphanumerics separated by single hyphens."""
    if not slug or not isinstance(slug, str):
        return _invalid("Slug is required and must be a string")

    candidate = slug.strip()
    if not candidate:
        return _invalid("Slug cannot be empty")

    if len(candidate) > SLUG_MAX_LENGTH:
        return _invalid(f"Slug must be {SLUG_MAX_LENGTH} characters or less")

    # Match against the raw value so surrounding whitespace is rejected too
    if not SLUG_PATTERN.match(slug):
        return _invalid(
            "Slug must contain only lowercase letters, numbers, and hyphens. "
            "Cannot start or end with a hyphen"
        )

    return VALID


def validate_hex_color(color: Any) -> FieldValidationResult:
    """Validate an optional ``#RGB`` or ``#RRGGBB`` color."""
    if not color:
        return VALID  # Color is optional

    if not isinstance(color, str):
        return _invalid("Color must be a string")

    if not HEX_COLOR_PATTERN.match(color.strip()):
        return _invalid("Color must be a valid hex color (e.g., #FF0000 or #F00)")

    return VALID


def validate_email(email: Any) -> FieldValidationResult:
    """Validate an email address with a single ``@`` and a dotted domain."""
    if not email or not isinstance(email, str):
        return _invalid("Email is required and must be a string")

    if not EMAIL_PATTERN.match(email.strip()):
        return _invalid("Invalid email format")

    return VALID


def validate_required_string(
    value: Any, field_name: str, max_length: int | None = None
) -> FieldValidationResult:
    """Validate a required, non-blank string field.

    Args:
        value: Value to check
        field_name: Human readable field name used in error messages
        max_length: Optional maximum length of the trimmed value
    """
    if not value or not isinstance(value, str):
        return _invalid(f"{field_name} is required and must be a string")

    trimmed = value.strip()
    if not trimmed:
        return _invalid(f"{field_name} cannot be empty")

    if max_length is not None and len(trimmed) > max_length:
        return _invalid(f"{field_name} must be {max_length} characters or less")

    return VALID


def validate_rich_text_content(content: Any) -> FieldValidationResult:
    """Validate that content looks like a rich text document with a root node."""
    if not content:
        return _invalid("Content is required")

    if not isinstance(content, dict) or not content.get("root"):
        return _invalid("Content must be valid rich text format")

    return VALID


def validate_tag_name(value: Any) -> FieldValidationResult:
    """Validate a tag name.

    Failures are reported in this order: missing, not a string, blank,
    too long, disallowed characters.
    """
    if not value:
        return _invalid("Tag name is required")

    if not isinstance(value, str):
        return _invalid("Tag name must be a string")

    trimmed = value.strip()
    if not trimmed:
        return _invalid("Tag name cannot be empty")

    if len(trimmed) > TAG_NAME_MAX_LENGTH:
        return _invalid(f"Tag name must be {TAG_NAME_MAX_LENGTH} characters or less")

    if not TAG_NAME_PATTERN.match(trimmed):
        return _invalid(
            "Tag name can only contain letters, numbers, spaces, hyphens, and underscores"
        )

    return VALID
