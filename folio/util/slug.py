"""Slug generation utilities.

Slugs are URL-safe identifiers derived from display names (journal titles,
tag and category names, portfolio titles).
"""

import re

MAX_SLUG_LENGTH = 100

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_SEPARATORS = re.compile(r"[\s-]+")


def generate_slug(name: str) -> str:
    """Generate a URL-friendly slug from a display name.

    - Converts to lowercase
    - Strips characters outside ``[a-z0-9\\s-]``
    - Collapses runs of whitespace and hyphens into a single hyphen
    - Strips leading/trailing hyphens
    - Truncates to 100 characters

    Args:
        name: Display name to slugify

    Returns:
        Slug string, empty if the name has no usable characters
    """
    if not name or not isinstance(name, str):
        return ""

    slug = _DISALLOWED.sub("", name.lower())
    slug = _SEPARATORS.sub("-", slug).strip("-")
    # Truncation may leave a trailing hyphen behind
    return slug[:MAX_SLUG_LENGTH].rstrip("-")


def ensure_unique_slug(base_slug: str, existing_slugs: set[str] | list[str]) -> str:
    """Append a numeric suffix until the slug is not taken.

    Args:
        base_slug: Desired slug
        existing_slugs: Slugs already in use

    Returns:
        ``base_slug`` or ``base_slug-N`` for the smallest free N
    """
    taken = set(existing_slugs)
    if base_slug not in taken:
        return base_slug

    counter = 1
    while f"{base_slug}-{counter}" in taken:
        counter += 1
    return f"{base_slug}-{counter}"


def create_slug_from_title(title: str, fallback: str = "untitled") -> str:
    """Create a slug from a title, falling back when the title has no usable characters."""
    return generate_slug(title) or generate_slug(fallback)
