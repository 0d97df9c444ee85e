"""Unit tests for slug generation."""

import pytest

from folio.util.slug import (
    MAX_SLUG_LENGTH,
    create_slug_from_title,
    ensure_unique_slug,
    generate_slug,
)
from folio.util.validation import validate_slug


class TestGenerateSlug:
    """Tests for generate_slug."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Hello World", "hello-world"),
            ("  Design   Systems  ", "design-systems"),
            ("Next.js 15: What's New?", "nextjs-15-whats-new"),
            ("already-a-slug", "already-a-slug"),
            ("multiple---hyphens", "multiple-hyphens"),
            ("-edge-hyphens-", "edge-hyphens"),
            ("Tabs\tand\nnewlines", "tabs-and-newlines"),
        ],
    )
    def test_generates_expected_slug(self, name, expected):
        assert generate_slug(name) == expected

    @pytest.mark.parametrize("name", ["", "!!!", "   ", "---", "日本語"])
    def test_unusable_input_yields_empty_string(self, name):
        assert generate_slug(name) == ""

    def test_is_deterministic(self):
        assert generate_slug("Life & Growth") == generate_slug("Life & Growth")

    def test_output_passes_slug_validation(self):
        for name in ["Hello World", "A -- b", "Café au lait", "UI UX 2024"]:
            slug = generate_slug(name)
            assert validate_slug(slug).is_valid, slug

    def test_truncates_without_trailing_hyphen(self):
        slug = generate_slug("a" * 99 + " bcd")

        assert len(slug) <= MAX_SLUG_LENGTH
        assert not slug.endswith("-")


class TestEnsureUniqueSlug:
    """Tests for ensure_unique_slug."""

    def test_returns_base_when_free(self):
        assert ensure_unique_slug("post", {"other"}) == "post"

    def test_appends_smallest_free_suffix(self):
        assert ensure_unique_slug("post", {"post", "post-1", "post-3"}) == "post-2"


class TestCreateSlugFromTitle:
    """Tests for create_slug_from_title."""

    def test_uses_fallback_for_unusable_title(self):
        assert create_slug_from_title("???") == "untitled"

    def test_uses_title_when_usable(self):
        assert create_slug_from_title("My Trip") == "my-trip"
