"""Unit tests for field validators."""

import pytest

from folio.util.validation import (
    validate_audio_url,
    validate_email,
    validate_hex_color,
    validate_required_string,
    validate_rich_text_content,
    validate_slug,
    validate_tag_name,
    validate_url,
)

SLUG_FORMAT_ERROR = (
    "Slug must contain only lowercase letters, numbers, and hyphens. "
    "Cannot start or end with a hyphen"
)


class TestValidateUrl:
    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "http://localhost:3000/path?q=1", "https://a.b/c.mp3"],
    )
    def test_accepts_http_urls(self, url):
        assert validate_url(url).is_valid

    @pytest.mark.parametrize(
        "url", ["ftp://example.com", "example.com", "/relative/path", "https://"]
    )
    def test_rejects_non_http_or_relative(self, url):
        result = validate_url(url)

        assert not result.is_valid
        assert result.error == "Invalid URL format. Must be a valid HTTP or HTTPS URL"

    @pytest.mark.parametrize("url", ["", None, 42])
    def test_rejects_missing_with_required_error(self, url):
        assert validate_url(url).error == "URL is required and must be a string"


class TestValidateAudioUrl:
    def test_empty_is_valid(self):
        assert validate_audio_url("").is_valid

    @pytest.mark.parametrize("ext", ["mp3", "wav", "ogg", "m4a", "aac", "flac"])
    def test_accepts_supported_extensions(self, ext):
        assert validate_audio_url(f"https://cdn.example.com/track.{ext}").is_valid

    def test_rejects_unsupported_extension(self):
        result = validate_audio_url("https://cdn.example.com/track.txt")

        assert not result.is_valid
        assert "valid audio file" in result.error

    def test_rejects_invalid_url_first(self):
        result = validate_audio_url("not a url.mp3")

        assert result.error == "Invalid URL format. Must be a valid HTTP or HTTPS URL"


class TestValidateSlug:
    @pytest.mark.parametrize("slug", ["a", "hello-world", "post-2", "123"])
    def test_accepts_valid_slugs(self, slug):
        assert validate_slug(slug).is_valid

    @pytest.mark.parametrize(
        "slug",
        ["Hello", "hello world", "-hello", "hello-", "hello--world", " hello"],
    )
    def test_rejects_malformed_slugs(self, slug):
        result = validate_slug(slug)

        assert not result.is_valid
        assert result.error == SLUG_FORMAT_ERROR

    def test_rejects_missing(self):
        assert validate_slug("").error == "Slug is required and must be a string"


class TestValidateHexColor:
    @pytest.mark.parametrize("color", ["", "#fff", "#D9FE62"])
    def test_accepts_valid_or_empty(self, color):
        assert validate_hex_color(color).is_valid

    @pytest.mark.parametrize("color", ["fff", "#ffff", "#gggggg", "red"])
    def test_rejects_invalid(self, color):
        assert not validate_hex_color(color).is_valid


class TestValidateEmail:
    def test_accepts_plain_address(self):
        assert validate_email("hello@example.com").is_valid

    @pytest.mark.parametrize("email", ["a@@b.com", "@b.com", "a@", "a b@c.com"])
    def test_rejects_malformed(self, email):
        assert validate_email(email).error == "Invalid email format"


class TestValidateRequiredString:
    def test_interpolates_field_name(self):
        assert validate_required_string(None, "Title").error == (
            "Title is required and must be a string"
        )
        assert validate_required_string("   ", "Title").error == "Title cannot be empty"

    def test_enforces_max_length(self):
        result = validate_required_string("abcdef", "Name", max_length=5)

        assert result.error == "Name must be 5 characters or less"


class TestValidateRichTextContent:
    def test_requires_root(self):
        assert validate_rich_text_content({"root": {"children": []}}).is_valid
        assert not validate_rich_text_content({"nodes": []}).is_valid
        assert validate_rich_text_content(None).error == "Content is required"


class TestValidateTagName:
    """Failures are reported in precedence order."""

    @pytest.mark.parametrize(
        ("value", "error"),
        [
            (None, "Tag name is required"),
            ("", "Tag name is required"),
            ([], "Tag name is required"),
            (0, "Tag name is required"),
            (False, "Tag name is required"),
            (12, "Tag name must be a string"),
            ("   ", "Tag name cannot be empty"),
            ("x" * 31, "Tag name must be 30 characters or less"),
            (
                "C++",
                "Tag name can only contain letters, numbers, spaces, hyphens, and underscores",
            ),
        ],
    )
    def test_reports_each_failure_kind(self, value, error):
        result = validate_tag_name(value)

        assert not result.is_valid
        assert result.error == error

    def test_length_checked_before_charset(self):
        assert validate_tag_name("!" * 40).error == "Tag name must be 30 characters or less"

    @pytest.mark.parametrize("value", ["React", "machine_learning", "UI UX", "  padded  "])
    def test_accepts_valid_names(self, value):
        assert validate_tag_name(value).is_valid
