"""Unit tests for rich text helpers."""

import pytest

from folio.util.richtext import extract_plain_text, make_excerpt
from tests.conftest import rich_text


class TestExtractPlainText:
    def test_joins_paragraphs(self):
        assert extract_plain_text(rich_text("Hello", "world")) == "Hello world"

    def test_walks_nested_children(self):
        content = {
            "root": {
                "children": [
                    {
                        "type": "list",
                        "children": [
                            {"children": [{"text": "one"}]},
                            {"children": [{"text": "two"}, {"type": "linebreak"}]},
                        ],
                    },
                    {"type": "paragraph", "children": [{"text": "three"}]},
                ]
            }
        }

        assert extract_plain_text(content) == "one two three"

    @pytest.mark.parametrize(
        "content", [None, "text", {}, {"root": None}, {"root": {"children": []}}]
    )
    def test_empty_or_malformed(self, content):
        assert extract_plain_text(content) == ""


class TestMakeExcerpt:
    def test_short_text_unchanged(self):
        assert make_excerpt("  short  ") == "short"

    def test_long_text_truncated_with_ellipsis(self):
        excerpt = make_excerpt("a" * 400)

        assert len(excerpt) == 300
        assert excerpt.endswith("...")

    def test_custom_length(self):
        assert make_excerpt("abcdefghij", max_length=8) == "abcde..."
