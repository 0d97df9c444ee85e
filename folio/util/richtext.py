"""Helpers for Lexical-style rich text documents.

A document is a mapping with a ``root`` node; every node may carry ``text``
or a list of ``children``.
"""

from typing import Any

EXCERPT_MAX_LENGTH = 300


def extract_plain_text(content: Any) -> str:
    """Concatenate the text nodes of a rich text document, space separated."""
    if not isinstance(content, dict):
        return ""
    root = content.get("root")
    if not isinstance(root, dict) or not root.get("children"):
        return ""

    parts: list[str] = []

    def _walk(node: Any) -> None:
        if not isinstance(node, dict):
            return
        if node.get("text"):
            parts.append(str(node["text"]))
        elif node.get("children"):
            for child in node["children"]:
                _walk(child)

    for child in root["children"]:
        _walk(child)

    return " ".join(parts).strip()


def make_excerpt(text: str, max_length: int = EXCERPT_MAX_LENGTH) -> str:
    """Truncate text to fit ``max_length`` characters, marking the cut with an ellipsis."""
    text = text.strip()
    keep = max_length - 3
    if len(text) <= keep:
        return text
    return text[:keep] + "..."
