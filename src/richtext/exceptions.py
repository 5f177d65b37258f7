"""Custom exceptions for richtext."""

from __future__ import annotations


class RichTextError(Exception):
    """Base exception for richtext operations."""


class DocumentLoadError(RichTextError):
    """Stored document payload could not be read as a document tree."""


class DisallowedMarkupError(RichTextError):
    """Fragment contains tags outside the supported vocabulary."""

    def __init__(self, tags: list[str]) -> None:
        self.tags = tags
        super().__init__(f"Disallowed tags in fragment: {', '.join(tags)}")
