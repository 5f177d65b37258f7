"""Strict markup checks, kept separate from the lenient converters."""

from __future__ import annotations

from richtext.exceptions import DisallowedMarkupError
from richtext.html_utils import parse_fragment

SUPPORTED_BLOCK_TAGS = frozenset(
    {"h1", "h2", "h3", "h4", "h5", "h6", "p", "ul", "ol", "li", "blockquote", "table"}
)
SUPPORTED_INLINE_TAGS = frozenset({"strong", "b", "em", "i", "a", "br"})
TABLE_INTERNAL_TAGS = frozenset(
    {"thead", "tbody", "tfoot", "tr", "th", "td", "caption", "colgroup", "col"}
)
ALLOWED_TAGS = SUPPORTED_BLOCK_TAGS | SUPPORTED_INLINE_TAGS | TABLE_INTERNAL_TAGS | {"img"}

# Document scaffolding a lenient parser may hand back around a fragment
_DOCUMENT_TAGS = frozenset({"html", "head", "body"})


def find_disallowed_tags(html: str) -> list[str]:
    """Return the sorted, unique tag names outside the supported vocabulary."""
    soup = parse_fragment(html, strip_unwanted=False)
    names = {tag.name.lower() for tag in soup.find_all(True)}
    return sorted(names - ALLOWED_TAGS - _DOCUMENT_TAGS)


def validate_fragment(html: str) -> None:
    """Raise DisallowedMarkupError if the fragment uses unsupported tags."""
    disallowed = find_disallowed_tags(html)
    if disallowed:
        raise DisallowedMarkupError(disallowed)
