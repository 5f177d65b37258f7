"""Shared HTML utilities for fragment parsing."""

from __future__ import annotations

import re

from richtext.config import RICHTEXT_HTML_PARSER

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_UNWANTED_TAGS = ["script", "style", "noscript", "template"]


def parse_fragment(html: str, *, strip_unwanted: bool = True) -> BeautifulSoup:
    """Parse an HTML fragment leniently, dropping script-like elements by default."""
    soup = BeautifulSoup(html or "", RICHTEXT_HTML_PARSER)
    if strip_unwanted:
        for tag in soup.find_all(_UNWANTED_TAGS):
            tag.decompose()
    return soup


def find_fragment_root(soup: BeautifulSoup) -> Tag:
    """Find the element whose children make up the fragment.

    Searches for the root in the following order:
    1. <body> element (a full document was supplied)
    2. The soup itself as fallback
    """
    if soup.body:
        return soup.body
    return soup


_TABLE_TAG_RE = re.compile(r"<(/?)table\b[^>]*>", re.IGNORECASE)


def source_markup(tag: Tag, html: str) -> str | None:
    """Slice a table's own markup out of the source it was parsed from.

    Uses the position the parser recorded for the start tag and scans for the
    matching ``</table>``, counting nested tables. Returns None when the
    parser kept no position or the span cannot be located.
    """
    if tag.sourceline is None or tag.sourcepos is None:
        return None

    start = _line_offset(html, tag.sourceline)
    if start is None:
        return None
    start += tag.sourcepos

    depth = 0
    for match in _TABLE_TAG_RE.finditer(html, start):
        if depth == 0 and match.start() != start:
            return None
        depth += -1 if match.group(1) else 1
        if depth == 0:
            return html[start : match.end()]
    return None


def _line_offset(html: str, line: int) -> int | None:
    # Parser line numbers are 1-based and count "\n" only
    offset = 0
    for _ in range(line - 1):
        offset = html.find("\n", offset)
        if offset == -1:
            return None
        offset += 1
    return offset
