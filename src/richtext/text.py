"""Plain-text helpers over document tree nodes."""

from __future__ import annotations

import re
from typing import Iterable

from richtext.schemas import DocumentTree, HeadingNode, TextNode


def extract_text(nodes: Iterable[object]) -> str:
    """Concatenate the text of every text node, depth first.

    No escaping or un-escaping is applied.
    """
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, TextNode):
            parts.append(node.text)
        children = getattr(node, "children", None)
        if children:
            parts.append(extract_text(children))
    return "".join(parts)


def normalize_text(text: str) -> str:
    """Collapse whitespace runs and trim."""
    return re.sub(r"\s+", " ", text).strip()


def slugify(text: str) -> str:
    """Turn heading text into an anchor id.

    Renderers use this for heading ids, so links to a section keep working
    after the document is stored and re-rendered.
    """
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return slug.strip("-")


def heading_anchors(tree: DocumentTree) -> list[tuple[HeadingNode, str]]:
    """Pair each top-level heading with the anchor id derived from its text.

    Entry point for callers building a table of contents or heading ids.
    """
    return [
        (node, slugify(extract_text(node.children)))
        for node in tree.children
        if isinstance(node, HeadingNode)
    ]
