"""Shared schemas for richtext."""

from richtext.schemas.nodes import (
    FORMAT_BOLD,
    FORMAT_ITALIC,
    BlockNode,
    DocumentTree,
    HeadingNode,
    InlineNode,
    LineBreakNode,
    LinkNode,
    ListItemNode,
    ListNode,
    ParagraphNode,
    QuoteNode,
    TableNode,
    TextNode,
    UploadNode,
)
from richtext.schemas.uploads import UploadSpec

__all__ = [
    "FORMAT_BOLD",
    "FORMAT_ITALIC",
    "BlockNode",
    "DocumentTree",
    "HeadingNode",
    "InlineNode",
    "LineBreakNode",
    "LinkNode",
    "ListItemNode",
    "ListNode",
    "ParagraphNode",
    "QuoteNode",
    "TableNode",
    "TextNode",
    "UploadNode",
    "UploadSpec",
]
