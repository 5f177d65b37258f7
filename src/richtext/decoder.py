"""Render document trees back to minimal HTML."""

from __future__ import annotations

from typing import Iterable

from richtext.config import RICHTEXT_BLOCK_SEPARATOR
from richtext.schemas import (
    DocumentTree,
    HeadingNode,
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


def decode(tree: DocumentTree, *, separator: str | None = None) -> str:
    """Convert a document tree into an HTML fragment.

    Top-level blocks are joined with ``separator`` (``RICHTEXT_BLOCK_SEPARATOR``
    when omitted). Never raises: unknown nodes fall back to their children and
    payloads that cannot be rendered produce no markup.
    """
    joiner = RICHTEXT_BLOCK_SEPARATOR if separator is None else separator
    children = getattr(tree, "children", None) or ()
    return joiner.join(render_block(node) for node in children)


def escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def render_block(node: object) -> str:
    if isinstance(node, HeadingNode):
        return f"<{node.tag}>{render_inline_nodes(node.children)}</{node.tag}>"

    if isinstance(node, ParagraphNode):
        return f"<p>{render_inline_nodes(node.children)}</p>"

    if isinstance(node, ListNode):
        items = "".join(render_block(child) for child in node.children)
        return f"<{node.tag}>{items}</{node.tag}>"

    if isinstance(node, ListItemNode):
        return f"<li>{render_inline_nodes(node.children)}</li>"

    if isinstance(node, QuoteNode):
        return f"<blockquote>{render_inline_nodes(node.children)}</blockquote>"

    if isinstance(node, TableNode):
        return node.html

    if isinstance(node, UploadNode):
        return _render_upload(node)

    # Unknown block: render whatever it contains
    children = getattr(node, "children", None) or ()
    return "".join(render_block(child) for child in children)


def render_inline_nodes(nodes: Iterable[object]) -> str:
    return "".join(render_inline(node) for node in nodes)


def render_inline(node: object) -> str:
    """Render one inline node. Bold wraps first, italic goes on the outside."""
    if isinstance(node, TextNode):
        html = escape_html(node.text)
        if node.is_bold:
            html = f"<strong>{html}</strong>"
        if node.is_italic:
            html = f"<em>{html}</em>"
        return html

    if isinstance(node, LineBreakNode):
        return "<br>"

    if isinstance(node, LinkNode):
        rel = f' rel="{escape_html(node.rel)}"' if node.rel else ""
        inner = render_inline_nodes(node.children)
        return f'<a href="{escape_html(node.url)}"{rel}>{inner}</a>'

    children = getattr(node, "children", None)
    if children:
        return render_inline_nodes(children)
    return ""


def _render_upload(node: UploadNode) -> str:
    if not node.url:
        return ""
    return f'<img src="{escape_html(node.url)}" alt="{escape_html(node.alt)}">'
