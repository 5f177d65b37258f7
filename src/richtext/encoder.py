"""Convert HTML fragments into document trees."""

from __future__ import annotations

import logging
from typing import NamedTuple

from richtext.config import RICHTEXT_MAX_DEPTH
from richtext.html_utils import find_fragment_root, parse_fragment, source_markup
from richtext.schemas import (
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
)
from richtext.text import normalize_text

try:
    from bs4.element import NavigableString, PageElement, PreformattedString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = logging.getLogger(__name__)

_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
_LIST_TAGS = {"ul", "ol"}
_BLOCK_TAGS = _HEADING_TAGS | _LIST_TAGS | {
    "p",
    "blockquote",
    "table",
    "div",
    "section",
    "article",
    "main",
    "header",
    "footer",
    "figure",
    "pre",
}
_BOLD_TAGS = {"strong", "b"}
_ITALIC_TAGS = {"em", "i"}


class _BlockState(NamedTuple):
    """Completed blocks plus the inline run waiting for a paragraph."""

    blocks: tuple[BlockNode, ...] = ()
    pending: tuple[InlineNode, ...] = ()

    def push(self, nodes: tuple[InlineNode, ...]) -> _BlockState:
        return _BlockState(self.blocks, self.pending + nodes)

    def append(self, blocks: tuple[BlockNode, ...]) -> _BlockState:
        flushed = self.flush()
        return _BlockState(flushed.blocks + blocks, ())

    def flush(self) -> _BlockState:
        if not self.pending:
            return self
        paragraph = ParagraphNode(children=self.pending)
        return _BlockState(self.blocks + (paragraph,), ())


def encode(html: str) -> DocumentTree:
    """Convert an HTML fragment into a document tree.

    Never raises for malformed or unknown markup: unknown wrappers are
    flattened, unknown inline tags are unwrapped, and an empty fragment yields
    a single empty paragraph.
    """
    soup = parse_fragment(html)
    blocks = _convert_child_blocks(find_fragment_root(soup), source=html or "", depth=0)
    if not blocks:
        blocks = (ParagraphNode(children=(_empty_text(),)),)
    return DocumentTree(children=blocks)


def _convert_child_blocks(
    container: Tag, *, source: str, depth: int
) -> tuple[BlockNode, ...]:
    state = _BlockState()
    for child in container.children:
        state = _fold_block_child(state, child, source=source, depth=depth)
    return state.flush().blocks


def _fold_block_child(
    state: _BlockState, child: PageElement, *, source: str, depth: int
) -> _BlockState:
    if isinstance(child, PreformattedString):
        return state

    if isinstance(child, NavigableString):
        text = str(child).strip()
        if not text:
            return state
        return state.push((TextNode(text=text),))

    if not isinstance(child, Tag):
        return state

    if child.name in _BLOCK_TAGS:
        return state.append(_convert_block(child, source=source, depth=depth + 1))

    # Block-level br is ignored (only inline br matters)
    if child.name == "br":
        return state

    return state.push(_convert_inline(child, 0, depth=depth + 1))


def _convert_block(tag: Tag, *, source: str, depth: int) -> tuple[BlockNode, ...]:
    if depth > RICHTEXT_MAX_DEPTH:
        return _degrade_block(tag)

    if tag.name in _HEADING_TAGS:
        level = int(tag.name[1])
        return (HeadingNode(level=level, children=_inline_or_empty(tag, depth)),)

    if tag.name == "p":
        return (ParagraphNode(children=_inline_or_empty(tag, depth)),)

    if tag.name in _LIST_TAGS:
        return (_convert_list(tag, depth=depth),)

    if tag.name == "blockquote":
        return (QuoteNode(children=_inline_or_empty(tag, depth)),)

    if tag.name == "table":
        return (TableNode(html=source_markup(tag, source) or str(tag)),)

    logger.debug("Flattening <%s> wrapper into its child blocks", tag.name)
    return _convert_child_blocks(tag, source=source, depth=depth)


def _convert_list(tag: Tag, *, depth: int) -> ListNode:
    ordering = "number" if tag.name == "ol" else "bullet"
    if depth > RICHTEXT_MAX_DEPTH:
        logger.warning("Nesting limit %d reached inside <%s>", RICHTEXT_MAX_DEPTH, tag.name)
        item = ListItemNode(children=(TextNode(text=normalize_text(tag.get_text(" "))),))
        return ListNode(ordering=ordering, children=(item,))

    children: list[ListItemNode | ListNode] = []
    value = 1
    for child in tag.children:
        if not isinstance(child, Tag):
            continue
        if child.name == "li":
            children.extend(_convert_list_item(child, value, depth=depth + 1))
            value += 1
        elif child.name in _LIST_TAGS:
            # Sub-list already flattened next to its item
            children.append(_convert_list(child, depth=depth + 1))

    if not children:
        children.append(ListItemNode(value=1, children=(_empty_text(),)))
    return ListNode(ordering=ordering, children=tuple(children))


def _convert_list_item(
    item: Tag, value: int, *, depth: int
) -> list[ListItemNode | ListNode]:
    inline_content: list[InlineNode] = []
    nested_lists: list[ListNode] = []
    for child in item.children:
        if isinstance(child, Tag) and child.name in _LIST_TAGS:
            nested_lists.append(_convert_list(child, depth=depth + 1))
        else:
            inline_content.extend(_convert_inline(child, 0, depth=depth + 1))

    if not inline_content:
        inline_content.append(_empty_text())
    return [ListItemNode(value=value, children=tuple(inline_content)), *nested_lists]


def _inline_or_empty(tag: Tag, depth: int) -> tuple[InlineNode, ...]:
    children = _convert_inline_children(tag, 0, depth=depth)
    return children or (_empty_text(),)


def _convert_inline_children(
    tag: Tag, inherit_format: int, *, depth: int, in_link: bool = False
) -> tuple[InlineNode, ...]:
    nodes: list[InlineNode] = []
    for child in tag.children:
        nodes.extend(
            _convert_inline(child, inherit_format, depth=depth + 1, in_link=in_link)
        )
    return tuple(nodes)


def _convert_inline(
    node: PageElement, inherit_format: int, *, depth: int, in_link: bool = False
) -> tuple[InlineNode, ...]:
    if isinstance(node, PreformattedString):
        return ()

    if isinstance(node, NavigableString):
        text = str(node)
        return (TextNode(text=text, format=inherit_format),) if text else ()

    if not isinstance(node, Tag):
        return ()

    if depth > RICHTEXT_MAX_DEPTH:
        logger.warning("Nesting limit %d reached at <%s>", RICHTEXT_MAX_DEPTH, node.name)
        text = node.get_text()
        return (TextNode(text=text, format=inherit_format),) if text else ()

    if node.name == "br":
        return (LineBreakNode(),)

    if node.name in _BOLD_TAGS:
        return _convert_inline_children(
            node, inherit_format | FORMAT_BOLD, depth=depth, in_link=in_link
        )

    if node.name in _ITALIC_TAGS:
        return _convert_inline_children(
            node, inherit_format | FORMAT_ITALIC, depth=depth, in_link=in_link
        )

    if node.name == "a" and not in_link:
        link_children = _convert_inline_children(
            node, inherit_format, depth=depth, in_link=True
        )
        if not link_children:
            return ()
        href = node.get("href") or ""
        return (LinkNode(url=href, rel=_read_rel(node), children=link_children),)

    # Unsupported inline tag (or a link inside a link): keep its content only
    return _convert_inline_children(node, inherit_format, depth=depth, in_link=in_link)


def _read_rel(tag: Tag) -> str | None:
    rel = tag.get("rel")
    if isinstance(rel, list):
        rel = " ".join(rel)
    return rel or None


def _degrade_block(tag: Tag) -> tuple[BlockNode, ...]:
    logger.warning("Nesting limit %d reached at <%s>", RICHTEXT_MAX_DEPTH, tag.name)
    text = normalize_text(tag.get_text(" "))
    if not text:
        return ()
    return (ParagraphNode(children=(TextNode(text=text),)),)


def _empty_text() -> TextNode:
    return TextNode(text="")
