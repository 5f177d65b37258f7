"""Read and write document trees in the CMS's Lexical JSON format."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from richtext.exceptions import DocumentLoadError
from richtext.schemas import (
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

logger = logging.getLogger(__name__)

_LINK_TYPES = {"link", "autolink"}
_DEFAULT_HEADING_LEVEL = 2


def to_lexical(tree: DocumentTree) -> dict[str, Any]:
    """Render a document tree as a Lexical editor state."""
    return {
        "root": {
            "type": "root",
            "children": [_dump_block(node) for node in tree.children],
            **_element_fields(),
        }
    }


def dumps(tree: DocumentTree, *, indent: int | None = None) -> str:
    return json.dumps(to_lexical(tree), indent=indent, ensure_ascii=False)


def from_lexical(data: Mapping[str, Any]) -> DocumentTree:
    """Load a stored Lexical document.

    Accepts either the ``{"root": ...}`` envelope or the root node itself.
    Unknown element kinds are flattened into their children, unknown leaves
    are dropped and empty containers get an empty text node.

    Raises:
        DocumentLoadError: If the payload is not a mapping or has no root
            children list.
    """
    if not isinstance(data, Mapping):
        raise DocumentLoadError(f"Expected a mapping, got {type(data).__name__}")

    root = data.get("root", data)
    if not isinstance(root, Mapping) or not isinstance(root.get("children"), list):
        raise DocumentLoadError("Document has no root children list")

    blocks = _load_blocks(root["children"])
    if not blocks:
        blocks = [ParagraphNode(children=(TextNode(),))]
    return DocumentTree(children=tuple(blocks))


def loads(text: str) -> DocumentTree:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"Invalid document JSON: {exc}") from exc
    return from_lexical(data)


# Dumping


def _element_fields() -> dict[str, Any]:
    return {"direction": "ltr", "format": "", "indent": 0, "version": 1}


def _dump_block(node: BlockNode) -> dict[str, Any]:
    if isinstance(node, HeadingNode):
        return {
            "type": "heading",
            "tag": node.tag,
            "children": _dump_inline_nodes(node.children),
            **_element_fields(),
            "textFormat": 0,
            "textStyle": "",
        }
    if isinstance(node, ParagraphNode):
        return {
            "type": "paragraph",
            "children": _dump_inline_nodes(node.children),
            **_element_fields(),
            "textFormat": 0,
            "textStyle": "",
        }
    if isinstance(node, ListNode):
        return {
            "type": "list",
            "listType": node.ordering,
            "tag": node.tag,
            "start": 1,
            "children": [_dump_block(child) for child in node.children],
            **_element_fields(),
        }
    if isinstance(node, ListItemNode):
        return {
            "type": "listitem",
            "checked": False,
            "value": node.value,
            "children": _dump_inline_nodes(node.children),
            **_element_fields(),
        }
    if isinstance(node, QuoteNode):
        return {
            "type": "quote",
            "children": _dump_inline_nodes(node.children),
            **_element_fields(),
            "textFormat": 0,
            "textStyle": "",
        }
    if isinstance(node, TableNode):
        return {"type": "table", "html": node.html, "version": 1}
    if isinstance(node, UploadNode):
        return {
            "type": "upload",
            "relationTo": "media",
            "value": {
                "id": node.media_id,
                "url": node.url,
                "alt": node.alt,
                "width": node.width,
                "height": node.height,
            },
            "fields": None,
            "format": "",
            "version": 3,
        }
    raise TypeError(f"Unsupported block node: {type(node).__name__}")


def _dump_inline_nodes(nodes: tuple[InlineNode, ...]) -> list[dict[str, Any]]:
    return [_dump_inline(node) for node in nodes]


def _dump_inline(node: InlineNode) -> dict[str, Any]:
    if isinstance(node, TextNode):
        return {
            "type": "text",
            "text": node.text,
            "format": node.format,
            "detail": 0,
            "mode": "normal",
            "style": "",
            "version": 1,
        }
    if isinstance(node, LineBreakNode):
        return {"type": "linebreak", "version": 1}
    if isinstance(node, LinkNode):
        fields: dict[str, Any] = {"linkType": "custom", "url": node.url, "newTab": False}
        if node.rel:
            fields["rel"] = node.rel
        return {
            "type": "link",
            "fields": fields,
            "children": _dump_inline_nodes(node.children),
            **_element_fields(),
        }
    raise TypeError(f"Unsupported inline node: {type(node).__name__}")


# Loading


def _load_blocks(raw_nodes: list[Any]) -> list[BlockNode]:
    blocks: list[BlockNode] = []
    pending: list[InlineNode] = []

    def flush() -> None:
        if pending:
            blocks.append(ParagraphNode(children=tuple(pending)))
            pending.clear()

    for raw in raw_nodes:
        if not isinstance(raw, Mapping):
            continue
        kind = raw.get("type")
        if kind in ("text", "linebreak") or kind in _LINK_TYPES:
            pending.extend(_load_inline([raw]))
            continue
        block = _load_block(raw)
        if block is not None:
            flush()
            blocks.append(block)
        elif isinstance(raw.get("children"), list):
            logger.debug("Flattening stored %r node into its children", kind)
            flush()
            blocks.extend(_load_blocks(raw["children"]))
        else:
            logger.debug("Dropping stored %r node", kind)
    flush()
    return blocks


def _load_block(raw: Mapping[str, Any]) -> BlockNode | None:
    kind = raw.get("type")
    if kind == "heading":
        return HeadingNode(level=_heading_level(raw.get("tag")), children=_load_content(raw))
    if kind == "paragraph":
        return ParagraphNode(children=_load_content(raw))
    if kind == "quote":
        return QuoteNode(children=_load_content(raw))
    if kind == "list":
        return _load_list(raw)
    if kind == "listitem":
        return ListItemNode(value=_positive_int(raw.get("value"), 1), children=_load_content(raw))
    if kind == "table":
        html = raw.get("html")
        return TableNode(html=html if isinstance(html, str) else "")
    if kind == "upload":
        return _load_upload(raw)
    return None


def _load_list(raw: Mapping[str, Any]) -> ListNode:
    ordering = "number" if raw.get("listType") == "number" or raw.get("tag") == "ol" else "bullet"
    children: list[ListItemNode | ListNode] = []
    value = 1
    for child in _children(raw):
        if not isinstance(child, Mapping):
            continue
        kind = child.get("type")
        if kind == "list":
            children.append(_load_list(child))
        elif kind == "listitem":
            children.append(ListItemNode(value=value, children=_load_content(child)))
            value += 1
        else:
            # Stray content inside a list becomes its own item
            content = tuple(_load_inline([child]))
            if content:
                children.append(ListItemNode(value=value, children=content))
                value += 1
    if not children:
        children.append(ListItemNode(children=(TextNode(),)))
    return ListNode(ordering=ordering, children=tuple(children))


def _load_upload(raw: Mapping[str, Any]) -> UploadNode:
    value = raw.get("value")
    if not isinstance(value, Mapping):
        value = {}
    url = value.get("url")
    alt = value.get("alt")
    return UploadNode(
        url=url if isinstance(url, str) else None,
        alt=alt if isinstance(alt, str) else "",
        width=_positive_int(value.get("width"), None),
        height=_positive_int(value.get("height"), None),
        media_id=value.get("id") if isinstance(value.get("id"), (str, int)) else None,
    )


def _load_content(raw: Mapping[str, Any]) -> tuple[InlineNode, ...]:
    content = tuple(_load_inline(_children(raw)))
    return content or (TextNode(),)


def _load_inline(raw_nodes: list[Any], *, in_link: bool = False) -> list[InlineNode]:
    nodes: list[InlineNode] = []
    for raw in raw_nodes:
        if not isinstance(raw, Mapping):
            continue
        kind = raw.get("type")
        if kind == "text":
            text = raw.get("text")
            fmt = raw.get("format")
            nodes.append(
                TextNode(
                    text=text if isinstance(text, str) else "",
                    format=fmt if isinstance(fmt, int) and fmt >= 0 else 0,
                )
            )
        elif kind == "linebreak":
            nodes.append(LineBreakNode())
        elif kind in _LINK_TYPES and not in_link:
            link_children = _load_inline(_children(raw), in_link=True)
            if link_children:
                url, rel = _link_target(raw)
                nodes.append(LinkNode(url=url, rel=rel, children=tuple(link_children)))
        elif isinstance(raw.get("children"), list):
            nodes.extend(_load_inline(raw["children"], in_link=in_link))
        else:
            logger.debug("Dropping stored inline %r node", kind)
    return nodes


def _link_target(raw: Mapping[str, Any]) -> tuple[str, str | None]:
    fields = raw.get("fields")
    if not isinstance(fields, Mapping):
        fields = raw
    url = fields.get("url")
    rel = fields.get("rel")
    return (url if isinstance(url, str) else "", rel if isinstance(rel, str) and rel else None)


def _children(raw: Mapping[str, Any]) -> list[Any]:
    children = raw.get("children")
    return children if isinstance(children, list) else []


def _heading_level(tag: Any) -> int:
    if isinstance(tag, str) and len(tag) == 2 and tag[0] == "h" and tag[1] in "123456":
        return int(tag[1])
    return _DEFAULT_HEADING_LEVEL


def _positive_int(value: Any, default: int | None) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
        return value
    return default
