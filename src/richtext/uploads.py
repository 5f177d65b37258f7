"""Place uploaded media into a document tree."""

from __future__ import annotations

import logging
from typing import Iterable

from richtext.schemas import BlockNode, DocumentTree, HeadingNode, UploadNode, UploadSpec
from richtext.text import extract_text, normalize_text

logger = logging.getLogger(__name__)


def inject_upload_nodes(
    tree: DocumentTree, uploads: Iterable[UploadSpec]
) -> DocumentTree:
    """Return a new tree with an upload node after each upload's target heading.

    The target is the first top-level heading whose text matches
    ``insert_after_heading`` (case-insensitive, whitespace-normalised).
    Uploads sharing a heading keep their given order. Uploads with a blank or
    unmatched target go to the end of the document. ``tree`` is not modified.
    """
    uploads = list(uploads)
    if not uploads:
        return tree

    heading_keys = {
        index: _heading_key(extract_text(node.children))
        for index, node in enumerate(tree.children)
        if isinstance(node, HeadingNode)
    }

    placed: dict[int, list[UploadNode]] = {}
    trailing: list[UploadNode] = []
    for upload in uploads:
        index = _find_heading(heading_keys, upload.insert_after_heading)
        if index is None:
            if upload.insert_after_heading.strip():
                logger.debug(
                    "No heading matches %r, appending upload at the end",
                    upload.insert_after_heading,
                )
            trailing.append(upload.to_node())
        else:
            placed.setdefault(index, []).append(upload.to_node())

    children: list[BlockNode] = []
    for index, node in enumerate(tree.children):
        children.append(node)
        children.extend(placed.get(index, ()))
    children.extend(trailing)

    logger.info("Injected %d upload node(s) into document", len(uploads))
    return DocumentTree(children=tuple(children))


def _heading_key(text: str) -> str:
    return normalize_text(text).casefold()


def _find_heading(heading_keys: dict[int, str], target: str) -> int | None:
    key = _heading_key(target)
    if not key:
        return None
    for index, heading_key in heading_keys.items():
        if heading_key == key:
            return index
    return None
