"""Test setup for richtext."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from richtext.schemas import (  # noqa: E402
    DocumentTree,
    HeadingNode,
    ParagraphNode,
    TextNode,
)


@pytest.fixture
def sample_tree() -> DocumentTree:
    """A small document with two sections."""
    return DocumentTree(
        children=(
            HeadingNode(level=2, children=(TextNode(text="Getting There"),)),
            ParagraphNode(children=(TextNode(text="Take the train."),)),
            HeadingNode(level=2, children=(TextNode(text="Where to Stay"),)),
            ParagraphNode(children=(TextNode(text="Book early."),)),
        )
    )
