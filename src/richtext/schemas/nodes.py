"""Document tree node models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Format bitmask values
FORMAT_BOLD = 1
FORMAT_ITALIC = 2


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class TextNode(_Node):
    """A run of literal text carrying a format bitmask."""

    type: Literal["text"] = "text"
    text: str = ""
    format: int = Field(default=0, ge=0)

    @property
    def is_bold(self) -> bool:
        return bool(self.format & FORMAT_BOLD)

    @property
    def is_italic(self) -> bool:
        return bool(self.format & FORMAT_ITALIC)


class LineBreakNode(_Node):
    """A hard line break inside a block."""

    type: Literal["linebreak"] = "linebreak"


LinkChild = Annotated[Union[TextNode, LineBreakNode], Field(discriminator="type")]


class LinkNode(_Node):
    """A hyperlink wrapping formatted text.

    Children are restricted to text and line breaks, so links never nest.
    """

    type: Literal["link"] = "link"
    url: str = ""
    rel: str | None = None
    children: tuple[LinkChild, ...] = Field(..., min_length=1)


InlineNode = Annotated[
    Union[TextNode, LineBreakNode, LinkNode], Field(discriminator="type")
]


class ParagraphNode(_Node):
    type: Literal["paragraph"] = "paragraph"
    children: tuple[InlineNode, ...] = Field(..., min_length=1)


class HeadingNode(_Node):
    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    children: tuple[InlineNode, ...] = Field(..., min_length=1)

    @property
    def tag(self) -> str:
        return f"h{self.level}"


class QuoteNode(_Node):
    type: Literal["quote"] = "quote"
    children: tuple[InlineNode, ...] = Field(..., min_length=1)


class ListItemNode(_Node):
    """A single list entry.

    ``value`` is the 1-based ordinal of the item within its list. Sub-lists are
    never children of an item; they follow it as siblings in the parent list.
    """

    type: Literal["listitem"] = "listitem"
    value: int = Field(default=1, ge=1)
    children: tuple[InlineNode, ...] = Field(..., min_length=1)


ListChild = Annotated[Union[ListItemNode, "ListNode"], Field(discriminator="type")]


class ListNode(_Node):
    """A bulleted or numbered list of items and flattened sub-lists."""

    type: Literal["list"] = "list"
    ordering: Literal["bullet", "number"] = "bullet"
    children: tuple[ListChild, ...] = Field(..., min_length=1)

    @property
    def tag(self) -> str:
        return "ol" if self.ordering == "number" else "ul"


class TableNode(_Node):
    """A table kept as the verbatim markup it was parsed from."""

    type: Literal["table"] = "table"
    html: str


class UploadNode(_Node):
    """An embedded reference to externally stored media (e.g. an image)."""

    type: Literal["upload"] = "upload"
    url: str | None = None
    alt: str = ""
    width: int | None = None
    height: int | None = None
    media_id: str | int | None = None


BlockNode = Annotated[
    Union[
        ParagraphNode,
        HeadingNode,
        ListNode,
        ListItemNode,
        QuoteNode,
        TableNode,
        UploadNode,
    ],
    Field(discriminator="type"),
]


class DocumentTree(_Node):
    """Root of a converted document."""

    type: Literal["root"] = "root"
    children: tuple[BlockNode, ...] = Field(..., min_length=1)


ListNode.model_rebuild()
DocumentTree.model_rebuild()
