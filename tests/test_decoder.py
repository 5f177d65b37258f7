"""Tests for the document tree to HTML decoder."""

from __future__ import annotations

from types import SimpleNamespace

from richtext.decoder import decode, escape_html, render_block, render_inline
from richtext.schemas import (
    FORMAT_BOLD,
    FORMAT_ITALIC,
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


def _paragraph(text: str) -> ParagraphNode:
    return ParagraphNode(children=(TextNode(text=text),))


class TestDecodeBlocks:
    """Tests for block rendering."""

    def test_blocks_are_joined_with_newline(self) -> None:
        tree = DocumentTree(
            children=(
                HeadingNode(level=3, children=(TextNode(text="Title"),)),
                _paragraph("Body"),
            )
        )

        assert decode(tree) == "<h3>Title</h3>\n<p>Body</p>"

    def test_custom_separator(self) -> None:
        tree = DocumentTree(children=(_paragraph("a"), _paragraph("b")))

        assert decode(tree, separator="") == "<p>a</p><p>b</p>"

    def test_quote(self) -> None:
        tree = DocumentTree(children=(QuoteNode(children=(TextNode(text="Hi"),)),))

        assert decode(tree) == "<blockquote>Hi</blockquote>"

    def test_flattened_nested_list(self) -> None:
        tree = DocumentTree(
            children=(
                ListNode(
                    ordering="number",
                    children=(
                        ListItemNode(children=(TextNode(text="One"),)),
                        ListNode(children=(ListItemNode(children=(TextNode(text="Nested"),)),)),
                        ListItemNode(value=2, children=(TextNode(text="Two"),)),
                    ),
                ),
            )
        )

        assert decode(tree) == (
            "<ol><li>One</li><ul><li>Nested</li></ul><li>Two</li></ol>"
        )

    def test_table_is_emitted_unchanged(self) -> None:
        table = "<table><tr><td>a &amp; b</td></tr></table>"
        tree = DocumentTree(children=(TableNode(html=table),))

        assert decode(tree) == table

    def test_upload_renders_image(self) -> None:
        node = UploadNode(url="https://cdn.example.com/chart.png", alt='Cost "chart"')

        assert render_block(node) == (
            '<img src="https://cdn.example.com/chart.png" alt="Cost &quot;chart&quot;">'
        )

    def test_upload_without_url_renders_nothing(self) -> None:
        assert render_block(UploadNode(alt="missing")) == ""

    def test_unknown_block_renders_children(self) -> None:
        node = SimpleNamespace(children=(_paragraph("x"), _paragraph("y")))

        assert render_block(node) == "<p>x</p><p>y</p>"

    def test_unknown_leaf_renders_nothing(self) -> None:
        assert render_block(SimpleNamespace(type="mystery")) == ""

    def test_decode_does_not_mutate_tree(self) -> None:
        tree = DocumentTree(children=(_paragraph("same"),))
        before = tree.model_dump()

        decode(tree)

        assert tree.model_dump() == before


class TestRenderInline:
    """Tests for inline rendering."""

    def test_text_is_escaped(self) -> None:
        assert render_inline(TextNode(text='a < b & "c" > d')) == (
            "a &lt; b &amp; &quot;c&quot; &gt; d"
        )

    def test_bold(self) -> None:
        assert render_inline(TextNode(text="x", format=FORMAT_BOLD)) == "<strong>x</strong>"

    def test_italic(self) -> None:
        assert render_inline(TextNode(text="x", format=FORMAT_ITALIC)) == "<em>x</em>"

    def test_bold_italic_order_is_stable(self) -> None:
        node = TextNode(text="x", format=FORMAT_BOLD | FORMAT_ITALIC)

        assert render_inline(node) == "<em><strong>x</strong></em>"

    def test_line_break(self) -> None:
        assert render_inline(LineBreakNode()) == "<br>"

    def test_link(self) -> None:
        node = LinkNode(
            url="https://example.com/?a=1&b=2",
            children=(TextNode(text="go", format=FORMAT_BOLD),),
        )

        assert render_inline(node) == (
            '<a href="https://example.com/?a=1&amp;b=2"><strong>go</strong></a>'
        )

    def test_link_with_rel(self) -> None:
        node = LinkNode(url="/x", rel="nofollow sponsored", children=(TextNode(text="x"),))

        assert render_inline(node) == '<a href="/x" rel="nofollow sponsored">x</a>'

    def test_unknown_inline_with_children(self) -> None:
        node = SimpleNamespace(children=(TextNode(text="a"), TextNode(text="b")))

        assert render_inline(node) == "ab"

    def test_unknown_inline_without_children(self) -> None:
        assert render_inline(SimpleNamespace()) == ""


class TestEscapeHtml:
    """Tests for escape_html function."""

    def test_ampersand_escaped_first(self) -> None:
        assert escape_html("&lt;") == "&amp;lt;"

    def test_single_quote_untouched(self) -> None:
        assert escape_html("it's") == "it's"
