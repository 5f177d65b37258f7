"""Tests for strict markup validation."""

from __future__ import annotations

import pytest

from richtext.encoder import encode
from richtext.exceptions import DisallowedMarkupError, RichTextError
from richtext.validation import find_disallowed_tags, validate_fragment


class TestFindDisallowedTags:
    """Tests for find_disallowed_tags function."""

    def test_supported_markup_is_clean(self) -> None:
        html = (
            '<h2>T</h2><p><strong>a</strong> <em>b</em> <a href="/x">c</a><br></p>'
            "<ul><li>x</li></ul><blockquote>q</blockquote>"
            "<table><thead><tr><th>h</th></tr></thead><tbody><tr><td>d</td></tr></tbody></table>"
            '<img src="/i.png" alt="">'
        )

        assert find_disallowed_tags(html) == []

    def test_reports_sorted_unique_names(self) -> None:
        html = "<div><span>a</span><span>b</span></div><section>c</section>"

        assert find_disallowed_tags(html) == ["div", "section", "span"]

    def test_script_is_reported(self) -> None:
        assert find_disallowed_tags("<p>x</p><script>1</script>") == ["script"]

    def test_document_wrapper_is_ignored(self) -> None:
        assert find_disallowed_tags("<html><body><p>x</p></body></html>") == []


class TestValidateFragment:
    """Tests for validate_fragment function."""

    def test_clean_fragment_passes(self) -> None:
        validate_fragment("<p>fine</p>")

    def test_raises_with_tags(self) -> None:
        with pytest.raises(DisallowedMarkupError) as exc_info:
            validate_fragment("<p><u>under</u></p>")

        assert exc_info.value.tags == ["u"]
        assert "u" in str(exc_info.value)
        assert isinstance(exc_info.value, RichTextError)

    def test_encode_never_validates(self) -> None:
        tree = encode("<p><u>under</u></p>")

        assert tree.children[0].children[0].text == "under"
