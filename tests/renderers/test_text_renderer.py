"""
Tests for TextRenderer.
"""

from delta_render import render_text
from delta_render.api import parse_quill_delta
from delta_render.renderers import TextRenderer


def ops(*items):
    return {"ops": list(items)}


class TestTextRenderer:
    """Plain text output: one line per block, formatting dropped."""

    def test_paragraphs(self):
        assert render_text(ops({"insert": "One\nTwo\n"})) == "One\nTwo"

    def test_formatting_is_dropped(self):
        delta = ops(
            {"insert": "bold", "attributes": {"bold": True, "color": "red"}},
            {"insert": " and "},
            {"insert": "link", "attributes": {"link": "https://example.com"}},
            {"insert": "\n", "attributes": {"header": 1}},
        )
        assert render_text(delta) == "bold and link"

    def test_text_is_not_escaped(self):
        assert render_text(ops({"insert": "<b> & </b>\n"})) == "<b> & </b>"

    def test_nested_list_indentation(self):
        delta = ops(
            {"insert": "a"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "b"},
            {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}},
            {"insert": "c"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
        )
        assert render_text(delta) == "a\n  b\nc"

    def test_flat_list_uses_indent(self):
        delta = ops(
            {"insert": "a"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "b"},
            {"insert": "\n", "attributes": {"list": "ordered", "indent": 2}},
        )
        assert render_text(delta, flat_lists=True) == "a\n    b"

    def test_custom_indent_string(self):
        delta = ops(
            {"insert": "a"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "b"},
            {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}},
        )
        assert TextRenderer(indent_string="\t").render(parse_quill_delta(delta)) == "a\n\tb"

    def test_code_block_lines(self):
        delta = ops(
            {"insert": "x = 1"},
            {"insert": "\n", "attributes": {"code-block": "python"}},
            {"insert": "y = 2"},
            {"insert": "\n", "attributes": {"code-block": "python"}},
        )
        assert render_text(delta) == "x = 1\ny = 2"

    def test_table_cells_tab_separated(self):
        delta = ops(
            {"insert": "A"},
            {"insert": "\n", "attributes": {"table": "r1"}},
            {"insert": "B"},
            {"insert": "\n", "attributes": {"table": "r1"}},
            {"insert": "C"},
            {"insert": "\n", "attributes": {"table": "r2"}},
        )
        assert render_text(delta) == "A\tB\nC"

    def test_embeds(self):
        delta = ops(
            {"insert": {"image": "/a.png"}, "attributes": {"alt": "Logo"}},
            {"insert": " "},
            {"insert": {"formula": "x^2"}},
            {"insert": "\n"},
            {"insert": {"video": "https://example.com/v.mp4"}},
        )
        assert render_text(delta) == "Logo x^2\nhttps://example.com/v.mp4"

    def test_soft_line_breaks(self):
        assert render_text(ops({"insert": "A\nB\n"}), soft_line_breaks=True) == "A\nB"

    def test_empty_document(self):
        assert render_text(ops()) == ""
