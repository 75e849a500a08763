"""
Tests for MarkdownRenderer.

Lists are parsed with the nesting pipeline, so indented items show up as
nested lists indented by ``indent_string`` per level.
"""

import pytest

from delta_render import render_markdown
from delta_render.exceptions import ConfigurationError
from delta_render.renderers import MarkdownOptions, MarkdownRenderer
from delta_render.api import parse_quill_delta

BLOCK_EMBEDS = {"video", "divider"}


def ops(*items):
    return {"ops": list(items)}


def md(delta, options=None):
    return render_markdown(delta, options, block_embeds=BLOCK_EMBEDS)


class TestInlineFormatting:
    @pytest.mark.parametrize(
        "attributes,expected",
        [
            ({"bold": True}, "Hello **world**"),
            ({"italic": True}, "Hello _world_"),
            ({"strike": True}, "Hello ~~world~~"),
            ({"code": True}, "Hello `world`"),
            ({"underline": True}, "Hello world"),
            ({"script": "super"}, "Hello world"),
            ({"color": "red", "background": "blue", "font": "serif", "size": "large"}, "Hello world"),
        ],
    )
    def test_marks(self, attributes, expected):
        assert md(ops({"insert": "Hello "}, {"insert": "world", "attributes": attributes}, {"insert": "\n"})) == expected

    def test_equal_priorities_follow_attribute_order(self):
        text = ops({"insert": "text", "attributes": {"italic": True, "bold": True}}, {"insert": "\n"})
        assert md(text) == "**_text_**"

    def test_link(self):
        assert md(ops({"insert": "Click here", "attributes": {"link": "https://example.com"}}, {"insert": "\n"})) == (
            "[Click here](https://example.com)"
        )

    def test_link_wraps_bold(self):
        text = ops({"insert": "bold link", "attributes": {"bold": True, "link": "https://example.com"}}, {"insert": "\n"})
        assert md(text) == "[**bold link**](https://example.com)"

    def test_text_is_not_escaped(self):
        assert md(ops({"insert": "a < b & c\n"})) == "a < b & c"


class TestBlocks:
    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_headers(self, level):
        text = ops({"insert": f"Heading {level}"}, {"insert": "\n", "attributes": {"header": level}})
        assert md(text) == f"{'#' * level} Heading {level}"

    def test_blockquote(self):
        assert md(ops({"insert": "A quote"}, {"insert": "\n", "attributes": {"blockquote": True}})) == "> A quote"

    def test_blockquotes_separated_by_empty_paragraph(self):
        text = ops(
            {"insert": "This is a quote!"},
            {"insert": "\n", "attributes": {"blockquote": True}},
            {"insert": "\n"},
            {"insert": "This is another quote!"},
            {"insert": "\n", "attributes": {"blockquote": True}},
        )
        assert md(text) == "> This is a quote!\n\n> This is another quote!"

    def test_code_block(self):
        text = ops({"insert": "const x = 1;"}, {"insert": "\n", "attributes": {"code-block": True}})
        assert md(text) == "```\nconst x = 1;\n```"

    def test_multi_line_code_block(self):
        text = ops(
            {"insert": "const x = 1;"},
            {"insert": "\n", "attributes": {"code-block": True}},
            {"insert": "const y = 2;"},
            {"insert": "\n", "attributes": {"code-block": True}},
        )
        assert md(text) == "```\nconst x = 1;\nconst y = 2;\n```"

    def test_code_block_language(self):
        text = ops({"insert": "const x = 1;"}, {"insert": "\n", "attributes": {"code-block": "javascript"}})
        assert md(text) == "```javascript\nconst x = 1;\n```"

    def test_plain_code_block_has_no_language(self):
        text = ops({"insert": "plain text"}, {"insert": "\n", "attributes": {"code-block": "plain"}})
        assert md(text) == "```\nplain text\n```"

    def test_code_marks_are_not_applied_inside_fences(self):
        text = ops({"insert": "x", "attributes": {"bold": True}}, {"insert": "\n", "attributes": {"code-block": True}})
        assert md(text) == "```\nx\n```"


class TestSpacing:
    def test_text_without_newline(self):
        assert md(ops({"insert": "test"})) == "test"

    def test_empty_delta(self):
        assert md(ops()) == ""

    def test_paragraphs(self):
        text = ops({"insert": "This is a paragraph.\nThis is another paragraph.\n"})
        assert md(text) == "This is a paragraph.\nThis is another paragraph."

    def test_lists_separated_by_blank_line(self):
        text = ops(
            {"insert": "List 1, first item"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "List 1, second item"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "\n"},
            {"insert": "List 2, first item"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "List 2, second item"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
        )
        assert md(text) == "\n".join(
            [
                "*   List 1, first item",
                "*   List 1, second item",
                "",
                "*   List 2, first item",
                "*   List 2, second item",
            ]
        )

    def test_headers_and_lists(self):
        text = ops(
            {"insert": "Key Points:"},
            {"insert": "\n", "attributes": {"header": 3}},
            {"insert": "First point"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "Second point"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "Example:"},
            {"insert": "\n", "attributes": {"header": 4}},
            {"insert": "Only point"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
        )
        assert md(text) == "\n".join(
            ["### Key Points:", "*   First point", "*   Second point", "#### Example:", "*   Only point"]
        )


class TestLists:
    def test_bullet_list(self):
        text = ops(
            {"insert": "Item one"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "Item two"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
        )
        assert md(text) == "*   Item one\n*   Item two"

    def test_ordered_list(self):
        text = ops(
            {"insert": "First"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "Second"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
        )
        assert md(text) == "1. First\n2. Second"

    def test_checklist(self):
        text = ops(
            {"insert": "Done"},
            {"insert": "\n", "attributes": {"list": "checked"}},
            {"insert": "Not done"},
            {"insert": "\n", "attributes": {"list": "unchecked"}},
        )
        assert md(text) == "- [x] Done\n- [ ] Not done"

    def test_nested_bullets(self):
        text = ops(
            {"insert": "root bullet list"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "inner bullet list"},
            {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}},
            {"insert": "inner bullet list"},
            {"insert": "\n", "attributes": {"list": "bullet", "indent": 2}},
        )
        assert md(text) == "*   root bullet list\n    *   inner bullet list\n        *   inner bullet list"

    def test_nested_ordered_restarts_numbering(self):
        text = ops(
            {"insert": "root"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "inner"},
            {"insert": "\n", "attributes": {"list": "ordered", "indent": 1}},
            {"insert": "sibling"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
        )
        assert md(text) == "1. root\n    1. inner\n2. sibling"

    def test_mixed_inner_list_counts_only_ordered_items(self):
        text = ops(
            {"insert": "root ordered list"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "inner bullet list"},
            {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}},
            {"insert": "inner ordered list"},
            {"insert": "\n", "attributes": {"list": "ordered", "indent": 1}},
            {"insert": "inner bullet list"},
            {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}},
            {"insert": "inner ordered list"},
            {"insert": "\n", "attributes": {"list": "ordered", "indent": 1}},
        )
        assert md(text) == "\n".join(
            [
                "1. root ordered list",
                "    *   inner bullet list",
                "    1. inner ordered list",
                "    *   inner bullet list",
                "    2. inner ordered list",
            ]
        )

    def test_adjacent_different_type_lists(self):
        text = ops(
            {"insert": "Bullet item one"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "Ordered item one"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "Ordered item two"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
        )
        assert md(text) == "*   Bullet item one\n1. Ordered item one\n2. Ordered item two"

    def test_flat_lists_use_item_indent(self):
        text = ops(
            {"insert": "root"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "nested"},
            {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}},
        )
        root = parse_quill_delta(text, flat_lists=True)
        assert MarkdownRenderer().render(root) == "*   root\n    *   nested"

    @pytest.mark.parametrize("flat_lists", [True, False])
    def test_ordered_numbering_per_indent_level(self, flat_lists):
        text = ops(
            {"insert": "t0"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "t1"},
            {"insert": "\n", "attributes": {"list": "ordered", "indent": 1}},
            {"insert": "t2"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
        )
        assert render_markdown(text, flat_lists=flat_lists) == "1. t0\n    1. t1\n2. t2"

    def test_flat_numbering_restarts_after_shallower_item(self):
        text = ops(
            {"insert": "a"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "a1"},
            {"insert": "\n", "attributes": {"list": "ordered", "indent": 1}},
            {"insert": "a2"},
            {"insert": "\n", "attributes": {"list": "ordered", "indent": 1}},
            {"insert": "b"},
            {"insert": "\n", "attributes": {"list": "ordered"}},
            {"insert": "b1"},
            {"insert": "\n", "attributes": {"list": "ordered", "indent": 1}},
        )
        assert render_markdown(text, flat_lists=True) == "1. a\n    1. a1\n    2. a2\n2. b\n    1. b1"


class TestEmbeds:
    def test_image(self):
        assert md(ops({"insert": {"image": "https://example.com/img.png"}}, {"insert": "\n"})) == (
            "![](https://example.com/img.png)"
        )

    def test_image_with_alt_and_link(self):
        text = ops(
            {"insert": {"image": "/a.png"}, "attributes": {"alt": "A", "link": "https://example.com"}},
            {"insert": "\n"},
        )
        assert md(text) == "[![A](/a.png)](https://example.com)"

    def test_divider(self):
        text = ops({"insert": "Before\n"}, {"insert": {"divider": True}}, {"insert": "After\n"})
        assert md(text) == "Before\n* * *\nAfter"

    def test_video_renders_source(self):
        assert md(ops({"insert": {"video": "https://example.com/v.mp4"}})) == "https://example.com/v.mp4"

    def test_formula(self):
        assert md(ops({"insert": {"formula": "e=mc^2"}}, {"insert": "\n"})) == "e=mc^2"

    def test_unknown_embed_renders_nothing(self):
        assert md(ops({"insert": {"unknown_embed": {"data": "test"}}}, {"insert": "\n"})) == ""


class TestTables:
    def test_pipe_table(self):
        text = ops(
            {"insert": "A"},
            {"insert": "\n", "attributes": {"table": "r1"}},
            {"insert": "B"},
            {"insert": "\n", "attributes": {"table": "r1"}},
            {"insert": "C|D"},
            {"insert": "\n", "attributes": {"table": "r2"}},
            {"insert": "E"},
            {"insert": "\n", "attributes": {"table": "r2"}},
        )
        assert md(text) == "| A | B |\n| --- | --- |\n| C\\|D | E |"


class TestOptions:
    def test_bullet_char_and_padding(self):
        text = ops({"insert": "Item"}, {"insert": "\n", "attributes": {"list": "bullet"}})
        assert md(text, MarkdownOptions(bullet_char="-", bullet_padding=" ")) == "- Item"

    def test_hr_string(self):
        text = ops({"insert": "Before\n"}, {"insert": {"divider": True}}, {"insert": "After\n"})
        assert md(text, MarkdownOptions(hr_string="---")) == "Before\n---\nAfter"

    def test_fence(self):
        text = ops({"insert": "code"}, {"insert": "\n", "attributes": {"code-block": True}})
        assert md(text, MarkdownOptions(fence="~~~")) == "~~~\ncode\n~~~"

    def test_indent_string(self):
        text = ops(
            {"insert": "root"},
            {"insert": "\n", "attributes": {"list": "bullet"}},
            {"insert": "nested"},
            {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}},
        )
        assert md(text, MarkdownOptions(indent_string="  ")) == "*   root\n  *   nested"

    def test_from_dict_accepts_camel_case(self):
        options = MarkdownOptions.from_dict({"bulletChar": "-", "fenceChar": "~~~", "hr_string": "___"})
        assert options == MarkdownOptions(bullet_char="-", fence="~~~", hr_string="___")

    def test_from_dict_empty(self):
        assert MarkdownOptions.from_dict(None) == MarkdownOptions()

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigurationError, match="unknown key"):
            MarkdownOptions.from_dict({"bulletColor": "red"})

    def test_from_dict_rejects_non_strings(self):
        with pytest.raises(ConfigurationError):
            MarkdownOptions.from_dict({"bulletChar": 1})


class TestExtensibility:
    def test_with_block_for_custom_embed(self):
        renderer = MarkdownRenderer().with_block(
            "mention", lambda node, children, attrs: f"@{node.data['name']}"
        )
        root = parse_quill_delta(ops({"insert": "Hi "}, {"insert": {"mention": {"name": "ada"}}}, {"insert": "\n"}))
        assert renderer.render(root) == "Hi @ada"

    def test_with_mark_overrides_bold(self):
        renderer = MarkdownRenderer().with_mark("bold", lambda content, value, node, attrs: f"__{content}__")
        root = parse_quill_delta(ops({"insert": "x", "attributes": {"bold": True}}, {"insert": "\n"}))
        assert renderer.render(root) == "__x__"
