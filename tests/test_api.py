"""
Tests for the high level API (parse_quill_delta and the render_* helpers).
"""

import pytest

from delta_render import (
    BlockInfo,
    DeltaShapeError,
    Delta,
    parse_quill_delta,
    render_html,
    render_markdown,
    render_text,
)
from delta_render.api import build_parser_config
from delta_render.renderers import MarkdownOptions
from delta_render.transformers import list_nester


def ops(*items):
    return {"ops": list(items)}


LIST_DELTA = ops(
    {"insert": "a"},
    {"insert": "\n", "attributes": {"list": "bullet"}},
    {"insert": "b"},
    {"insert": "\n", "attributes": {"list": "bullet", "indent": 1}},
)


class TestParseQuillDelta:
    def test_nests_lists_by_default(self):
        root = parse_quill_delta(LIST_DELTA)
        (lst,) = root.children
        assert lst.type == "list"
        assert lst.attributes["list"] == "bullet"
        first = lst.children[0]
        assert first.children[-1].type == "list"

    def test_flat_lists(self):
        root = parse_quill_delta(LIST_DELTA, flat_lists=True)
        (lst,) = root.children
        assert [child.type for child in lst.children] == ["list-item", "list-item"]
        assert dict(lst.attributes) == {}

    def test_groups_tables_and_code_blocks(self):
        root = parse_quill_delta(
            ops(
                {"insert": "A"},
                {"insert": "\n", "attributes": {"table": "r1"}},
                {"insert": "x"},
                {"insert": "\n", "attributes": {"code-block": True}},
            )
        )
        assert [child.type for child in root.children] == ["table", "code-block-container"]

    def test_accepts_delta_instance(self):
        root = parse_quill_delta(Delta.from_dict(ops({"insert": "Hi\n"})))
        assert root.text_content() == "Hi"

    def test_transformers_replace_pipeline(self):
        root = parse_quill_delta(LIST_DELTA, transformers=[])
        assert [child.type for child in root.children] == ["list-item", "list-item"]

    def test_transformers_subset(self):
        root = parse_quill_delta(
            ops({"insert": "A"}, {"insert": "\n", "attributes": {"table": "r1"}}),
            transformers=[list_nester],
        )
        assert root.children[0].type == "table-cell"

    def test_extra_transformers_run_last(self):
        seen = []

        def record(root):
            seen.append([child.type for child in root.children])
            return root

        parse_quill_delta(LIST_DELTA, extra_transformers=[record])
        assert seen == [["list"]]

    def test_extra_block_attributes(self):
        root = parse_quill_delta(
            ops({"insert": "Note"}, {"insert": "\n", "attributes": {"callout": "info"}}),
            extra_block_attributes={"callout": lambda value: BlockInfo("callout", {"callout": value})},
        )
        (callout,) = root.children
        assert callout.type == "callout"
        assert callout.attributes["callout"] == "info"

    def test_block_embeds(self):
        root = parse_quill_delta(
            ops({"insert": "Before"}, {"insert": {"divider": True}}, {"insert": "After\n"}),
            block_embeds={"divider"},
        )
        assert [child.type for child in root.children] == ["paragraph", "divider", "paragraph"]

    def test_invalid_delta(self):
        with pytest.raises(DeltaShapeError):
            parse_quill_delta({"no_ops": []})


class TestBuildParserConfig:
    def test_defaults(self):
        config = build_parser_config()
        assert config.is_block_attribute("header")
        assert config.is_block_embed("video")
        assert not config.soft_line_breaks

    def test_extra_attributes_do_not_touch_defaults(self):
        config = build_parser_config({"callout": lambda value: ("callout", {})})
        assert config.is_block_attribute("callout")
        assert not build_parser_config().is_block_attribute("callout")


class TestRenderHelpers:
    def test_render_html_uses_flat_lists(self):
        assert render_html(LIST_DELTA) == (
            '<ol><li data-list="bullet">a</li><li class="ql-indent-1" data-list="bullet">b</li></ol>'
        )

    def test_render_html_header(self):
        assert render_html(ops({"insert": "Hello"}, {"insert": "\n", "attributes": {"header": 1}})) == "<h1>Hello</h1>"

    def test_render_markdown(self):
        assert render_markdown(LIST_DELTA) == "*   a\n    *   b"

    def test_render_markdown_with_options(self):
        assert render_markdown(LIST_DELTA, MarkdownOptions(bullet_char="-", bullet_padding=" ")) == "- a\n    - b"

    def test_render_text(self):
        assert render_text(LIST_DELTA) == "a\n  b"
