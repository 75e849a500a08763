"""
HTML renderer reproducing the reference editor's own markup.

Output details: ``ql-*`` classes for layout, fonts and sizes, ``<br/>`` in
empty blocks, ``spellcheck="false"`` on code containers, ``data-list`` on
every list item, ``data-row`` on table cells and ``data-language`` on code
lines with a language.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ...models.attributes import (
    get_alt,
    get_embed_source,
    get_header_level,
    get_height,
    get_list_type,
    get_table_row,
    get_width,
)
from ...models.node import NodeType, TNode
from ..config import RendererConfig, TagBlock, TagMark
from ..mark_priorities import QUILL_MARK_PRIORITIES
from .base_html_renderer import EMPTY_BLOCK_CONTENT, BaseHtmlRenderer
from .escaping import build_attr_string, escape_html, serialize_resolved_attrs
from .layout import get_layout_classes
from .resolved_attrs import ResolvedAttrs

PREFIX = "ql"


# ----------------------------------------------------------------------
# Blocks
# ----------------------------------------------------------------------
def _header_tag(node: TNode) -> str:
    level = get_header_level(node)
    return f"h{level}" if level else "p"


def _code_block_container(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    return f'<div class="{PREFIX}-code-block-container" spellcheck="false">{children}</div>'


def _code_block(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    html_attrs: Dict[str, str] = {"class": f"{PREFIX}-code-block"}
    language = node.attributes.get("code-block")
    if isinstance(language, str) and language != "true":
        html_attrs["data-language"] = language
    return f"<div{build_attr_string(html_attrs)}>{children or EMPTY_BLOCK_CONTENT}</div>"


def _list(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    return f"<ol>{children}</ol>"


def _list_item(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    html_attrs: Dict[str, str] = {}
    if attrs.classes:
        html_attrs["class"] = " ".join(attrs.classes)
    html_attrs["data-list"] = get_list_type(node)
    return f"<li{build_attr_string(html_attrs)}>{children or EMPTY_BLOCK_CONTENT}</li>"


def _table(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    return f"<table><tbody>{children}</tbody></table>"


def _table_row(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    return f"<tr>{children}</tr>"


def _table_cell(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    row = get_table_row(node)
    html_attrs = {"data-row": row} if row else {}
    return f"<td{build_attr_string(html_attrs)}>{children}</td>"


def _dimension_attrs(node: TNode) -> List[str]:
    parts = []
    for name, value in (("width", get_width(node)), ("height", get_height(node))):
        if value:
            parts.append(f'{name}="{escape_html(value)}"')
    return parts


def _image(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    parts = [f'src="{escape_html(get_embed_source(node))}"']
    alt = get_alt(node)
    if alt is not None:
        parts.append(f'alt="{escape_html(alt)}"')
    parts.extend(_dimension_attrs(node))
    return f"<img {' '.join(parts)}>"


def _video(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    parts = [
        f'class="{PREFIX}-video"',
        f'src="{escape_html(get_embed_source(node))}"',
        'frameborder="0"',
        'allowfullscreen="true"',
    ]
    parts.extend(_dimension_attrs(node))
    return f"<iframe {' '.join(parts)}></iframe>"


def _formula(node: TNode, children: str, attrs: ResolvedAttrs) -> str:
    text = escape_html(node.data if isinstance(node.data, str) else str(node.data))
    return f'<span class="{PREFIX}-formula" data-value="{text}">{text}</span>'


def _line_break(node: TNode, renderer: Any) -> str:
    return "<br/>"


# ----------------------------------------------------------------------
# Marks and attributors
# ----------------------------------------------------------------------
def _script_tag(value: Any) -> str:
    return "sup" if value == "super" else "sub"


def _link(content: str, value: Any, node: TNode, attrs: Optional[ResolvedAttrs]) -> str:
    href = escape_html(str(value))
    return (
        f'<a href="{href}" target="_blank" rel="noopener noreferrer"'
        f"{serialize_resolved_attrs(attrs)}>{content}</a>"
    )


def _layout_resolver(node: TNode) -> ResolvedAttrs:
    return ResolvedAttrs(classes=get_layout_classes(node, PREFIX))


def build_quill_config() -> RendererConfig:
    """Build the handler registry of :class:`QuillHtmlRenderer`."""
    return RendererConfig(
        blocks={
            NodeType.PARAGRAPH.value: TagBlock("p"),
            NodeType.HEADER.value: TagBlock(_header_tag),
            NodeType.BLOCKQUOTE.value: TagBlock("blockquote"),
            NodeType.CODE_BLOCK_CONTAINER.value: _code_block_container,
            NodeType.CODE_BLOCK.value: _code_block,
            NodeType.LIST.value: _list,
            NodeType.LIST_ITEM.value: _list_item,
            NodeType.TABLE.value: _table,
            NodeType.TABLE_ROW.value: _table_row,
            NodeType.TABLE_CELL.value: _table_cell,
            "image": _image,
            "video": _video,
            "formula": _formula,
        },
        marks={
            "bold": TagMark("strong"),
            "italic": TagMark("em"),
            "underline": TagMark("u"),
            "strike": TagMark("s"),
            "code": TagMark("code"),
            "script": TagMark(_script_tag),
            "link": _link,
        },
        attributors={
            "color": lambda value, node: ResolvedAttrs(style={"color": str(value)}),
            "background": lambda value, node: ResolvedAttrs(style={"background-color": str(value)}),
            "font": lambda value, node: ResolvedAttrs(classes=(f"{PREFIX}-font-{value}",)),
            "size": lambda value, node: ResolvedAttrs(classes=(f"{PREFIX}-size-{value}",)),
        },
        mark_priorities=QUILL_MARK_PRIORITIES,
        block_attribute_resolvers=(_layout_resolver,),
        node_overrides={NodeType.LINE_BREAK.value: _line_break},
    )


class QuillHtmlRenderer(BaseHtmlRenderer):
    """
    Render a tree into the reference editor's native HTML.

    Usage:
        html = QuillHtmlRenderer().render(root)
        html = QuillHtmlRenderer().with_block("divider", TagBlock("hr", self_closing=True)).render(root)
    """

    def __init__(self, config: Optional[RendererConfig] = None):
        super().__init__(config if config is not None else build_quill_config())
