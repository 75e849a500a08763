"""Plain text renderer."""

from __future__ import annotations

from typing import Any, List, Optional

from ..models.attributes import get_alt, get_embed_source, get_indent
from ..models.node import NodeType, TNode
from .config import RendererConfig
from .simple_renderer import SimpleRenderer


def build_text_config(indent_string: str = "  ") -> RendererConfig:
    """Build the handler registry of :class:`TextRenderer`."""

    def render_lines(node: TNode, renderer: Any) -> str:
        return "\n".join(renderer.render_node(child) for child in node.children)

    def render_list(node: TNode, renderer: Any, depth: int = 0) -> str:
        flat = not node.attributes.get("list")
        lines: List[str] = []
        for item in node.children:
            nested = [child for child in item.children if child.type == NodeType.LIST.value]
            inline = [child for child in item.children if child.type != NodeType.LIST.value]
            level = get_indent(item) if flat else depth
            text = renderer.join_children([renderer.render_node(child) for child in inline])
            lines.append(f"{indent_string * level}{text}")
            lines.extend(render_list(child, renderer, depth + 1) for child in nested)
        return "\n".join(lines)

    def render_table(node: TNode, renderer: Any) -> str:
        return "\n".join(
            "\t".join(renderer.render_children(cell) for cell in row.children)
            for row in node.children
        )

    def embed_text(node: TNode, children: str, attrs: Any) -> str:
        return node.data if isinstance(node.data, str) else ""

    def children_only(node: TNode, children: str, attrs: Any) -> str:
        return children

    return RendererConfig(
        blocks={
            **{
                block_type.value: children_only
                for block_type in (
                    NodeType.PARAGRAPH,
                    NodeType.HEADER,
                    NodeType.BLOCKQUOTE,
                    NodeType.CODE_BLOCK,
                    NodeType.LIST_ITEM,
                    NodeType.TABLE_ROW,
                    NodeType.TABLE_CELL,
                )
            },
            "image": lambda node, children, attrs: get_alt(node) or "",
            "video": lambda node, children, attrs: get_embed_source(node),
            "formula": embed_text,
            "divider": lambda node, children, attrs: "",
        },
        node_overrides={
            NodeType.ROOT.value: render_lines,
            NodeType.CODE_BLOCK_CONTAINER.value: render_lines,
            NodeType.LIST.value: render_list,
            NodeType.TABLE.value: render_table,
            NodeType.LINE_BREAK.value: lambda node, renderer: "\n",
        },
    )


class TextRenderer(SimpleRenderer[str]):
    """
    Render a tree as plain text: one line per block, formatting dropped,
    list items indented by nesting depth.
    """

    def __init__(self, indent_string: str = "  ", config: Optional[RendererConfig] = None):
        self.indent_string = indent_string
        super().__init__(config if config is not None else build_text_config(indent_string))

    def join_children(self, children: List[str]) -> str:
        return "".join(children)

    def render_text(self, text: str) -> str:
        return text
