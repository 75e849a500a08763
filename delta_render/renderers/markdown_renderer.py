"""
Markdown renderer.

Blocks are separated by single newlines; an empty paragraph therefore shows
up as a blank line. Formats without a Markdown equivalent (underline,
script, color, background, font, size) are rendered as plain content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from ..exceptions import ConfigurationError
from ..models.attributes import (
    get_alt,
    get_code_language,
    get_embed_source,
    get_header_level,
    get_indent,
    get_link_href,
    get_list_type,
)
from ..models.node import NodeType, TNode
from .config import RendererConfig
from .mark_priorities import DEFAULT_MARK_PRIORITIES
from .simple_renderer import SimpleRenderer

_PASS_THROUGH_MARKS = ("underline", "script", "color", "background", "font", "size")


@dataclass(frozen=True)
class MarkdownOptions:
    """
    Output options of :class:`MarkdownRenderer`.

    Attributes:
        bullet_char: Marker of unordered list items
        bullet_padding: Padding between the bullet and the item text
        indent_string: Indentation of each nested list level
        hr_string: Horizontal rule written for ``divider`` embeds
        fence: Fence around code blocks
    """

    bullet_char: str = "*"
    bullet_padding: str = "   "
    indent_string: str = "    "
    hr_string: str = "* * *"
    fence: str = "```"

    @staticmethod
    def from_dict(data: Optional[Mapping[str, Any]]) -> "MarkdownOptions":
        """Build options from a mapping; camelCase keys are accepted too."""
        if not data:
            return MarkdownOptions()
        aliases = {
            "bulletChar": "bullet_char",
            "bulletPadding": "bullet_padding",
            "indentString": "indent_string",
            "hrString": "hr_string",
            "fenceChar": "fence",
            "fence_char": "fence",
        }
        normalized: Dict[str, Any] = {aliases.get(key, key): value for key, value in data.items()}
        allowed = set(MarkdownOptions.__dataclass_fields__)
        extra = set(normalized) - allowed
        if extra:
            raise ConfigurationError("MarkdownOptions: unknown key(s)", details=", ".join(sorted(extra)))
        for key, value in normalized.items():
            if not isinstance(value, str):
                raise ConfigurationError(f"MarkdownOptions: '{key}' must be a string", details=repr(value))
        return MarkdownOptions(**normalized)


def _is_list(node: TNode) -> bool:
    return node.type == NodeType.LIST.value


def _list_marker(list_type: str, number: int, options: MarkdownOptions) -> str:
    if list_type == "ordered":
        return f"{number}. "
    if list_type == "checked":
        return "- [x] "
    if list_type == "unchecked":
        return "- [ ] "
    return f"{options.bullet_char}{options.bullet_padding}"


def build_markdown_config(options: MarkdownOptions) -> RendererConfig:
    """Build the handler registry of :class:`MarkdownRenderer` for ``options``."""

    def render_root(node: TNode, renderer: Any) -> str:
        return "\n".join(renderer.render_node(child) for child in node.children)

    def render_list(node: TNode, renderer: Any, depth: int = 0) -> str:
        # Lists from the flat grouper carry no ``list`` attribute; use item indents then.
        flat = not node.attributes.get("list")
        lines: List[str] = []
        # Ordered item counters per indent level; a shallower item ends deeper runs.
        numbers: Dict[int, int] = {}
        for item in node.children:
            if item.type != NodeType.LIST_ITEM.value:
                lines.append(renderer.render_node(item))
                continue
            list_type = get_list_type(item) or "bullet"
            level = get_indent(item) if flat else depth
            for deeper in [key for key in numbers if key > level]:
                del numbers[deeper]
            if list_type == "ordered":
                numbers[level] = numbers.get(level, 0) + 1
            number = numbers.get(level, 0)
            inline = [child for child in item.children if not _is_list(child)]
            content = renderer.join_children([renderer.render_node(child) for child in inline])
            lines.append(f"{options.indent_string * level}{_list_marker(list_type, number, options)}{content}")
            for nested in item.children:
                if _is_list(nested):
                    lines.append(render_list(nested, renderer, depth + 1))
        return "\n".join(lines)

    def render_code_container(node: TNode, renderer: Any) -> str:
        language = get_code_language(node.children[0]) if node.children else None
        lines = "\n".join(line.text_content() for line in node.children)
        return f"{options.fence}{language or ''}\n{lines}\n{options.fence}"

    def render_table(node: TNode, renderer: Any) -> str:
        rows = []
        for row in node.children:
            cells = [
                renderer.render_children(cell).replace("|", "\\|") for cell in row.children
            ]
            rows.append(cells)
        if not rows:
            return ""
        width = max(len(cells) for cells in rows)
        lines = []
        for index, cells in enumerate(rows):
            padded = cells + [""] * (width - len(cells))
            lines.append(f"| {' | '.join(padded)} |")
            if index == 0:
                lines.append(f"|{'|'.join([' --- '] * width)}|")
        return "\n".join(lines)

    def header(node: TNode, children: str, attrs: Any) -> str:
        level = get_header_level(node)
        return f"{'#' * level} {children}" if level else children

    def blockquote(node: TNode, children: str, attrs: Any) -> str:
        return "\n".join(f"> {line}" for line in children.split("\n"))

    def code_block(node: TNode, children: str, attrs: Any) -> str:
        return f"{options.fence}{get_code_language(node) or ''}\n{node.text_content()}\n{options.fence}"

    def list_item(node: TNode, children: str, attrs: Any) -> str:
        return f"{_list_marker(get_list_type(node) or 'bullet', 1, options)}{children}"

    def image(node: TNode, children: str, attrs: Any) -> str:
        markdown = f"![{get_alt(node) or ''}]({get_embed_source(node)})"
        href = get_link_href(node)
        return f"[{markdown}]({href})" if href else markdown

    def formula(node: TNode, children: str, attrs: Any) -> str:
        return node.data if isinstance(node.data, str) else str(node.data)

    def pass_through(content: str, value: Any, node: TNode, attrs: Any) -> str:
        return content

    marks = {
        "bold": lambda content, value, node, attrs: f"**{content}**",
        "italic": lambda content, value, node, attrs: f"_{content}_",
        "strike": lambda content, value, node, attrs: f"~~{content}~~",
        "code": lambda content, value, node, attrs: f"`{content}`",
        "link": lambda content, value, node, attrs: f"[{content}]({value})",
    }
    marks.update({name: pass_through for name in _PASS_THROUGH_MARKS})

    return RendererConfig(
        blocks={
            NodeType.PARAGRAPH.value: lambda node, children, attrs: children,
            NodeType.HEADER.value: header,
            NodeType.BLOCKQUOTE.value: blockquote,
            NodeType.CODE_BLOCK.value: code_block,
            NodeType.LIST_ITEM.value: list_item,
            "image": image,
            "video": lambda node, children, attrs: get_embed_source(node),
            "divider": lambda node, children, attrs: options.hr_string,
            "formula": formula,
            NodeType.TABLE_ROW.value: lambda node, children, attrs: children,
            NodeType.TABLE_CELL.value: lambda node, children, attrs: children,
        },
        marks=marks,
        mark_priorities=DEFAULT_MARK_PRIORITIES,
        node_overrides={
            NodeType.ROOT.value: render_root,
            NodeType.LIST.value: render_list,
            NodeType.CODE_BLOCK_CONTAINER.value: render_code_container,
            NodeType.TABLE.value: render_table,
            NodeType.LINE_BREAK.value: lambda node, renderer: "  \n",
        },
    )


class MarkdownRenderer(SimpleRenderer[str]):
    """
    Render a tree into Markdown.

    Usage:
        markdown = MarkdownRenderer().render(root)
        markdown = MarkdownRenderer(MarkdownOptions(bullet_char="-")).render(root)
        renderer = MarkdownRenderer().with_block("mention", lambda node, children, attrs: "@" + node.data["name"])
    """

    def __init__(self, options: Optional[MarkdownOptions] = None, config: Optional[RendererConfig] = None):
        """
        Initialize renderer.

        Args:
            options: Output options (defaults to :class:`MarkdownOptions`)
            config: Complete handler registry replacing the built-in one
        """
        self.options = options or MarkdownOptions()
        super().__init__(config if config is not None else build_markdown_config(self.options))

    def join_children(self, children: List[str]) -> str:
        return "".join(children)

    def render_text(self, text: str) -> str:
        return text
