"""
delta_render - turn rich-text Deltas into document trees and render them.

Main Components:
- Parser: flat operation stream to document tree
- Transformers: list nesting, table and code block grouping
- Renderers: generic rendering engine plus HTML, Markdown and text renderers
- API: one-call helpers (parse_quill_delta, render_html, ...)
"""

__version__ = "0.1.0"

from .exceptions import ConfigurationError, DeltaRenderError, DeltaShapeError, RenderingError
from .models import Delta, DeltaOp, NodeType, TNode
from .parser import (
    DEFAULT_BLOCK_ATTRIBUTES,
    DEFAULT_BLOCK_EMBEDS,
    BlockInfo,
    DeltaParser,
    ParserConfig,
    parse_delta,
)
from .transformers import (
    STANDARD_TRANSFORMERS,
    apply_transformers,
    code_block_grouper,
    compose_transformers,
    flat_list_grouper,
    group_consecutive_while,
    list_nester,
    table_grouper,
)
from .renderers import (
    DEFAULT_MARK_PRIORITIES,
    BaseHtmlRenderer,
    BaseRenderer,
    CustomBlock,
    CustomMark,
    MarkdownOptions,
    MarkdownRenderer,
    QuillHtmlRenderer,
    RendererConfig,
    ResolvedAttrs,
    SimpleRenderer,
    TagBlock,
    TagMark,
    TextRenderer,
)
from .api import parse_quill_delta, render_html, render_markdown, render_text

__all__ = [
    "__version__",
    "ConfigurationError",
    "DeltaRenderError",
    "DeltaShapeError",
    "RenderingError",
    "Delta",
    "DeltaOp",
    "NodeType",
    "TNode",
    "DEFAULT_BLOCK_ATTRIBUTES",
    "DEFAULT_BLOCK_EMBEDS",
    "BlockInfo",
    "DeltaParser",
    "ParserConfig",
    "parse_delta",
    "STANDARD_TRANSFORMERS",
    "apply_transformers",
    "code_block_grouper",
    "compose_transformers",
    "flat_list_grouper",
    "group_consecutive_while",
    "list_nester",
    "table_grouper",
    "DEFAULT_MARK_PRIORITIES",
    "BaseHtmlRenderer",
    "BaseRenderer",
    "CustomBlock",
    "CustomMark",
    "MarkdownOptions",
    "MarkdownRenderer",
    "QuillHtmlRenderer",
    "RendererConfig",
    "ResolvedAttrs",
    "SimpleRenderer",
    "TagBlock",
    "TagMark",
    "TextRenderer",
    "parse_quill_delta",
    "render_html",
    "render_markdown",
    "render_text",
]
