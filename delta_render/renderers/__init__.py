"""
Renderers for delta_render.

:class:`BaseRenderer` is the generic engine; the other classes are ready to
use renderers built on it.
"""

from .base_renderer import BaseRenderer
from .config import CustomBlock, CustomMark, RendererConfig, TagBlock, TagMark
from .html import BaseHtmlRenderer, QuillHtmlRenderer, ResolvedAttrs
from .mark_priorities import DEFAULT_MARK_PRIORITIES, QUILL_MARK_PRIORITIES
from .markdown_renderer import MarkdownOptions, MarkdownRenderer
from .simple_renderer import SimpleRenderer
from .text_renderer import TextRenderer

__all__ = [
    "BaseRenderer",
    "CustomBlock",
    "CustomMark",
    "RendererConfig",
    "TagBlock",
    "TagMark",
    "BaseHtmlRenderer",
    "QuillHtmlRenderer",
    "ResolvedAttrs",
    "DEFAULT_MARK_PRIORITIES",
    "QUILL_MARK_PRIORITIES",
    "MarkdownOptions",
    "MarkdownRenderer",
    "SimpleRenderer",
    "TextRenderer",
]
