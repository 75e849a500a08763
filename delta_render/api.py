"""
High level API for delta_render.

Example:
    >>> from delta_render import parse_quill_delta, render_html
    >>>
    >>> delta = {"ops": [{"insert": "Hello"}, {"insert": "\\n", "attributes": {"header": 1}}]}
    >>> root = parse_quill_delta(delta)
    >>> render_html(delta)
    '<h1>Hello</h1>'
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from .models.node import TNode
from .parser.block_attributes import DEFAULT_BLOCK_ATTRIBUTES, DEFAULT_BLOCK_EMBEDS
from .parser.config import BlockAttributeHandler, ParserConfig
from .parser.delta_parser import parse_delta
from .renderers.html.quill_html_renderer import QuillHtmlRenderer
from .renderers.markdown_renderer import MarkdownOptions, MarkdownRenderer
from .renderers.text_renderer import TextRenderer
from .transformers.code_block_grouper import code_block_grouper
from .transformers.flat_list_grouper import flat_list_grouper
from .transformers.pipeline import STANDARD_TRANSFORMERS, Transformer, apply_transformers
from .transformers.table_grouper import table_grouper

logger = logging.getLogger(__name__)

__all__ = [
    "build_parser_config",
    "parse_quill_delta",
    "render_html",
    "render_markdown",
    "render_text",
]

FLAT_TRANSFORMERS = (flat_list_grouper, table_grouper, code_block_grouper)


def build_parser_config(
    extra_block_attributes: Optional[Mapping[str, BlockAttributeHandler]] = None,
    block_embeds: Optional[Iterable[str]] = None,
    soft_line_breaks: bool = False,
) -> ParserConfig:
    """Parser configuration with the default vocabulary plus ``extra_block_attributes``."""
    block_attributes = dict(DEFAULT_BLOCK_ATTRIBUTES)
    block_attributes.update(extra_block_attributes or {})
    return ParserConfig(
        block_attributes=block_attributes,
        block_embeds=frozenset(DEFAULT_BLOCK_EMBEDS if block_embeds is None else block_embeds),
        soft_line_breaks=soft_line_breaks,
    )


def parse_quill_delta(
    delta: Any,
    extra_block_attributes: Optional[Mapping[str, BlockAttributeHandler]] = None,
    block_embeds: Optional[Iterable[str]] = None,
    soft_line_breaks: bool = False,
    flat_lists: bool = False,
    extra_transformers: Sequence[Transformer] = (),
    transformers: Optional[Sequence[Transformer]] = None,
) -> TNode:
    """
    Parse a Delta with the default vocabulary and the standard transformers.

    Args:
        delta: :class:`Delta` or a mapping with an ``ops`` list
        extra_block_attributes: Handlers merged over ``DEFAULT_BLOCK_ATTRIBUTES``
        block_embeds: Embed types rendered as standalone blocks (default: ``video``)
        soft_line_breaks: Keep newlines inside one text insert as inline line breaks
        flat_lists: Group list items into flat lists instead of nesting them
        extra_transformers: Transformers appended after the standard ones
        transformers: Replace the whole pipeline (``extra_transformers`` is then ignored)

    Returns:
        Root node of the transformed tree

    Raises:
        DeltaShapeError: if the Delta does not have the expected shape
    """
    config = build_parser_config(extra_block_attributes, block_embeds, soft_line_breaks)
    root = parse_delta(delta, config)

    if transformers is None:
        standard = FLAT_TRANSFORMERS if flat_lists else STANDARD_TRANSFORMERS
        transformers = tuple(standard) + tuple(extra_transformers)

    logger.debug(f"Applying {len(transformers)} transformers (flat_lists={flat_lists})")
    return apply_transformers(root, transformers)


def render_html(delta: Any, **options: Any) -> str:
    """Render a Delta to the reference editor's HTML (lists are kept flat, as the editor does)."""
    options.setdefault("flat_lists", True)
    return QuillHtmlRenderer().render(parse_quill_delta(delta, **options))


def render_markdown(delta: Any, markdown_options: Optional[MarkdownOptions] = None, **options: Any) -> str:
    """Render a Delta to Markdown."""
    return MarkdownRenderer(markdown_options).render(parse_quill_delta(delta, **options))


def render_text(delta: Any, **options: Any) -> str:
    """Render a Delta to plain text."""
    return TextRenderer().render(parse_quill_delta(delta, **options))
