"""Shared base for HTML string renderers."""

from __future__ import annotations

from typing import List, Optional

from ...models.node import TNode
from ..base_renderer import BaseRenderer
from ..config import TagBlock
from .escaping import escape_html, serialize_resolved_attrs
from .resolved_attrs import (
    EMPTY_RESOLVED_ATTRS,
    ResolvedAttrs,
    has_resolved_attrs,
    merge_resolved_attrs,
)

EMPTY_BLOCK_CONTENT = "<br/>"


class BaseHtmlRenderer(BaseRenderer[str, ResolvedAttrs]):
    """
    HTML renderer base: escapes text, concatenates children and serialises
    :class:`ResolvedAttrs`.

    Concrete renderers only supply a :class:`RendererConfig`.
    """

    def empty_attrs(self) -> ResolvedAttrs:
        return EMPTY_RESOLVED_ATTRS

    def merge_attrs(self, target: ResolvedAttrs, source: ResolvedAttrs) -> ResolvedAttrs:
        return merge_resolved_attrs(target, source)

    def has_attrs(self, attrs: ResolvedAttrs) -> bool:
        return has_resolved_attrs(attrs)

    def join_children(self, children: List[str]) -> str:
        return "".join(children)

    def render_text(self, text: str) -> str:
        return escape_html(text)

    def wrap_with_attrs(self, content: str, attrs: ResolvedAttrs) -> str:
        return f"<span{serialize_resolved_attrs(attrs)}>{content}</span>"

    def render_simple_tag(
        self, tag: str, content: str, attrs: Optional[ResolvedAttrs] = None
    ) -> str:
        return f"<{tag}{serialize_resolved_attrs(attrs)}>{content}</{tag}>"

    def render_block_from_descriptor(
        self,
        descriptor: TagBlock,
        node: TNode,
        children: str,
        attrs: ResolvedAttrs,
    ) -> str:
        tag = descriptor.resolve_tag(node)
        attr_string = serialize_resolved_attrs(attrs)
        if descriptor.self_closing:
            return f"<{tag}{attr_string}>"
        return f"<{tag}{attr_string}>{children or EMPTY_BLOCK_CONTENT}</{tag}>"
