"""Renderer base for output formats without collected attributes."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from ..models.node import TNode
from .base_renderer import BaseRenderer
from .config import TagBlock

Output = TypeVar("Output")


class SimpleRenderer(BaseRenderer[Output, None], Generic[Output]):
    """
    Base class for renderers that have no notion of collected attributes
    (Markdown, plain text).

    Only :meth:`join_children` and :meth:`render_text` remain abstract.
    Declarative tag marks and tag blocks render their content unchanged;
    register function handlers instead.
    """

    def empty_attrs(self) -> None:
        return None

    def merge_attrs(self, target: Any, source: Any) -> Any:
        return source

    def has_attrs(self, attrs: Any) -> bool:
        return False

    def wrap_with_attrs(self, content: Output, attrs: Any) -> Output:
        return content

    def render_simple_tag(self, tag: str, content: Output, attrs: Optional[Any] = None) -> Output:
        return content

    def render_block_from_descriptor(
        self,
        descriptor: TagBlock,
        node: TNode,
        children: Output,
        attrs: Any,
    ) -> Output:
        return children
