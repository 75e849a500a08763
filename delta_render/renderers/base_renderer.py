"""
Generic tree renderer.

:class:`BaseRenderer` walks a document tree and dispatches every node to the
handlers of its :class:`RendererConfig`. Inline formatting is applied in two
phases: attributor contributions are collected into a single ``Attrs`` value,
then element marks are folded around the text from the lowest priority
(innermost) to the highest (outermost). Only the innermost mark receives the
collected attributes.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Any, Generic, List, Optional, Tuple, TypeVar

from ..models.node import NodeType, TNode
from .config import (
    AttributorHandler,
    BlockAttributeResolver,
    MarkSpec,
    NodeOverride,
    RendererConfig,
    TagBlock,
    TagMark,
    UnknownNodeHandler,
    normalize_block,
    normalize_mark,
)

logger = logging.getLogger(__name__)

Output = TypeVar("Output")
Attrs = TypeVar("Attrs")

R = TypeVar("R", bound="BaseRenderer")


class BaseRenderer(ABC, Generic[Output, Attrs]):
    """
    Abstract base class for all renderers.

    Subclasses always implement :meth:`join_children` and :meth:`render_text`.
    Renderers that compose attributes (HTML) also implement the ``Attrs``
    protocol: :meth:`empty_attrs`, :meth:`merge_attrs`, :meth:`has_attrs`,
    :meth:`wrap_with_attrs`, :meth:`render_simple_tag` and
    :meth:`render_block_from_descriptor`.

    Renderers are immutable: the ``with_*`` methods return a new renderer of
    the same class and never touch the original.
    """

    def __init__(self, config: Optional[RendererConfig] = None):
        """
        Initialize renderer.

        Args:
            config: Handler registry (an empty registry renders every block
                as its children)
        """
        self.config: RendererConfig = config if config is not None else RendererConfig()

    def render(self, node: TNode) -> Output:
        """Render a tree, typically starting from the root node."""
        return self.render_node(node)

    # ------------------------------------------------------------------
    # Immutable extension API
    # ------------------------------------------------------------------
    def _derive(self: R, **changes: Any) -> R:
        clone = copy.copy(self)
        clone.config = replace(self.config, **changes)
        return clone

    def with_block(self: R, node_type: str, handler: Any) -> R:
        """Return a renderer with a block handler added or replaced."""
        blocks = dict(self.config.blocks)
        blocks[node_type] = normalize_block(node_type, handler)
        return self._derive(blocks=blocks)

    def with_mark(self: R, name: str, handler: Any) -> R:
        """Return a renderer with a mark handler added or replaced."""
        marks = dict(self.config.marks)
        marks[name] = normalize_mark(name, handler)
        return self._derive(marks=marks)

    def with_attributor(self: R, name: str, handler: AttributorHandler) -> R:
        """Return a renderer with an attributor added or replaced."""
        attributors = dict(self.config.attributors)
        attributors[name] = handler
        return self._derive(attributors=attributors)

    def with_mark_priority(self: R, name: str, priority: int) -> R:
        """Return a renderer with a mark priority set or replaced."""
        priorities = dict(self.config.mark_priorities)
        priorities[name] = priority
        return self._derive(mark_priorities=priorities)

    def with_block_attribute_resolver(self: R, resolver: BlockAttributeResolver) -> R:
        """Return a renderer with an additional block attribute resolver."""
        return self._derive(
            block_attribute_resolvers=self.config.block_attribute_resolvers + (resolver,)
        )

    def with_node_override(self: R, node_type: str, handler: NodeOverride) -> R:
        """Return a renderer that renders ``node_type`` with ``handler(node, renderer)``."""
        overrides = dict(self.config.node_overrides)
        overrides[node_type] = handler
        return self._derive(node_overrides=overrides)

    def with_unknown_node_handler(self: R, handler: UnknownNodeHandler) -> R:
        """Return a renderer using ``handler(node, rendered_children)`` for unknown nodes."""
        return self._derive(on_unknown_node=handler)

    # ------------------------------------------------------------------
    # Subclass protocol
    # ------------------------------------------------------------------
    @abstractmethod
    def join_children(self, children: List[Output]) -> Output:
        """Combine rendered children into a single output."""

    @abstractmethod
    def render_text(self, text: str) -> Output:
        """Render a plain text leaf (escaping included)."""

    @abstractmethod
    def empty_attrs(self) -> Attrs:
        """Identity value of the ``Attrs`` type."""

    @abstractmethod
    def merge_attrs(self, target: Attrs, source: Attrs) -> Attrs:
        """Merge two ``Attrs`` values; ``source`` wins on conflicts."""

    @abstractmethod
    def has_attrs(self, attrs: Attrs) -> bool:
        """Whether ``attrs`` carries anything."""

    @abstractmethod
    def wrap_with_attrs(self, content: Output, attrs: Attrs) -> Output:
        """Wrap content in a default element carrying ``attrs``."""

    @abstractmethod
    def render_simple_tag(self, tag: str, content: Output, attrs: Optional[Attrs] = None) -> Output:
        """Render a declarative mark around ``content``."""

    @abstractmethod
    def render_block_from_descriptor(
        self,
        descriptor: TagBlock,
        node: TNode,
        children: Output,
        attrs: Attrs,
    ) -> Output:
        """Render a declarative block."""

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def render_node(self, node: TNode) -> Output:
        override = self.config.node_overrides.get(node.type)
        if override is not None:
            return override(node, self)

        if node.type == NodeType.ROOT.value:
            return self.render_children(node)

        if node.type == NodeType.TEXT.value:
            return self.render_text_node(node)

        block = self.config.blocks.get(node.type)
        if block is not None:
            children = self.render_children(node)
            attrs = self.resolve_block_attributes(node)
            if isinstance(block, TagBlock):
                return self.render_block_from_descriptor(block, node, children, attrs)
            return block.render(node, children, attrs)

        children = self.render_children(node)
        if self.config.on_unknown_node is not None:
            return self.config.on_unknown_node(node, children)

        logger.warning(f"No handler for node type '{node.type}', rendering children only")
        return children

    def render_children(self, node: TNode) -> Output:
        return self.join_children([self.render_node(child) for child in node.children])

    def render_text_node(self, node: TNode) -> Output:
        text = node.data if isinstance(node.data, str) else ""
        output = self.render_text(text)

        collected = self._collect_attributor_attrs(node)
        has_collected = self.has_attrs(collected)

        marks = self._applicable_marks(node)
        # Stable sort keeps attribute order for equal priorities.
        marks.sort(key=lambda entry: entry[2])

        if marks:
            for index, (mark, value, _priority) in enumerate(marks):
                attrs = collected if index == 0 and has_collected else None
                if isinstance(mark, TagMark):
                    output = self.render_simple_tag(mark.resolve_tag(value), output, attrs)
                else:
                    output = mark.render(output, value, node, attrs)
        elif has_collected:
            output = self.wrap_with_attrs(output, collected)

        return output

    def resolve_block_attributes(self, node: TNode) -> Attrs:
        """Run every block attribute resolver and merge the contributions."""
        return self._merge_contributions(
            resolver(node) for resolver in self.config.block_attribute_resolvers
        )

    def _collect_attributor_attrs(self, node: TNode) -> Attrs:
        attributors = self.config.attributors
        return self._merge_contributions(
            attributors[name](value, node)
            for name, value in node.attributes.items()
            if name in attributors
        )

    def _merge_contributions(self, contributions: Any) -> Attrs:
        result = self.empty_attrs()
        for contribution in contributions:
            if self.has_attrs(contribution):
                result = self.merge_attrs(result, contribution) if self.has_attrs(result) else contribution
        return result

    def _applicable_marks(self, node: TNode) -> List[Tuple[MarkSpec, Any, int]]:
        marks = self.config.marks
        priorities = self.config.mark_priorities
        return [
            (marks[name], value, priorities.get(name, 0))
            for name, value in node.attributes.items()
            if name in marks
        ]
