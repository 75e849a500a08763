"""Renderer configuration values and handler descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, Optional, Tuple, TypeVar, Union

from ..exceptions import ConfigurationError
from ..models.node import TNode

Output = TypeVar("Output")
Attrs = TypeVar("Attrs")

BlockHandler = Callable[[TNode, Any, Any], Any]
MarkHandler = Callable[[Any, Any, TNode, Any], Any]
AttributorHandler = Callable[[Any, TNode], Any]
BlockAttributeResolver = Callable[[TNode], Any]
NodeOverride = Callable[[TNode, Any], Any]
UnknownNodeHandler = Callable[[TNode, Any], Any]


# ----------------------------------------------------------------------
# Block descriptors
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class TagBlock:
    """Declarative block: render children inside ``tag``.

    ``tag`` may be a string or a callable resolving the tag from the node.
    """

    tag: Union[str, Callable[[TNode], str]]
    self_closing: bool = False

    def resolve_tag(self, node: TNode) -> str:
        return self.tag(node) if callable(self.tag) else self.tag


@dataclass(frozen=True)
class CustomBlock:
    """Function block handler ``(node, rendered_children, resolved_attrs) -> Output``."""

    render: BlockHandler


BlockSpec = Union[TagBlock, CustomBlock]


# ----------------------------------------------------------------------
# Mark descriptors
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class TagMark:
    """Declarative mark: wrap content in ``tag`` (string or ``(value) -> str``)."""

    tag: Union[str, Callable[[Any], str]]

    def resolve_tag(self, value: Any) -> str:
        return self.tag(value) if callable(self.tag) else self.tag


@dataclass(frozen=True)
class CustomMark:
    """Function mark handler ``(content, value, node, collected_attrs) -> Output``."""

    render: MarkHandler


MarkSpec = Union[TagMark, CustomMark]


def normalize_block(name: str, handler: Any) -> BlockSpec:
    """Accept a descriptor or a bare callable for a block handler."""
    if isinstance(handler, (TagBlock, CustomBlock)):
        return handler
    if callable(handler):
        return CustomBlock(handler)
    raise ConfigurationError(f"Invalid block handler for '{name}'", details=repr(handler))


def normalize_mark(name: str, handler: Any) -> MarkSpec:
    """Accept a descriptor or a bare callable for a mark handler."""
    if isinstance(handler, (TagMark, CustomMark)):
        return handler
    if callable(handler):
        return CustomMark(handler)
    raise ConfigurationError(f"Invalid mark handler for '{name}'", details=repr(handler))


def _require_callable(kind: str, name: str, handler: Any) -> Any:
    if not callable(handler):
        raise ConfigurationError(f"{kind} for '{name}' is not callable", details=repr(handler))
    return handler


@dataclass(frozen=True)
class RendererConfig(Generic[Output, Attrs]):
    """
    Immutable handler registry of a renderer.

    Attributes:
        blocks: Block handlers keyed by node type
        marks: Element mark handlers keyed by inline attribute name
        attributors: Handlers turning an inline attribute into renderer
            attributes attached to the innermost element mark
        mark_priorities: Nesting priority per mark (higher wraps outer,
            missing marks default to 0)
        block_attribute_resolvers: Resolvers whose results are merged, in
            order, into the attributes passed to every block handler
        node_overrides: Handlers ``(node, renderer)`` consulted before any
            other lookup
        on_unknown_node: Fallback ``(node, rendered_children)`` for nodes
            without a block handler
    """

    blocks: Mapping[str, BlockSpec] = field(default_factory=dict)
    marks: Mapping[str, MarkSpec] = field(default_factory=dict)
    attributors: Mapping[str, AttributorHandler] = field(default_factory=dict)
    mark_priorities: Mapping[str, int] = field(default_factory=dict)
    block_attribute_resolvers: Tuple[BlockAttributeResolver, ...] = ()
    node_overrides: Mapping[str, NodeOverride] = field(default_factory=dict)
    on_unknown_node: Optional[UnknownNodeHandler] = None

    def __post_init__(self) -> None:
        blocks = {name: normalize_block(name, h) for name, h in self.blocks.items()}
        marks = {name: normalize_mark(name, h) for name, h in self.marks.items()}
        attributors = {
            name: _require_callable("Attributor", name, h) for name, h in self.attributors.items()
        }
        overrides = {
            name: _require_callable("Node override", name, h)
            for name, h in self.node_overrides.items()
        }
        resolvers = tuple(self.block_attribute_resolvers)
        for index, resolver in enumerate(resolvers):
            _require_callable("Block attribute resolver", str(index), resolver)
        if self.on_unknown_node is not None:
            _require_callable("Unknown node handler", "*", self.on_unknown_node)

        object.__setattr__(self, "blocks", MappingProxyType(blocks))
        object.__setattr__(self, "marks", MappingProxyType(marks))
        object.__setattr__(self, "attributors", MappingProxyType(attributors))
        object.__setattr__(self, "mark_priorities", MappingProxyType(dict(self.mark_priorities)))
        object.__setattr__(self, "block_attribute_resolvers", resolvers)
        object.__setattr__(self, "node_overrides", MappingProxyType(overrides))
