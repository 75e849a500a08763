"""Document tree node used by the parser, transformers and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple


class NodeType(str, Enum):
    """Node types produced by the parser and the standard transformers.

    Any other string is a valid node type as well (embeds such as ``image``
    or ``video``, caller-defined blocks).
    """

    ROOT = "root"
    TEXT = "text"
    PARAGRAPH = "paragraph"
    HEADER = "header"
    BLOCKQUOTE = "blockquote"
    CODE_BLOCK = "code-block"
    CODE_BLOCK_CONTAINER = "code-block-container"
    LIST = "list"
    LIST_ITEM = "list-item"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    LINE_BREAK = "line-break"


EMPTY_ATTRIBUTES: Mapping[str, Any] = MappingProxyType({})


def _freeze(attributes: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    if not attributes:
        return EMPTY_ATTRIBUTES
    if isinstance(attributes, MappingProxyType):
        return attributes
    return MappingProxyType(dict(attributes))


@dataclass(frozen=True)
class TNode:
    """Immutable document tree node.

    ``attributes`` is exposed as a read-only mapping and ``children`` as a
    tuple, so a tree can be shared between pipeline stages without copying.
    """

    type: str
    attributes: Mapping[str, Any] = field(default_factory=lambda: EMPTY_ATTRIBUTES)
    children: Tuple["TNode", ...] = ()
    data: Any = None
    is_inline: bool = False

    def __post_init__(self) -> None:
        node_type = self.type.value if isinstance(self.type, NodeType) else self.type
        object.__setattr__(self, "type", node_type)
        object.__setattr__(self, "attributes", _freeze(self.attributes))
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_text(self) -> bool:
        return self.type == NodeType.TEXT.value

    @property
    def is_root(self) -> bool:
        return self.type == NodeType.ROOT.value

    def walk(self) -> Iterator["TNode"]:
        """Iterate over this node and all descendants, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def text_content(self) -> str:
        """Concatenate the text of all text descendants in document order."""
        return "".join(
            node.data for node in self.walk() if node.is_text and isinstance(node.data, str)
        )

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------
    def with_children(self, children: Sequence["TNode"]) -> "TNode":
        """Return a copy of this node with ``children`` replaced."""
        return replace(self, children=tuple(children))

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        """Convert node to its JSON shape."""
        result: Dict[str, Any] = {
            "type": self.type,
            "attributes": dict(self.attributes),
            "children": [child.to_dict() for child in self.children],
            "isInline": self.is_inline,
        }
        if self.data is not None:
            result["data"] = dict(self.data) if isinstance(self.data, Mapping) else self.data
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TNode":
        """Create node from its JSON shape."""
        return cls(
            type=str(data["type"]),
            attributes=data.get("attributes") or {},
            children=tuple(cls.from_dict(child) for child in data.get("children") or ()),
            data=data.get("data"),
            is_inline=bool(data.get("isInline", False)),
        )

    def __repr__(self) -> str:
        if self.is_text:
            return f"TNode(text={self.data!r}, attributes={dict(self.attributes)!r})"
        return (
            f"TNode(type={self.type!r}, attributes={dict(self.attributes)!r}, "
            f"children={len(self.children)})"
        )


# ----------------------------------------------------------------------
# Factories
# ----------------------------------------------------------------------
def make_root(children: Sequence[TNode] = ()) -> TNode:
    return TNode(type=NodeType.ROOT, children=tuple(children))


def make_text(text: str, attributes: Optional[Mapping[str, Any]] = None) -> TNode:
    return TNode(type=NodeType.TEXT, attributes=attributes or {}, data=text, is_inline=True)


def make_block(
    node_type: str,
    attributes: Optional[Mapping[str, Any]] = None,
    children: Sequence[TNode] = (),
) -> TNode:
    return TNode(type=node_type, attributes=attributes or {}, children=tuple(children))


def make_embed(
    embed_type: str,
    data: Any,
    attributes: Optional[Mapping[str, Any]] = None,
    is_inline: bool = True,
) -> TNode:
    return TNode(type=embed_type, attributes=attributes or {}, data=data, is_inline=is_inline)


def make_line_break() -> TNode:
    return TNode(type=NodeType.LINE_BREAK, is_inline=True)
