"""
Delta parser.

Rebuilds block and inline structure from the flat operation stream of a
Delta. Text inserts are split on newlines; every newline closes the pending
inline content into a block whose type and attributes are decided by the
block attribute handlers of the :class:`ParserConfig`.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple
import logging

from ..exceptions import DeltaShapeError
from ..models.delta import Delta, coerce_delta
from ..models.node import (
    NodeType,
    TNode,
    make_block,
    make_embed,
    make_line_break,
    make_root,
    make_text,
)
from ..transformers.pipeline import Transformer, apply_transformers
from .config import ParserConfig, coerce_block_info

logger = logging.getLogger(__name__)


class _TreeBuilder:
    """Accumulates inline nodes and finished blocks for a single parse."""

    def __init__(self, config: ParserConfig):
        self.config = config
        self.blocks: List[TNode] = []
        self.inline_buffer: List[TNode] = []

    def build(self, delta: Delta) -> TNode:
        for op in delta.ops:
            if op.insert is None:
                continue
            if isinstance(op.insert, str):
                self._consume_text(op.insert, op.attributes)
            elif isinstance(op.insert, Mapping):
                self._consume_embed(op.insert, op.attributes)
            else:
                raise DeltaShapeError(
                    "Insert must be a string or an embed object",
                    details=type(op.insert).__name__,
                )

        if self.inline_buffer:
            self._flush(NodeType.PARAGRAPH.value, {})

        return make_root(self.blocks)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def _consume_text(self, text: str, attributes: Mapping[str, Any]) -> None:
        inline_attrs = self._inline_attributes(attributes)
        segments = text.split("\n")
        newline_count = len(segments) - 1

        block: Optional[Tuple[str, Dict[str, Any]]] = None
        for index, segment in enumerate(segments):
            if segment:
                self.inline_buffer.append(make_text(segment, inline_attrs))
            if index == newline_count:
                break

            if block is None:
                block = self._resolve_block(attributes)
            block_type, block_attrs = block

            is_last_newline = index == newline_count - 1
            if self._is_soft_break(block_type, block_attrs) and not is_last_newline:
                self.inline_buffer.append(make_line_break())
            else:
                self._flush(block_type, block_attrs)

    def _is_soft_break(self, block_type: str, block_attrs: Mapping[str, Any]) -> bool:
        return (
            self.config.soft_line_breaks
            and block_type == NodeType.PARAGRAPH.value
            and not block_attrs
        )

    def _inline_attributes(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            name: value
            for name, value in attributes.items()
            if not self.config.is_block_attribute(name)
        }

    def _resolve_block(self, attributes: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
        """
        Compute block type and attributes for a newline.

        The block type is overwritten by every handler that provides one, in
        attribute order; block attributes are merged cumulatively.
        """
        block_type: Optional[str] = None
        block_attrs: Dict[str, Any] = {}
        for name, value in attributes.items():
            handler = self.config.block_attributes.get(name)
            if handler is None:
                continue
            info = coerce_block_info(handler(value), name)
            if info.block_type:
                block_type = info.block_type
            block_attrs.update(info.block_attrs)
        return block_type or NodeType.PARAGRAPH.value, block_attrs

    # ------------------------------------------------------------------
    # Embeds
    # ------------------------------------------------------------------
    def _consume_embed(self, insert: Mapping[str, Any], attributes: Mapping[str, Any]) -> None:
        if not insert:
            raise DeltaShapeError("Embed insert must have exactly one key", details="got an empty object")
        embed_type, embed_data = next(iter(insert.items()))

        if self.config.is_block_embed(embed_type):
            if self.inline_buffer:
                self._flush(NodeType.PARAGRAPH.value, {})
            self.blocks.append(make_embed(embed_type, embed_data, attributes, is_inline=False))
            return

        self.inline_buffer.append(
            make_embed(embed_type, embed_data, self._inline_attributes(attributes), is_inline=True)
        )

    def _flush(self, block_type: str, block_attrs: Mapping[str, Any]) -> None:
        self.blocks.append(make_block(block_type, block_attrs, self.inline_buffer))
        self.inline_buffer = []


def parse_delta(delta: Any, config: Optional[ParserConfig] = None) -> TNode:
    """
    Parse a Delta into a document tree.

    Args:
        delta: :class:`Delta` or a mapping with an ``ops`` list
        config: Parser configuration (defaults to an empty configuration,
            in which every newline produces a paragraph)

    Returns:
        Root node of the parsed tree

    Raises:
        DeltaShapeError: if the Delta has no ``ops`` array or an embed
            object has no keys
    """
    parsed = coerce_delta(delta)
    builder = _TreeBuilder(config or ParserConfig())
    root = builder.build(parsed)
    logger.debug(f"Parsed {len(parsed)} ops into {len(root.children)} blocks")
    return root


class DeltaParser:
    """
    Fluent parser front-end.

    Usage:
        ast = DeltaParser(delta, config).use(list_nester).use(table_grouper).to_ast()
    """

    def __init__(self, delta: Any, config: Optional[ParserConfig] = None):
        """
        Initialize parser.

        Args:
            delta: Delta to parse
            config: Parser configuration
        """
        self.delta = delta
        self.config = config or ParserConfig()
        self.transformers: List[Transformer] = []

    def use(self, transformer: Transformer) -> "DeltaParser":
        """Register a transformer applied after parsing, in registration order."""
        self.transformers.append(transformer)
        return self

    def to_ast(self) -> TNode:
        """Parse the Delta and apply all registered transformers."""
        root = parse_delta(self.delta, self.config)
        return apply_transformers(root, self.transformers)
