"""
Models module for delta_render.

Contains the Delta operation types consumed by the parser and the immutable
document tree produced by it.
"""

from .delta import Delta, DeltaOp, coerce_delta
from .node import (
    NodeType,
    TNode,
    make_block,
    make_embed,
    make_line_break,
    make_root,
    make_text,
)

__all__ = [
    "Delta",
    "DeltaOp",
    "coerce_delta",
    "NodeType",
    "TNode",
    "make_block",
    "make_embed",
    "make_line_break",
    "make_root",
    "make_text",
]
