"""Transformer pipeline helpers."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Tuple

from ..models.node import TNode
from .code_block_grouper import code_block_grouper
from .list_nester import list_nester
from .table_grouper import table_grouper

logger = logging.getLogger(__name__)

Transformer = Callable[[TNode], TNode]


def apply_transformers(root: TNode, transformers: Iterable[Transformer]) -> TNode:
    """
    Apply transformers left to right, each receiving the previous output.

    Args:
        root: Root node produced by the parser
        transformers: Transformers in application order

    Returns:
        Final root node (``root`` itself when no transformer is given)
    """
    current = root
    for transformer in transformers:
        logger.debug(f"Applying transformer {getattr(transformer, '__name__', transformer)!r}")
        current = transformer(current)
    return current


def compose_transformers(*transformers: Transformer) -> Transformer:
    """Combine several transformers into one."""
    chain = tuple(transformers)

    def composed(root: TNode) -> TNode:
        return apply_transformers(root, chain)

    composed.__name__ = "+".join(getattr(t, "__name__", "transformer") for t in chain) or "identity"
    return composed


STANDARD_TRANSFORMERS: Tuple[Transformer, ...] = (list_nester, table_grouper, code_block_grouper)
