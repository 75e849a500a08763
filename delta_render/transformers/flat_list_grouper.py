"""Flat list grouping: one ``list`` container per run of list items, no nesting."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..models.node import NodeType, TNode, make_block
from .grouping import group_consecutive_while
from .node_queries import is_list_item

logger = logging.getLogger(__name__)


def flat_list_grouper(root: TNode) -> TNode:
    """
    Wrap every run of consecutive ``list-item`` blocks in a single ``list``.

    Items keep their ``list`` and ``indent`` attributes; visual nesting is
    left to the renderer (``ql-indent-N`` classes in the Quill HTML output).
    """
    return root.with_children(group_flat_lists(root.children))


def group_flat_lists(children: Sequence[TNode]) -> List[TNode]:
    result: List[TNode] = []
    for run in group_consecutive_while(
        children, lambda curr, prev: is_list_item(curr) and is_list_item(prev)
    ):
        if is_list_item(run[0]):
            result.append(make_block(NodeType.LIST.value, {}, run))
        else:
            result.extend(run)
    logger.debug(f"Flat list grouping produced {len(result)} blocks from {len(children)}")
    return result
