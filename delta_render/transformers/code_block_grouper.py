"""Code block grouping transformer."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..models.node import NodeType, TNode, make_block
from .grouping import group_consecutive_while
from .node_queries import is_code_block

logger = logging.getLogger(__name__)


def code_block_grouper(root: TNode) -> TNode:
    """Wrap consecutive ``code-block`` lines in a ``code-block-container``.

    Each line keeps its own ``code-block`` attribute (the language).
    """
    return root.with_children(group_code_blocks(root.children))


def group_code_blocks(children: Sequence[TNode]) -> List[TNode]:
    result: List[TNode] = []
    for run in group_consecutive_while(
        children, lambda curr, prev: is_code_block(curr) and is_code_block(prev)
    ):
        if is_code_block(run[0]):
            logger.debug(f"Grouped {len(run)} code lines into a container")
            result.append(make_block(NodeType.CODE_BLOCK_CONTAINER.value, {}, run))
        else:
            result.extend(run)
    return result
