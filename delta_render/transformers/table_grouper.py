"""Table grouping transformer."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..models.node import NodeType, TNode, make_block
from .grouping import group_consecutive_while
from .node_queries import is_same_row, is_table_cell

logger = logging.getLogger(__name__)


def table_grouper(root: TNode) -> TNode:
    """
    Wrap consecutive ``table-cell`` blocks into ``table > table-row > table-cell``.

    Cells carry their row id in the ``table`` attribute. Adjacent cells with
    the same row id share a row; a row id that reappears after a different
    one starts a new row.
    """
    return root.with_children(group_tables(root.children))


def group_tables(children: Sequence[TNode]) -> List[TNode]:
    result: List[TNode] = []
    tables = 0
    for run in group_consecutive_while(
        children, lambda curr, prev: is_table_cell(curr) and is_table_cell(prev)
    ):
        if is_table_cell(run[0]):
            result.append(_make_table(run))
            tables += 1
        else:
            result.extend(run)
    if tables:
        logger.debug(f"Grouped table cells into {tables} tables")
    return result


def _make_table(cells: Sequence[TNode]) -> TNode:
    rows = [
        make_block(NodeType.TABLE_ROW.value, {}, row)
        for row in group_consecutive_while(cells, is_same_row)
    ]
    return make_block(NodeType.TABLE.value, {}, rows)
