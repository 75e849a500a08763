"""
List nesting transformer.

The parser emits every list line as a flat ``list-item`` block carrying a
``list`` type and an optional ``indent``. This pass rebuilds the nested
``list``/``list-item`` structure in four phases:

1. consecutive items of the same type family and indent form a group
2. consecutive groups form a section
3. inside a section, deeper groups are attached to the last item of the
   nearest preceding group with a lower indent (deepest indent first)
4. consecutive top-level groups of the same type family are merged

Only the direct children of the root are considered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

from ..models.attributes import get_indent, get_list_type
from ..models.node import NodeType, TNode, make_block
from .grouping import group_consecutive_while
from .node_queries import has_higher_indent, is_list_item, is_same_list_type

logger = logging.getLogger(__name__)


@dataclass
class _ListItem:
    node: TNode
    inner: Optional["_ListGroup"] = None


@dataclass
class _ListGroup:
    items: List[_ListItem] = field(default_factory=list)

    @property
    def head(self) -> TNode:
        return self.items[0].node

    @property
    def indent(self) -> int:
        return get_indent(self.head)


_Entry = Union[TNode, _ListGroup]


def list_nester(root: TNode) -> TNode:
    """Nest flat ``list-item`` blocks of ``root`` into ``list`` containers."""
    return root.with_children(nest_lists(root.children))


def nest_lists(children: Sequence[TNode]) -> List[TNode]:
    """Run the four nesting phases over a sequence of sibling blocks."""
    entries = _group_flat_items(children)

    nested: List[_Entry] = []
    for section in group_consecutive_while(
        entries, lambda curr, prev: isinstance(curr, _ListGroup) and isinstance(prev, _ListGroup)
    ):
        if isinstance(section[0], _ListGroup):
            nested.extend(_nest_section(section))
        else:
            nested.extend(section)

    merged = _merge_same_type_groups(nested)
    result = [_group_to_node(entry) if isinstance(entry, _ListGroup) else entry for entry in merged]

    list_count = sum(1 for entry in merged if isinstance(entry, _ListGroup))
    if list_count:
        logger.debug(f"Nested list items into {list_count} top-level lists")
    return result


# ----------------------------------------------------------------------
# Phase 1: flat grouping
# ----------------------------------------------------------------------
def _group_flat_items(children: Sequence[TNode]) -> List[_Entry]:
    def same_group(curr: TNode, prev: TNode) -> bool:
        return (
            is_list_item(curr)
            and is_list_item(prev)
            and is_same_list_type(curr, prev)
            and get_indent(curr) == get_indent(prev)
        )

    entries: List[_Entry] = []
    for run in group_consecutive_while(children, same_group):
        if is_list_item(run[0]):
            entries.append(_ListGroup([_ListItem(node) for node in run]))
        else:
            entries.extend(run)
    return entries


# ----------------------------------------------------------------------
# Phase 3: indent nesting
# ----------------------------------------------------------------------
def _nest_section(section: List[_ListGroup]) -> List[_ListGroup]:
    top_level = list(section)

    by_indent: Dict[int, List[_ListGroup]] = {}
    for group in top_level:
        if group.indent > 0:
            by_indent.setdefault(group.indent, []).append(group)

    for indent in sorted(by_indent, reverse=True):
        for group in by_indent[indent]:
            position = _index_of(top_level, group)
            if _place_under_parent(group, top_level[:position]):
                del top_level[position]

    return top_level


def _index_of(groups: List[_ListGroup], target: _ListGroup) -> int:
    # Identity lookup; dataclass equality would compare contents.
    for index, group in enumerate(groups):
        if group is target:
            return index
    raise ValueError("list group is not part of the section")


def _place_under_parent(target: _ListGroup, candidates: List[_ListGroup]) -> bool:
    for candidate in reversed(candidates):
        if has_higher_indent(target.head, candidate.head):
            parent = candidate.items[-1]
            if parent.inner is None:
                parent.inner = target
            else:
                parent.inner.items.extend(target.items)
            return True
    return False


# ----------------------------------------------------------------------
# Phase 4: root-level merge
# ----------------------------------------------------------------------
def _merge_same_type_groups(entries: List[_Entry]) -> List[_Entry]:
    def same_type(curr: _Entry, prev: _Entry) -> bool:
        return (
            isinstance(curr, _ListGroup)
            and isinstance(prev, _ListGroup)
            and is_same_list_type(curr.head, prev.head)
        )

    merged: List[_Entry] = []
    for run in group_consecutive_while(entries, same_type):
        if len(run) == 1:
            merged.append(run[0])
        else:
            merged.append(_ListGroup([item for group in run for item in group.items]))
    return merged


# ----------------------------------------------------------------------
# Conversion back to nodes
# ----------------------------------------------------------------------
def _group_to_node(group: _ListGroup) -> TNode:
    return make_block(
        NodeType.LIST.value,
        {"list": get_list_type(group.head)},
        [_item_to_node(item) for item in group.items],
    )


def _item_to_node(item: _ListItem) -> TNode:
    if item.inner is None:
        return item.node
    return item.node.with_children(item.node.children + (_group_to_node(item.inner),))
