"""Node predicates used by the structural transformers."""

from __future__ import annotations

from typing import Optional

from ..models.attributes import get_indent, get_list_type, get_table_row
from ..models.node import NodeType, TNode

CHECK_LIST_TYPES = frozenset({"checked", "unchecked"})


def is_list_item(node: TNode) -> bool:
    return node.type == NodeType.LIST_ITEM.value


def is_table_cell(node: TNode) -> bool:
    return node.type == NodeType.TABLE_CELL.value


def is_code_block(node: TNode) -> bool:
    return node.type == NodeType.CODE_BLOCK.value


def list_family(node: TNode) -> str:
    """List type with ``checked``/``unchecked`` collapsed into ``check``."""
    list_type = get_list_type(node)
    return "check" if list_type in CHECK_LIST_TYPES else list_type


def is_same_list_type(a: TNode, b: TNode) -> bool:
    family_a = list_family(a)
    family_b = list_family(b)
    if not family_a or not family_b:
        return False
    return family_a == family_b


def has_higher_indent(a: TNode, b: TNode) -> bool:
    return get_indent(a) > get_indent(b)


def get_row_id(node: TNode) -> Optional[str]:
    return get_table_row(node)


def is_same_row(a: TNode, b: TNode) -> bool:
    return is_table_cell(a) and is_table_cell(b) and get_row_id(a) == get_row_id(b)
