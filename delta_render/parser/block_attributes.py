"""Block attribute vocabulary of the Quill editor."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from ..models.node import NodeType
from .config import BlockAttributeHandler, BlockInfo


def _header(value: Any) -> BlockInfo:
    return BlockInfo(NodeType.HEADER.value, {"header": value})


def _blockquote(value: Any) -> BlockInfo:
    return BlockInfo(NodeType.BLOCKQUOTE.value, {})


def _code_block(value: Any) -> BlockInfo:
    return BlockInfo(NodeType.CODE_BLOCK.value, {"code-block": value})


def _list(value: Any) -> BlockInfo:
    return BlockInfo(NodeType.LIST_ITEM.value, {"list": value})


def _table(value: Any) -> BlockInfo:
    return BlockInfo(NodeType.TABLE_CELL.value, {"table": value})


def _layout(name: str) -> BlockAttributeHandler:
    # Layout attributes decorate whatever block they sit on.
    def handler(value: Any) -> BlockInfo:
        return BlockInfo(None, {name: value})

    handler.__name__ = f"_{name}"
    return handler


DEFAULT_BLOCK_ATTRIBUTES: Mapping[str, BlockAttributeHandler] = MappingProxyType(
    {
        "header": _header,
        "blockquote": _blockquote,
        "code-block": _code_block,
        "list": _list,
        "table": _table,
        "align": _layout("align"),
        "direction": _layout("direction"),
        "indent": _layout("indent"),
    }
)

DEFAULT_BLOCK_EMBEDS = frozenset({"video"})
