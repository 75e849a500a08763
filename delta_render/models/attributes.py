"""
Type-safe accessors for well-known node attributes.

Each accessor checks the runtime type of the value. A missing or malformed
attribute yields the documented fallback instead of raising.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from .node import TNode


def as_string(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def as_int(value: Any, default: int = 0) -> int:
    """Coerce ints, floats and numeric strings to ``int``; anything else to ``default``."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
        return int(number) if math.isfinite(number) else default
    return default


# ----------------------------------------------------------------------
# Block attributes
# ----------------------------------------------------------------------
def get_header_level(node: TNode) -> int:
    """Header level 1-6, or 0 when missing or invalid."""
    level = as_int(node.attributes.get("header"))
    return level if 1 <= level <= 6 else 0


def get_list_type(node: TNode) -> str:
    """List type (``ordered``, ``bullet``, ``checked``, ``unchecked``) or ``''``."""
    value = node.attributes.get("list")
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return as_string(value.get("list")) or ""
    return ""


def get_indent(node: TNode) -> int:
    """Indent level; missing, negative or non-numeric values read as 0."""
    return max(as_int(node.attributes.get("indent")), 0)


def get_table_row(node: TNode) -> Optional[str]:
    value = node.attributes.get("table")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return as_string(value)


def get_code_language(node: TNode) -> Optional[str]:
    """Language of a code line; ``None`` for generic (``True``/``'plain'``) blocks."""
    value = node.attributes.get("code-block")
    if isinstance(value, Mapping):
        value = value.get("code-block")
    if isinstance(value, str) and value not in ("true", "plain", ""):
        return value
    return None


def get_direction(node: TNode) -> Optional[str]:
    return as_string(node.attributes.get("direction"))


def get_align(node: TNode) -> Optional[str]:
    return as_string(node.attributes.get("align"))


# ----------------------------------------------------------------------
# Inline / embed attributes
# ----------------------------------------------------------------------
def get_alt(node: TNode) -> Optional[str]:
    return as_string(node.attributes.get("alt"))


def get_link_href(node: TNode) -> Optional[str]:
    return as_string(node.attributes.get("link"))


def get_width(node: TNode) -> Optional[str]:
    value = node.attributes.get("width")
    return str(value) if isinstance(value, (int, float)) and not isinstance(value, bool) else as_string(value)


def get_height(node: TNode) -> Optional[str]:
    value = node.attributes.get("height")
    return str(value) if isinstance(value, (int, float)) and not isinstance(value, bool) else as_string(value)


def get_embed_source(node: TNode) -> str:
    """Source URL of an image/video embed, accepting ``"url"`` or ``{"url": ...}``."""
    data = node.data
    if isinstance(data, str):
        return data
    if isinstance(data, Mapping):
        return str(data.get("url") or "")
    return "" if data is None else str(data)
