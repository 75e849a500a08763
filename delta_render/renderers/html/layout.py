"""Layout classes for block attributes (direction, alignment, indentation)."""

from __future__ import annotations

from typing import List

from ...models.attributes import get_align, get_direction, get_indent
from ...models.node import TNode


def get_layout_classes(node: TNode, prefix: str) -> List[str]:
    """Return ``{prefix}-direction-*``, ``{prefix}-align-*``, ``{prefix}-indent-N`` in that order."""
    classes: List[str] = []

    direction = get_direction(node)
    if direction:
        classes.append(f"{prefix}-direction-{direction}")

    align = get_align(node)
    if align:
        classes.append(f"{prefix}-align-{align}")

    indent = get_indent(node)
    if indent > 0:
        classes.append(f"{prefix}-indent-{indent}")

    return classes
