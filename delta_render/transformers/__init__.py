"""
Structural transformers for delta_render.

Each transformer is a pure ``TNode -> TNode`` function applied to the root
of a parsed tree.
"""

from .code_block_grouper import code_block_grouper
from .flat_list_grouper import flat_list_grouper
from .grouping import group_consecutive_while
from .list_nester import list_nester, nest_lists
from .pipeline import STANDARD_TRANSFORMERS, Transformer, apply_transformers, compose_transformers
from .table_grouper import table_grouper

__all__ = [
    "code_block_grouper",
    "flat_list_grouper",
    "group_consecutive_while",
    "list_nester",
    "nest_lists",
    "STANDARD_TRANSFORMERS",
    "Transformer",
    "apply_transformers",
    "compose_transformers",
    "table_grouper",
]
