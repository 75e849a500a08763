"""
Parser package for delta_render.

Turns the flat operation stream of a Delta into the initial document tree.
"""

from .block_attributes import DEFAULT_BLOCK_ATTRIBUTES, DEFAULT_BLOCK_EMBEDS
from .config import BlockAttributeHandler, BlockInfo, ParserConfig
from .delta_parser import DeltaParser, parse_delta

__all__ = [
    "DEFAULT_BLOCK_ATTRIBUTES",
    "DEFAULT_BLOCK_EMBEDS",
    "BlockAttributeHandler",
    "BlockInfo",
    "ParserConfig",
    "DeltaParser",
    "parse_delta",
]
