"""Parser configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, Mapping, NamedTuple, Optional

from ..exceptions import ConfigurationError


class BlockInfo(NamedTuple):
    """Result of a block attribute handler.

    ``block_type`` may be ``None`` for handlers that only contribute
    attributes (alignment, indentation) without deciding the block type.
    """

    block_type: Optional[str]
    block_attrs: Mapping[str, Any]


BlockAttributeHandler = Callable[[Any], Any]


def coerce_block_info(result: Any, attribute: str) -> BlockInfo:
    """Normalise a handler result into :class:`BlockInfo`.

    Handlers may return a ``BlockInfo``, a ``(block_type, block_attrs)`` pair
    or a mapping with ``blockType``/``blockAttrs`` keys.
    """
    if isinstance(result, BlockInfo):
        block_type, block_attrs = result
    elif isinstance(result, Mapping):
        block_type = result.get("blockType", result.get("block_type"))
        block_attrs = result.get("blockAttrs", result.get("block_attrs")) or {}
    elif isinstance(result, tuple) and len(result) == 2:
        block_type, block_attrs = result
        block_attrs = block_attrs or {}
    else:
        raise ConfigurationError(
            f"Block attribute handler for '{attribute}' returned an invalid result",
            details=repr(result),
        )
    if block_type is not None and not isinstance(block_type, str):
        raise ConfigurationError(
            f"Block attribute handler for '{attribute}' returned a non-string block type",
            details=repr(block_type),
        )
    if not isinstance(block_attrs, Mapping):
        raise ConfigurationError(
            f"Block attribute handler for '{attribute}' returned non-mapping block attributes",
            details=repr(block_attrs),
        )
    return BlockInfo(block_type or None, block_attrs)


def _assert_only_keys(data: Mapping[str, Any], allowed: Iterable[str], *, ctx: str) -> None:
    extra = set(data.keys()) - set(allowed)
    if extra:
        raise ConfigurationError(f"{ctx}: unknown key(s)", details=", ".join(sorted(extra)))


@dataclass(frozen=True)
class ParserConfig:
    """
    Configuration for the Delta parser.

    Attributes:
        block_attributes: Handlers keyed by newline attribute name. Each
            handler receives the attribute value and returns the block type
            and the attributes to put on the block.
        block_embeds: Embed types rendered as standalone blocks instead of
            being placed inside a paragraph.
        soft_line_breaks: Turn all but the last newline of a text insert into
            inline ``line-break`` nodes when they would only start a plain
            paragraph.
    """

    block_attributes: Mapping[str, BlockAttributeHandler] = field(default_factory=dict)
    block_embeds: FrozenSet[str] = frozenset()
    soft_line_breaks: bool = False

    def __post_init__(self) -> None:
        for name, handler in self.block_attributes.items():
            if not callable(handler):
                raise ConfigurationError(f"Block attribute handler for '{name}' is not callable")
        object.__setattr__(self, "block_attributes", MappingProxyType(dict(self.block_attributes)))
        object.__setattr__(self, "block_embeds", frozenset(self.block_embeds))

    def is_block_attribute(self, name: str) -> bool:
        return name in self.block_attributes

    def is_block_embed(self, embed_type: str) -> bool:
        return embed_type in self.block_embeds

    @staticmethod
    def from_dict(data: Optional[Mapping[str, Any]]) -> "ParserConfig":
        """
        Build a config from a plain mapping.

        Accepts both snake_case and the camelCase keys of the JSON config
        format (``blockAttributes``, ``blockEmbeds``, ``softLineBreaks``).
        """
        if not data:
            return ParserConfig()
        aliases: Dict[str, str] = {
            "blockAttributes": "block_attributes",
            "blockEmbeds": "block_embeds",
            "softLineBreaks": "soft_line_breaks",
        }
        normalized = {aliases.get(key, key): value for key, value in data.items()}
        _assert_only_keys(
            normalized,
            ["block_attributes", "block_embeds", "soft_line_breaks"],
            ctx="ParserConfig",
        )
        return ParserConfig(
            block_attributes=normalized.get("block_attributes") or {},
            block_embeds=frozenset(normalized.get("block_embeds") or ()),
            soft_line_breaks=bool(normalized.get("soft_line_breaks", False)),
        )
