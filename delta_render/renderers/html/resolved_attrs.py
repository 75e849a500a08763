"""Collected HTML attributes shared by attributors and block resolvers."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class ResolvedAttrs:
    """
    HTML attributes contributed to an element.

    Attributes:
        style: CSS properties, e.g. ``{"color": "red"}``
        classes: CSS class names in contribution order
        attrs: Arbitrary HTML attributes, e.g. ``{"data-row": "1"}``
    """

    style: Mapping[str, str] = field(default_factory=dict)
    classes: Tuple[str, ...] = ()
    attrs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", MappingProxyType(dict(self.style)))
        object.__setattr__(self, "classes", tuple(self.classes))
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))

    def __bool__(self) -> bool:
        return has_resolved_attrs(self)


EMPTY_RESOLVED_ATTRS = ResolvedAttrs()


def merge_resolved_attrs(target: ResolvedAttrs, source: ResolvedAttrs) -> ResolvedAttrs:
    """Merge two values: style and attrs shallow-merged (source wins), classes concatenated."""
    return ResolvedAttrs(
        style={**target.style, **source.style},
        classes=target.classes + source.classes,
        attrs={**target.attrs, **source.attrs},
    )


def has_resolved_attrs(resolved: Optional[ResolvedAttrs]) -> bool:
    if resolved is None:
        return False
    return bool(resolved.style) or bool(resolved.classes) or bool(resolved.attrs)
