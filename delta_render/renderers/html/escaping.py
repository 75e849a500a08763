"""HTML escaping and attribute serialisation."""

from __future__ import annotations

import re
from typing import Mapping, Optional

from .resolved_attrs import ResolvedAttrs, has_resolved_attrs

_HTML_ESCAPE_MAP = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}
_HTML_ESCAPE_RE = re.compile(r"[&<>\"']")


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` in a single pass."""
    return _HTML_ESCAPE_RE.sub(lambda match: _HTML_ESCAPE_MAP[match.group(0)], text)


def serialize_resolved_attrs(resolved: Optional[ResolvedAttrs]) -> str:
    """
    Serialise attributes as ``class``, then ``style``, then the rest.

    Returns a string with a leading space, or ``''`` when there is nothing
    to write.

    Example:
        >>> serialize_resolved_attrs(ResolvedAttrs(style={"color": "red"}, classes=("a",)))
        ' class="a" style="color:red"'
    """
    if not has_resolved_attrs(resolved):
        return ""

    parts = []
    if resolved.classes:
        parts.append(f'class="{" ".join(escape_html(c) for c in resolved.classes)}"')
    if resolved.style:
        style = ";".join(f"{escape_html(k)}:{escape_html(v)}" for k, v in resolved.style.items())
        parts.append(f'style="{style}"')
    for key, value in resolved.attrs.items():
        if value != "":
            parts.append(f'{escape_html(key)}="{escape_html(value)}"')

    return f" {' '.join(parts)}" if parts else ""


def build_attr_string(attrs: Mapping[str, str]) -> str:
    """Serialise plain attributes, skipping empty values; leading space when non-empty."""
    parts = [
        f'{escape_html(key)}="{escape_html(value)}"' for key, value in attrs.items() if value != ""
    ]
    return f" {' '.join(parts)}" if parts else ""
