"""HTML renderers."""

from .base_html_renderer import BaseHtmlRenderer
from .escaping import build_attr_string, escape_html, serialize_resolved_attrs
from .layout import get_layout_classes
from .quill_html_renderer import QuillHtmlRenderer, build_quill_config
from .resolved_attrs import (
    EMPTY_RESOLVED_ATTRS,
    ResolvedAttrs,
    has_resolved_attrs,
    merge_resolved_attrs,
)

__all__ = [
    "BaseHtmlRenderer",
    "build_attr_string",
    "escape_html",
    "serialize_resolved_attrs",
    "get_layout_classes",
    "QuillHtmlRenderer",
    "build_quill_config",
    "EMPTY_RESOLVED_ATTRS",
    "ResolvedAttrs",
    "has_resolved_attrs",
    "merge_resolved_attrs",
]
