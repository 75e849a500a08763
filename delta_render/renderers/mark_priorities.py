"""Default mark nesting priorities (higher wraps outer)."""

from types import MappingProxyType
from typing import Mapping

# link wraps colour wraps the simple formats: <a><span style="color:red"><strong>x</strong></span></a>
DEFAULT_MARK_PRIORITIES: Mapping[str, int] = MappingProxyType(
    {
        "link": 100,
        "background": 50,
        "color": 40,
        "bold": 10,
        "italic": 10,
        "underline": 10,
        "strike": 10,
        "script": 5,
    }
)

# Nesting order of the reference editor's own DOM.
QUILL_MARK_PRIORITIES: Mapping[str, int] = MappingProxyType(
    {
        "bold": 50,
        "strike": 40,
        "underline": 30,
        "italic": 20,
        "link": 15,
        "code": 10,
        "script": 5,
    }
)
