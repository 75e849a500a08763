"""Delta operation types.

A Delta is an ordered list of operations. Only ``insert`` operations are
consumed by the parser; ``retain`` and ``delete`` are kept for completeness.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..exceptions import DeltaShapeError

Insert = Union[str, Mapping[str, Any]]


@dataclass(frozen=True)
class DeltaOp:
    """Single Delta operation."""

    insert: Optional[Insert] = None
    delete: Optional[int] = None
    retain: Optional[int] = None
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_insert(self) -> bool:
        return self.insert is not None

    @property
    def is_text(self) -> bool:
        return isinstance(self.insert, str)

    @property
    def is_embed(self) -> bool:
        return isinstance(self.insert, Mapping)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeltaOp":
        if not isinstance(data, Mapping):
            raise DeltaShapeError("Delta op must be a mapping", details=type(data).__name__)
        attributes = data.get("attributes") or {}
        if not isinstance(attributes, Mapping):
            raise DeltaShapeError("Delta op attributes must be a mapping")
        return cls(
            insert=data.get("insert"),
            delete=data.get("delete"),
            retain=data.get("retain"),
            attributes=dict(attributes),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.insert is not None:
            result["insert"] = dict(self.insert) if isinstance(self.insert, Mapping) else self.insert
        if self.delete is not None:
            result["delete"] = self.delete
        if self.retain is not None:
            result["retain"] = self.retain
        if self.attributes:
            result["attributes"] = dict(self.attributes)
        return result


@dataclass(frozen=True)
class Delta:
    """Ordered sequence of Delta operations."""

    ops: Tuple[DeltaOp, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.ops, tuple):
            object.__setattr__(self, "ops", tuple(self.ops))

    def __len__(self) -> int:
        return len(self.ops)

    @classmethod
    def from_dict(cls, data: Any) -> "Delta":
        """Build a Delta from ``{"ops": [...]}``.

        Raises:
            DeltaShapeError: if ``data`` is not a mapping with an ``ops`` list
        """
        if not isinstance(data, Mapping):
            raise DeltaShapeError("Delta must be a mapping with an 'ops' array", details=type(data).__name__)
        ops = data.get("ops")
        if not isinstance(ops, Sequence) or isinstance(ops, (str, bytes)):
            raise DeltaShapeError("Delta is missing an 'ops' array")
        return cls(ops=tuple(op if isinstance(op, DeltaOp) else DeltaOp.from_dict(op) for op in ops))

    @classmethod
    def from_json(cls, text: str) -> "Delta":
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {"ops": [op.to_dict() for op in self.ops]}


def coerce_delta(value: Any) -> Delta:
    """Accept a :class:`Delta` or any mapping with an ``ops`` sequence."""
    if isinstance(value, Delta):
        return value
    return Delta.from_dict(value)
