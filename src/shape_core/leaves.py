"""Standard leaf types and a builder for JSON-like Python data."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any

from .errors import DepthExceeded
from .options import DEFAULT_MAX_DEPTH
from .tree import Leaf, LeafValue, Scalar, Tree, TreeList, TreeMap

_EXACT_FLOAT_LIMIT = 2 ** 53


@dataclass(frozen=True, slots=True)
class TextLeaf:
    value: str

    def render_string(self) -> str:
        return self.value

    def render_scalar(self) -> Scalar:
        return self.value


@dataclass(frozen=True, slots=True)
class NumberLeaf:
    value: int | float | Decimal

    def render_string(self) -> str:
        v = self._finite()
        if isinstance(v, int):
            return str(v)
        if abs(v) < _EXACT_FLOAT_LIMIT and v == int(v):
            return str(int(v))
        return str(v)

    def render_scalar(self) -> Scalar:
        v = self._finite()
        if isinstance(v, Decimal):
            return int(v) if v == int(v) else float(v)
        return v

    def _finite(self) -> int | float | Decimal:
        v = self.value
        if isinstance(v, bool):
            raise TypeError("Use BoolLeaf for boolean values")
        if isinstance(v, (float, Decimal)) and not math.isfinite(v):
            raise ValueError(f"Non-finite number {v!r} has no shape representation")
        return v


@dataclass(frozen=True, slots=True)
class BoolLeaf:
    value: bool

    def render_string(self) -> str:
        return "true" if self.value else "false"

    def render_scalar(self) -> Scalar:
        return bool(self.value)


@dataclass(frozen=True, slots=True)
class DateTimeLeaf:
    """ISO-8601 timestamp; aware UTC datetimes end in ``Z``."""

    value: datetime | date

    def render_string(self) -> str:
        v = self.value
        if isinstance(v, datetime) and v.utcoffset() == timedelta(0):
            return v.replace(tzinfo=None).isoformat() + "Z"
        return v.isoformat()

    def render_scalar(self) -> Scalar:
        return self.render_string()


@dataclass(frozen=True, slots=True)
class NullLeaf:
    """Key-only slot when flattened, ``None`` in a raw shape."""

    def render_string(self) -> None:
        return None

    def render_scalar(self) -> Scalar:
        return None


# ---------------------------------------------------------------------------
# Plain data → Tree
# ---------------------------------------------------------------------------

def leaf_for(value: Any) -> Leaf:
    """Wrap a single scalar in the matching standard leaf."""
    if value is None:
        return Leaf(NullLeaf())
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Leaf(BoolLeaf(value))
    if isinstance(value, (int, float, Decimal)):
        return Leaf(NumberLeaf(value))
    if isinstance(value, str):
        return Leaf(TextLeaf(value))
    if isinstance(value, (datetime, date)):
        return Leaf(DateTimeLeaf(value))
    if isinstance(value, LeafValue):
        return Leaf(value)
    raise TypeError(f"No shape leaf for value of type {type(value).__name__}")


def tree_from_plain(obj: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Tree:
    """Build a Tree from ``dict`` / ``list`` / scalar data (e.g. decoded JSON).

    Dict keys must be strings. Objects that already implement
    ``render_string`` / ``render_scalar`` are used as leaves unchanged.
    Nesting deeper than *max_depth* raises :class:`DepthExceeded`.
    """
    try:
        return _from_plain(obj, 0, max_depth)
    except RecursionError as exc:
        raise DepthExceeded(max_depth) from exc


def _from_plain(obj: Any, depth: int, max_depth: int) -> Tree:
    if depth > max_depth:
        raise DepthExceeded(max_depth)
    if isinstance(obj, dict):
        entries: dict[str, Tree] = {}
        for key, value in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Map keys must be strings, got {type(key).__name__}")
            entries[key] = _from_plain(value, depth + 1, max_depth)
        return TreeMap(entries)
    if isinstance(obj, (list, tuple)):
        items: list[Tree] = []
        for item in obj:
            items.append(_from_plain(item, depth + 1, max_depth))
        return TreeList(items)
    return leaf_for(obj)
