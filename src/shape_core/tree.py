"""Tree model: the intermediate value built while encoding an object's fields."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, Protocol, TypeVar, Union, runtime_checkable


Scalar = Union[str, int, float, bool, None]


# ---------------------------------------------------------------------------
# Leaf capability contract
# ---------------------------------------------------------------------------

@runtime_checkable
class LeafValue(Protocol):
    """What a leaf payload must provide. Either method may raise."""

    def render_string(self) -> str | None: ...

    def render_scalar(self) -> Scalar: ...


L = TypeVar("L", bound=LeafValue)


# ---------------------------------------------------------------------------
# Unset — placeholder for a container the builder never filled
# ---------------------------------------------------------------------------

class _UnsetType:
    """Marks a container slot the builder created but never filled.

    Reaching it during flattening or raw-shape building means the builder
    handed over a half-built tree; both raise ``UninitializedTreeError``.
    """

    _instance: _UnsetType | None = None

    def __new__(cls) -> _UnsetType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Unset"

    def __bool__(self) -> bool:
        return False


Unset = _UnsetType()


# ---------------------------------------------------------------------------
# Tree cases
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf(Generic[L]):
    value: L


@dataclass(frozen=True, slots=True)
class TreeList:
    items: tuple[Tree, ...] = ()

    def __init__(self, items: Iterable[Tree] = ()) -> None:
        object.__setattr__(self, "items", tuple(items))

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class TreeMap:
    """Keyed container. Iteration order carries no meaning."""

    entries: Mapping[str, Tree] = field(default_factory=dict)

    def __init__(self, entries: Mapping[str, Tree] | None = None) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(entries or {})))

    def __len__(self) -> int:
        return len(self.entries)

    def sorted_items(self) -> list[tuple[str, Tree]]:
        """Entries in ascending key order (code point order)."""
        return sorted(self.entries.items(), key=lambda item: item[0])


Tree = Union[Leaf, TreeList, TreeMap]
