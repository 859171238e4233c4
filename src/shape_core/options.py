"""Encoding options: the strategies that control how a tree is flattened."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Union


# ---------------------------------------------------------------------------
# List strategies
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlatIndexed:
    """``key.1``, ``key.2``, ..."""

    def child_key(self, key: str, position: int, is_root: bool, separator: str) -> str:
        return f"{key}{separator}{position}"


@dataclass(frozen=True, slots=True)
class TaggedIndexed:
    """``key.member.1``, ``key.member.2``, ... for lists below the root."""

    tag: str

    def __post_init__(self) -> None:
        if not self.tag:
            raise ValueError("TaggedIndexed requires a non-empty tag")

    def child_key(self, key: str, position: int, is_root: bool, separator: str) -> str:
        if is_root:
            return f"{key}{separator}{position}"
        return f"{key}{separator}{self.tag}{separator}{position}"


ListStrategy = Union[FlatIndexed, TaggedIndexed]


# ---------------------------------------------------------------------------
# Map strategies
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NestedKey:
    """Map keys become key segments: ``parent.child``."""


@dataclass(frozen=True, slots=True)
class SeparateEntries:
    """Each map entry becomes a numbered key/value pair of flat entries.

    ``{"Env": "prod"}`` under ``Tags`` gives ``Tags.1.key=Env`` and
    ``Tags.1.value=prod``. The root map always uses nested keys.
    """

    key_tag: str
    value_tag: str

    def __post_init__(self) -> None:
        if not self.key_tag or not self.value_tag:
            raise ValueError("SeparateEntries requires non-empty key and value tags")


MapStrategy = Union[NestedKey, SeparateEntries]


# ---------------------------------------------------------------------------
# Key transforms
# ---------------------------------------------------------------------------

def capitalize_first(key: str) -> str:
    """Titlecase the first character only; the rest is left alone.

    Titlecase keeps ``"ß"`` a single-cased ``"Ss"`` and digraphs like ``"ǆ"``
    as ``"ǅ"``; ASCII keys simply get an uppercase first letter.
    """
    if not key:
        return ""
    return key[0].title() + key[1:]


@dataclass(frozen=True, slots=True)
class Identity:
    def __call__(self, key: str) -> str:
        return key


@dataclass(frozen=True, slots=True)
class CapitalizeFirst:
    def __call__(self, key: str) -> str:
        return capitalize_first(key)


@dataclass(frozen=True, slots=True)
class Custom:
    func: Callable[[str], str]

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise ValueError(f"Custom key transform must be callable, got {self.func!r}")

    def __call__(self, key: str) -> str:
        return self.func(key)


KeyTransform = Union[Identity, CapitalizeFirst, Custom]


# ---------------------------------------------------------------------------
# EncodingOptions
# ---------------------------------------------------------------------------

DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True, slots=True)
class EncodingOptions:
    """Per-call configuration for :func:`shape_core.flatten`."""

    separator: str = "."
    list_strategy: ListStrategy = field(default_factory=FlatIndexed)
    map_strategy: MapStrategy = field(default_factory=NestedKey)
    key_transform: KeyTransform = field(default_factory=Identity)
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")
        if not isinstance(self.list_strategy, (FlatIndexed, TaggedIndexed)):
            raise ValueError(f"Unknown list strategy: {self.list_strategy!r}")
        if not isinstance(self.map_strategy, (NestedKey, SeparateEntries)):
            raise ValueError(f"Unknown map strategy: {self.map_strategy!r}")
        if not isinstance(self.key_transform, (Identity, CapitalizeFirst, Custom)):
            raise ValueError(f"Unknown key transform: {self.key_transform!r}")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    def replace(self, **changes) -> EncodingOptions:
        return replace(self, **changes)


DEFAULT_OPTIONS = EncodingOptions()
