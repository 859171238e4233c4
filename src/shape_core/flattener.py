"""Flattening engine: Tree + EncodingOptions → ordered flat key/value entries."""

from __future__ import annotations

import logging

from .errors import (
    DepthExceeded,
    LeafConversionFailed,
    ListRequiresKey,
    UninitializedTreeError,
)
from .options import DEFAULT_OPTIONS, EncodingOptions, SeparateEntries
from .tree import Leaf, Tree, TreeList, TreeMap, Unset

logger = logging.getLogger(__name__)

FlattenedEntry = tuple[str, "str | None"]


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def flatten(root: Tree, options: EncodingOptions | None = None) -> list[FlattenedEntry]:
    """Flatten *root* into ``(key, value)`` pairs in depth-first pre-order.

    Map entries are visited in ascending key order so the result does not
    depend on how the tree was populated. List items keep their order and
    are numbered from 1. Colliding keys from independent branches are all
    emitted; nothing is merged.

    Raises :class:`ListRequiresKey` for a list at the root,
    :class:`LeafConversionFailed` when a leaf cannot render itself and
    :class:`DepthExceeded` when nesting goes past ``options.max_depth``.
    Nothing is returned on failure.
    """
    opts = options if options is not None else DEFAULT_OPTIONS
    entries: list[FlattenedEntry] = []
    try:
        _visit(root, None, True, 0, opts, entries)
    except RecursionError as exc:
        raise DepthExceeded(opts.max_depth) from exc
    logger.debug("Flattened tree into %d entries", len(entries))
    return entries


def flatten_to_dict(root: Tree, options: EncodingOptions | None = None) -> dict[str, str | None]:
    """Flatten *root* into a mapping; a later duplicate key overwrites an earlier one."""
    result: dict[str, str | None] = {}
    for key, value in flatten(root, options):
        if key in result:
            logger.debug("Duplicate flattened key %r; keeping the later value", key)
        result[key] = value
    return result


# ---------------------------------------------------------------------------
# Recursive visit
# ---------------------------------------------------------------------------

def _visit(
    node: Tree,
    key: str | None,
    is_root: bool,
    depth: int,
    opts: EncodingOptions,
    sink: list[FlattenedEntry],
) -> None:
    if depth > opts.max_depth:
        raise DepthExceeded(opts.max_depth, key)

    if isinstance(node, Leaf):
        sink.append((key if key is not None else "", _render_string(node, key)))
        return

    if isinstance(node, TreeList):
        _visit_list(node, key, is_root, depth, opts, sink)
        return

    if isinstance(node, TreeMap):
        _visit_map(node, key, is_root, depth, opts, sink)
        return

    raise UninitializedTreeError(f"Attempted to access uninitialized container: {node!r}")


def _visit_list(
    node: TreeList,
    key: str | None,
    is_root: bool,
    depth: int,
    opts: EncodingOptions,
    sink: list[FlattenedEntry],
) -> None:
    if key is None:
        raise ListRequiresKey()

    for position, item in enumerate(node.items, 1):
        child_key = opts.list_strategy.child_key(key, position, is_root, opts.separator)
        _visit(item, child_key, False, depth + 1, opts, sink)


def _visit_map(
    node: TreeMap,
    key: str | None,
    is_root: bool,
    depth: int,
    opts: EncodingOptions,
    sink: list[FlattenedEntry],
) -> None:
    sep = opts.separator
    strategy = opts.map_strategy
    separate = not is_root and isinstance(strategy, SeparateEntries)

    for position, (raw_key, value) in enumerate(node.sorted_items(), 1):
        transformed = opts.key_transform(raw_key)

        if separate:
            prefix = f"{key}{sep}" if key is not None else ""
            sink.append((f"{prefix}{position}{sep}{strategy.key_tag}", transformed))
            child_key = f"{prefix}{position}{sep}{strategy.value_tag}"
        elif key is not None:
            child_key = f"{key}{sep}{transformed}"
        else:
            child_key = transformed

        _visit(value, child_key, False, depth + 1, opts, sink)


def _render_string(node: Leaf, key: str | None) -> str | None:
    if node.value is Unset or node.value is None:
        raise UninitializedTreeError(f"Leaf at '{key}' was never given a value")
    try:
        return node.value.render_string()
    except RecursionError:
        raise
    except Exception as exc:
        raise LeafConversionFailed(node.value, key, exc) from exc
