"""Raw-shape builder: Tree → nested plain Python values."""

from __future__ import annotations

import logging
from typing import Union

from .errors import DepthExceeded, LeafConversionFailed, UninitializedTreeError
from .options import DEFAULT_MAX_DEPTH
from .tree import Leaf, Scalar, Tree, TreeList, TreeMap, Unset

logger = logging.getLogger(__name__)

RawShape = Union[Scalar, list["RawShape"], dict[str, "RawShape"]]


def build_raw_shape(root: Tree, max_depth: int = DEFAULT_MAX_DEPTH) -> RawShape:
    """Resolve *root* into ``dict`` / ``list`` / scalar values.

    Map keys are kept exactly as given; no sorting and no key transform
    happen here, those belong to flattening. The result can be passed
    straight to ``json.dumps``.
    """
    try:
        shape = _build(root, 0, max_depth)
    except RecursionError as exc:
        raise DepthExceeded(max_depth) from exc
    logger.debug("Built raw shape of type %s", type(shape).__name__)
    return shape


def _build(node: Tree, depth: int, max_depth: int) -> RawShape:
    if depth > max_depth:
        raise DepthExceeded(max_depth)

    if isinstance(node, Leaf):
        value = node.value
        if value is Unset or value is None:
            raise UninitializedTreeError("Leaf was never given a value")
        try:
            return value.render_scalar()
        except RecursionError:
            raise
        except Exception as exc:
            raise LeafConversionFailed(value, None, exc) from exc

    if isinstance(node, TreeList):
        return [_build(item, depth + 1, max_depth) for item in node.items]

    if isinstance(node, TreeMap):
        return {key: _build(value, depth + 1, max_depth) for key, value in node.entries.items()}

    raise UninitializedTreeError(f"Attempted to access uninitialized container: {node!r}")
