"""Error taxonomy for shape flattening."""

from __future__ import annotations


class EncodingError(Exception):
    """Base class for recoverable encoding failures.

    ``key`` is the flattened key at the point of failure, when one exists.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class ListRequiresKey(EncodingError):
    """A list appeared where a flat key is mandatory (e.g. at the root)."""

    def __init__(self) -> None:
        super().__init__("Lists cannot be used as a shape element without a key")


class LeafConversionFailed(EncodingError):
    """A leaf's ``render_string`` / ``render_scalar`` raised."""

    def __init__(self, leaf: object, key: str | None, cause: BaseException) -> None:
        where = f" at '{key}'" if key else ""
        super().__init__(f"Unable to render {leaf!r}{where}: {cause}", key)
        self.leaf = leaf


class DepthExceeded(EncodingError):
    def __init__(self, max_depth: int, key: str | None = None) -> None:
        super().__init__(f"Tree nesting exceeds maximum depth of {max_depth}", key)
        self.max_depth = max_depth


class UninitializedTreeError(RuntimeError):
    """The builder handed over a container it never populated.

    Deliberately not an :class:`EncodingError`: this is a bug in whatever
    built the tree, not bad input, and callers should let it propagate.
    """
