"""Shape Core — flattens encoded value trees for query-string and JSON-style formats."""

from .errors import (
    DepthExceeded,
    EncodingError,
    LeafConversionFailed,
    ListRequiresKey,
    UninitializedTreeError,
)
from .flattener import FlattenedEntry, flatten, flatten_to_dict
from .leaves import (
    BoolLeaf,
    DateTimeLeaf,
    NullLeaf,
    NumberLeaf,
    TextLeaf,
    leaf_for,
    tree_from_plain,
)
from .options import (
    DEFAULT_OPTIONS,
    CapitalizeFirst,
    Custom,
    EncodingOptions,
    FlatIndexed,
    Identity,
    NestedKey,
    SeparateEntries,
    TaggedIndexed,
    capitalize_first,
)
from .raw_shape import RawShape, build_raw_shape
from .tree import Leaf, LeafValue, Scalar, Tree, TreeList, TreeMap, Unset

__all__ = [
    "flatten",
    "flatten_to_dict",
    "build_raw_shape",
    "tree_from_plain",
    "leaf_for",
    "FlattenedEntry",
    "RawShape",
    "Tree",
    "Leaf",
    "TreeList",
    "TreeMap",
    "Unset",
    "LeafValue",
    "Scalar",
    "TextLeaf",
    "NumberLeaf",
    "BoolLeaf",
    "DateTimeLeaf",
    "NullLeaf",
    "EncodingOptions",
    "DEFAULT_OPTIONS",
    "FlatIndexed",
    "TaggedIndexed",
    "NestedKey",
    "SeparateEntries",
    "Identity",
    "CapitalizeFirst",
    "Custom",
    "capitalize_first",
    "EncodingError",
    "ListRequiresKey",
    "LeafConversionFailed",
    "DepthExceeded",
    "UninitializedTreeError",
]
