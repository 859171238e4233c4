"""``shape-flatten`` — flatten JSON input from the command line.

Usage::

    echo '{"Tags": {"Env": "prod"}}' | shape-flatten --map-tags key value
    Tags.1.key=Env
    Tags.1.value=prod

    shape-flatten request.json --raw
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from decimal import Decimal
from typing import IO

from rich.console import Console
from rich.logging import RichHandler

from .errors import EncodingError
from .flattener import FlattenedEntry, flatten
from .leaves import tree_from_plain
from .options import (
    DEFAULT_MAX_DEPTH,
    CapitalizeFirst,
    EncodingOptions,
    FlatIndexed,
    Identity,
    NestedKey,
    SeparateEntries,
    TaggedIndexed,
)
from .raw_shape import RawShape, build_raw_shape

logger = logging.getLogger("shape_core.cli")


# ---------------------------------------------------------------------------
# Setup helpers
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("shape_core")
    package_logger.handlers.clear()
    package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shape-flatten",
        description="Flatten JSON into shape key/value pairs or a raw shape",
    )
    parser.add_argument("file", nargs="?", help="JSON input file (default: stdin)")
    parser.add_argument("--raw", action="store_true", help="print the raw shape as JSON")
    parser.add_argument("--separator", default=".", help="key segment separator")
    parser.add_argument("--list-tag", metavar="TAG", help="tag list items: key.TAG.1")
    parser.add_argument(
        "--map-tags",
        nargs=2,
        metavar=("KEYTAG", "VALUETAG"),
        help="write nested map entries as numbered key/value pairs",
    )
    parser.add_argument(
        "--capitalize-keys", action="store_true", help="uppercase the first letter of map keys"
    )
    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def options_from_args(args: argparse.Namespace) -> EncodingOptions:
    """Map parsed command line flags onto an :class:`EncodingOptions`."""
    return EncodingOptions(
        separator=args.separator,
        list_strategy=TaggedIndexed(args.list_tag) if args.list_tag else FlatIndexed(),
        map_strategy=SeparateEntries(*args.map_tags) if args.map_tags else NestedKey(),
        key_transform=CapitalizeFirst() if args.capitalize_keys else Identity(),
        max_depth=args.max_depth,
    )


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------

def _fmt_entry(entry: FlattenedEntry) -> str:
    key, value = entry
    if value is None:
        return key
    return f"{key}={value}"


def _write_entries(entries: list[FlattenedEntry], dest: IO[str]) -> None:
    for entry in entries:
        print(_fmt_entry(entry), file=dest)


def _write_raw(shape: RawShape, dest: IO[str]) -> None:
    print(json.dumps(shape, indent=2, ensure_ascii=False), file=dest)


def _load_json(path: str | None) -> object:
    if path is None:
        return json.load(sys.stdin, parse_float=Decimal)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh, parse_float=Decimal)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, dest: IO[str] | None = None) -> int:
    """Run ``shape-flatten``. Returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    out = dest if dest is not None else sys.stdout
    _configure_logging(args.verbose)

    try:
        options = options_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        data = _load_json(args.file)
    except (OSError, ValueError, RecursionError) as exc:
        print(f"error: cannot read input: {exc}", file=sys.stderr)
        return 2

    try:
        tree = tree_from_plain(data, max_depth=options.max_depth)
        if args.raw:
            _write_raw(build_raw_shape(tree, max_depth=options.max_depth), out)
        else:
            _write_entries(flatten(tree, options), out)
    except EncodingError as exc:
        logger.debug("Encoding failed", exc_info=exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
