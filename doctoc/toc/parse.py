"""Parse and validate table of contents data."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from doctoc.exceptions import SchemaError, format_path
from doctoc.json_utils import KeyValuePairs, json_loads_pairs
from doctoc.yaml_utils import yaml_loads_pairs

from .node import TocNode
from .table import TableOfContents
from .types import ChildMap, SlugPath

logger = logging.getLogger(__name__)

NAME_FIELD = "name"
CHILDREN_FIELD = "children"
NODE_FIELDS = (NAME_FIELD, CHILDREN_FIELD)

FORMATS = ("json", "yaml")
YAML_SUFFIXES = (".yaml", ".yml")

Pairs = list[tuple[Any, Any]]


def _describe(value: Any) -> str:
    """Return the JSON name of the type of ``value`` for error messages."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (KeyValuePairs, Mapping)):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _unique_pairs(value: Any, path: SlugPath, what: str) -> Pairs:
    """Return the pairs of a mapping value, rejecting repeated keys.

    Args:
        value: Decoded value expected to be a mapping.
        path: Location of ``value`` used in error messages.
        what: Noun describing the expected value.

    Returns:
        Ordered ``(key, value)`` pairs.

    Throws:
        SchemaError: If ``value`` is not a mapping or repeats a key.
    """

    if isinstance(value, KeyValuePairs):
        pairs: Pairs = list(value)
    elif isinstance(value, Mapping):
        pairs = list(value.items())
    else:
        raise SchemaError(
            path, f"{what} must be an object, got {_describe(value)}"
        )

    seen: set[Any] = set()
    for key, _ in pairs:
        # Complex YAML keys decode to unhashable pair lists.
        try:
            duplicate = key in seen
        except TypeError as exc:
            raise SchemaError(
                path, f"invalid key of type {_describe(key)}"
            ) from exc
        if duplicate:
            raise SchemaError(path, f"duplicate key {key!r}")
        seen.add(key)
    return pairs


def _check_encodable(text: str, path: SlugPath, what: str) -> None:
    """Reject strings holding lone surrogates, which cannot be written."""

    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SchemaError(path, f"{what} is not valid UTF-8") from exc


def _check_slug(key: Any, path: SlugPath) -> None:
    """Ensure ``key`` is usable as a slug."""

    if not isinstance(key, str) or not key:
        raise SchemaError(
            path, f"invalid key {key!r}: keys must be non-empty strings"
        )
    _check_encodable(key, path, f"key {key!r}")


def _build_node(
    key: str,
    value: Any,
    path: SlugPath,
    strict: bool,
    allow_shorthand: bool,
) -> TocNode:
    """Validate a single entry and convert it into a ``TocNode``.

    Args:
        key: Slug of the entry in its parent mapping.
        value: Decoded entry, either a full node or a bare label.
        path: Location of the entry used in error messages.
        strict: Reject unknown fields instead of ignoring them.
        allow_shorthand: Accept a bare string as a leaf node.

    Returns:
        Normalized node.
    """

    # A bare string is shorthand for a leaf carrying only a name.
    if allow_shorthand and isinstance(value, str):
        _check_encodable(value, path, "name")
        return TocNode(key=key, name=value)

    if allow_shorthand and not isinstance(value, (KeyValuePairs, Mapping)):
        raise SchemaError(
            path,
            "entry must be a string or an object, "
            f"got {_describe(value)}",
        )

    fields = dict(_unique_pairs(value, path, "section"))

    if NAME_FIELD not in fields:
        raise SchemaError(path, f"missing required field '{NAME_FIELD}'")
    name = fields[NAME_FIELD]
    if not isinstance(name, str):
        raise SchemaError(
            path + (NAME_FIELD,),
            f"name must be a string, got {_describe(name)}",
        )
    _check_encodable(name, path + (NAME_FIELD,), "name")

    children: ChildMap = {}
    if CHILDREN_FIELD in fields:
        children = _build_children(
            fields[CHILDREN_FIELD], path + (CHILDREN_FIELD,), strict
        )

    unknown = [field for field in fields if field not in NODE_FIELDS]
    if unknown:
        if strict:
            raise SchemaError(
                path + (str(unknown[0]),), "unknown field"
            )
        logger.warning(
            f"{format_path(path)}: ignoring unknown fields "
            f"{', '.join(repr(field) for field in unknown)}"
        )

    return TocNode(key=key, name=name, children=children)


def _build_children(value: Any, path: SlugPath, strict: bool) -> ChildMap:
    """Validate a ``children`` mapping and convert its entries."""

    children: ChildMap = {}
    for key, child in _unique_pairs(value, path, "children"):
        _check_slug(key, path)
        children[key] = _build_node(
            key, child, path + (key,), strict, allow_shorthand=True
        )
    return children


def build_toc(data: Any, strict: bool = False) -> TableOfContents:
    """Validate decoded data and build the table of contents.

    Args:
        data: Root mapping of section slugs to sections. Either a plain
            mapping or the ``KeyValuePairs`` produced by the decoders.
        strict: Reject unknown node fields instead of logging a warning.

    Returns:
        Order-preserving table of contents.

    Throws:
        SchemaError: If any part of ``data`` is malformed.
    """

    sections: ChildMap = {}
    for key, value in _unique_pairs(data, (), "table of contents"):
        _check_slug(key, ())

        # Top-level entries must be full sections; the shorthand is only
        # accepted for children.
        sections[key] = _build_node(
            key, value, (key,), strict, allow_shorthand=False
        )
    return TableOfContents(sections=sections)


def decode_toc(text: str | bytes, fmt: str = "json") -> Any:
    """Decode raw text without validating its shape.

    Args:
        text: Serialized table of contents, ``bytes`` must be UTF-8.
        fmt: Either ``"json"`` or ``"yaml"``.

    Returns:
        Decoded data with mappings kept as ``KeyValuePairs``.

    Throws:
        SchemaError: If the text cannot be decoded.
        ValueError: If ``fmt`` is not supported.
    """

    if fmt not in FORMATS:
        raise ValueError(f"Unsupported format {fmt!r}")

    try:
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SchemaError((), f"input is not valid UTF-8: {exc}") from exc

    if fmt == "json":
        try:
            return json_loads_pairs(text)
        except ValueError as exc:
            raise SchemaError((), f"invalid JSON: {exc}") from exc

    try:
        return yaml_loads_pairs(text)
    except yaml.YAMLError as exc:
        raise SchemaError((), f"invalid YAML: {exc}") from exc


def parse_toc(
    text: str | bytes, fmt: str = "json", strict: bool = False
) -> TableOfContents:
    """Parse serialized text into a validated table of contents.

    Args:
        text: JSON or YAML document.
        fmt: Either ``"json"`` or ``"yaml"``.
        strict: Reject unknown node fields.

    Returns:
        Order-preserving table of contents.

    Throws:
        SchemaError: If the text is malformed or does not match the schema.
    """

    return build_toc(decode_toc(text, fmt), strict=strict)


def format_for_path(path: Path) -> str:
    """Return the serialization format implied by a file suffix."""
    return "yaml" if path.suffix.lower() in YAML_SUFFIXES else "json"


def load_toc(path: Path | str, strict: bool = False) -> TableOfContents:
    """Read and validate a table of contents file.

    Args:
        path: Location of a UTF-8 JSON or YAML file. Files ending in
            ``.yaml`` or ``.yml`` are read as YAML, anything else as JSON.
        strict: Reject unknown node fields.

    Returns:
        Order-preserving table of contents.
    """

    path = Path(path)
    toc = parse_toc(path.read_bytes(), format_for_path(path), strict=strict)
    logger.debug(f"Loaded {len(toc)} sections from {path}")
    return toc
