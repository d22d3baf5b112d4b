"""Serialize a table of contents back into its file format."""

from __future__ import annotations

from typing import Any

from doctoc.json_utils import json_dumps
from doctoc.yaml_utils import yaml_dumps

from .node import TocNode
from .parse import CHILDREN_FIELD, FORMATS, NAME_FIELD
from .table import TableOfContents
from .types import NodeDict


def _node_to_value(node: TocNode, compact: bool, shorthand: bool) -> Any:
    """Return the serializable form of ``node``.

    Args:
        node: Node to convert.
        compact: Use the bare-string form for leaf children.
        shorthand: Whether the bare-string form is allowed at this level.
    """

    if compact and shorthand and node.is_leaf:
        return node.name

    data: NodeDict = {NAME_FIELD: node.name}
    if node.children:
        data[CHILDREN_FIELD] = {
            key: _node_to_value(child, compact, shorthand=True)
            for key, child in node.children.items()
        }
    return data


def toc_to_dict(toc: TableOfContents, compact: bool = False) -> NodeDict:
    """Convert a table of contents to plain nested dictionaries.

    Args:
        toc: Table of contents to convert.
        compact: Write leaf children as bare strings. Top-level sections
            are always written as objects.

    Returns:
        Dictionary following the file grammar, in display order.
    """

    return {
        key: _node_to_value(node, compact, shorthand=False)
        for key, node in toc.items()
    }


def dump_toc(
    toc: TableOfContents,
    fmt: str = "json",
    compact: bool = False,
    indent: int | None = 2,
) -> str:
    """Serialize a table of contents to JSON or YAML text.

    Args:
        toc: Table of contents to serialize.
        fmt: Either ``"json"`` or ``"yaml"``.
        compact: Write leaf children as bare strings.
        indent: JSON indentation, ``None`` for a single line.

    Returns:
        Serialized text that ``parse_toc`` reads back into an equal tree.
    """

    if fmt not in FORMATS:
        raise ValueError(f"Unsupported format {fmt!r}")

    data = toc_to_dict(toc, compact=compact)
    if fmt == "yaml":
        return yaml_dumps(data)
    return json_dumps(data, indent=indent)


def node_to_dict(node: TocNode, compact: bool = False) -> NodeDict:
    """Convert a single node, always as an object, to a dictionary."""
    return _node_to_value(node, compact, shorthand=False)
