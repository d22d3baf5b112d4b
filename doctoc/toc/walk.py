"""Traversal helpers over a table of contents."""

from __future__ import annotations

from typing import Iterator

from .node import TocNode
from .table import TableOfContents
from .types import ChildMap, SlugPath

PATH_SEPARATOR = "/"


def _walk(
    children: ChildMap, prefix: SlugPath
) -> Iterator[tuple[SlugPath, TocNode]]:
    for key, node in children.items():
        path = prefix + (key,)
        yield path, node
        yield from _walk(node.children, path)


def iter_nodes(toc: TableOfContents) -> Iterator[tuple[SlugPath, TocNode]]:
    """Yield ``(path, node)`` pairs depth first in display order.

    Args:
        toc: Table of contents to traverse.

    Returns:
        Iterator over every node, parents before their children.
    """

    return _walk(toc.sections, ())


def split_path(path: str | SlugPath) -> SlugPath:
    """Turn ``"a/b"`` into ``("a", "b")``; tuples are returned unchanged."""
    if isinstance(path, str):
        return tuple(part for part in path.split(PATH_SEPARATOR) if part)
    return tuple(path)


def _child(children: ChildMap, slugs: SlugPath, depth: int) -> TocNode:
    """Return the child named by ``slugs[depth]`` or raise ``KeyError``."""

    slug = slugs[depth]
    if slug not in children:
        raise KeyError(
            f"No entry {slug!r} under "
            f"{PATH_SEPARATOR.join(slugs[:depth]) or '<root>'}"
        )
    return children[slug]


def find_node(toc: TableOfContents, path: str | SlugPath) -> TocNode:
    """Return the node reached by following slugs from the root.

    Args:
        toc: Table of contents to search.
        path: Slugs as a tuple or a ``/`` separated string.

    Returns:
        The matching node.

    Throws:
        KeyError: If a slug along the path does not exist.
    """

    slugs = split_path(path)
    if not slugs:
        raise KeyError("Empty path")

    node = _child(toc.sections, slugs, 0)
    for depth in range(1, len(slugs)):
        node = _child(node.children, slugs, depth)
    return node


def max_depth(toc: TableOfContents) -> int:
    """Return the deepest nesting level, ``1`` for top-level sections only."""
    return max((len(path) for path, _ in iter_nodes(toc)), default=0)


def render_outline(toc: TableOfContents, show_keys: bool = False) -> str:
    """Render the table of contents as an indented text outline.

    Args:
        toc: Table of contents to render.
        show_keys: Append each node's slug in square brackets.

    Returns:
        One line per node, indented two spaces per level.
    """

    lines: list[str] = []
    for path, node in iter_nodes(toc):
        line = f"{'  ' * (len(path) - 1)}- {node.name}"
        if show_keys:
            line += f" [{node.key}]"
        lines.append(line)
    return "\n".join(lines)
