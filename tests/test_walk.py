"""Tests for traversal helpers."""

from __future__ import annotations

import pytest

from doctoc.toc import (
    find_node,
    iter_nodes,
    max_depth,
    parse_toc,
    render_outline,
)


def test_iter_nodes_is_preorder(sample_json: str) -> None:
    """Parents are yielded before children, in display order."""

    paths = [path for path, _ in iter_nodes(parse_toc(sample_json))]

    assert paths == [
        ("intro",),
        ("start",),
        ("start", "install"),
        ("start", "first_steps"),
        ("runtime",),
        ("runtime", "permissions"),
        ("runtime", "compiler_apis"),
    ]


def test_find_node_by_string_and_tuple(sample_json: str) -> None:
    """Slug paths may be strings or tuples."""

    toc = parse_toc(sample_json)

    assert find_node(toc, "start/install").name == "Installation"
    assert find_node(toc, ("runtime",)).name == "Runtime"


def test_find_node_missing(sample_json: str) -> None:
    """Unknown slugs raise ``KeyError`` naming the parent."""

    toc = parse_toc(sample_json)

    with pytest.raises(KeyError, match="'upgrade' under start"):
        find_node(toc, "start/upgrade")
    with pytest.raises(KeyError):
        find_node(toc, "")


def test_max_depth(sample_json: str) -> None:
    """Depth counts nesting levels."""

    assert max_depth(parse_toc(sample_json)) == 2
    assert max_depth(parse_toc('{"a": {"name": "A"}}')) == 1
    assert max_depth(parse_toc("{}")) == 0


def test_render_outline(sample_json: str) -> None:
    """Outline indents two spaces per level."""

    toc = parse_toc(sample_json)

    assert render_outline(toc).splitlines()[:4] == [
        "- Introduction",
        "- Getting Started",
        "  - Installation",
        "  - First Steps",
    ]
    assert render_outline(toc, show_keys=True).splitlines()[2] == (
        "  - Installation [install]"
    )


def test_find_node_missing_top_level(sample_json: str) -> None:
    """A missing first slug is reported under the root."""

    with pytest.raises(KeyError, match="'nope' under <root>"):
        find_node(parse_toc(sample_json), ("nope", "child"))


def test_find_node_deep_path() -> None:
    """Lookups follow every slug of a deep path."""

    toc = parse_toc(
        '{"a": {"name": "A", "children": {"b": {"name": "B", "children":'
        ' {"c": "C"}}}}}'
    )

    assert find_node(toc, "a/b/c").name == "C"
    assert find_node(toc, ("a", "b")).children["c"].key == "c"
