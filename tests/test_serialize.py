"""Tests for writing tables of contents back to text."""

from __future__ import annotations

import json

import pytest
import yaml  # type: ignore[import-untyped]

from doctoc.toc import dump_toc, node_to_dict, parse_toc, toc_to_dict


def test_toc_to_dict_expands_shorthand(sample_json: str) -> None:
    """Leaf children are written as objects by default."""

    data = toc_to_dict(parse_toc(sample_json))

    assert data["intro"] == {"name": "Introduction"}
    assert data["start"]["children"]["install"] == {"name": "Installation"}
    assert list(data) == ["intro", "start", "runtime"]


def test_toc_to_dict_compact(sample_json: str) -> None:
    """Compact output uses bare strings for leaf children only."""

    data = toc_to_dict(parse_toc(sample_json), compact=True)

    # Top-level sections stay objects even when they are leaves.
    assert data["intro"] == {"name": "Introduction"}
    assert data["start"]["children"] == {
        "install": "Installation",
        "first_steps": "First Steps",
    }


@pytest.mark.parametrize("fmt", ["json", "yaml"])
@pytest.mark.parametrize("compact", [False, True])
def test_round_trip(sample_json: str, fmt: str, compact: bool) -> None:
    """Serializing and reloading yields an equal, ordered tree."""

    toc = parse_toc(sample_json)
    reloaded = parse_toc(dump_toc(toc, fmt=fmt, compact=compact), fmt=fmt)

    assert reloaded == toc
    assert list(reloaded["runtime"].children) == [
        "permissions",
        "compiler_apis",
    ]


def test_dump_json_keeps_order(sample_json: str) -> None:
    """JSON output lists keys in display order."""

    text = dump_toc(parse_toc(sample_json), compact=True)

    assert list(json.loads(text)) == ["intro", "start", "runtime"]
    assert text.index('"install"') < text.index('"first_steps"')


def test_dump_yaml_is_block_style(sample_json: str) -> None:
    """YAML output is readable and unsorted."""

    text = dump_toc(parse_toc(sample_json), fmt="yaml", compact=True)

    assert text.startswith("intro:\n  name: Introduction\n")
    assert yaml.safe_load(text)["start"]["children"]["install"] == (
        "Installation"
    )


def test_dump_unsupported_format(sample_json: str) -> None:
    """Unknown formats are refused."""

    with pytest.raises(ValueError):
        dump_toc(parse_toc(sample_json), fmt="xml")


def test_node_to_dict(sample_json: str) -> None:
    """A single node is written as an object with its children."""

    node = parse_toc(sample_json)["start"]

    assert node_to_dict(node, compact=True) == {
        "name": "Getting Started",
        "children": {"install": "Installation", "first_steps": "First Steps"},
    }
