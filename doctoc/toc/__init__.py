"""Table of contents model, loader and helpers."""

from .node import TocNode
from .parse import build_toc, load_toc, parse_toc
from .serialize import dump_toc, node_to_dict, toc_to_dict
from .table import TableOfContents
from .walk import find_node, iter_nodes, max_depth, render_outline

__all__ = [
    "TableOfContents",
    "TocNode",
    "build_toc",
    "dump_toc",
    "find_node",
    "iter_nodes",
    "load_toc",
    "max_depth",
    "node_to_dict",
    "parse_toc",
    "render_outline",
    "toc_to_dict",
]
