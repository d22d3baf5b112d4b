"""Common type aliases for table of contents structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .node import TocNode  # noqa: F401


ChildMap = dict[str, "TocNode"]
SectionMap = dict[str, "TocNode"]
SlugPath = tuple[str, ...]
NodeDict = dict[str, Any]
