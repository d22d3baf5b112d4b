"""Root of a parsed table of contents."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from attrs import define, field

from .node import TocNode, ordered_items
from .types import SectionMap


@define(slots=True)
class TableOfContents(Mapping):
    """Ordered, read-only mapping of top-level slugs to sections.

    Attributes:
        sections: Top-level entries in display order.
    """

    sections: SectionMap = field(factory=dict, eq=ordered_items)

    def __getitem__(self, key: str) -> TocNode:
        return self.sections[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def __contains__(self, key: object) -> bool:
        return key in self.sections
