"""Single entry of a table of contents."""

from __future__ import annotations

from attrs import define, field

from .types import ChildMap


def ordered_items(mapping: ChildMap) -> list:
    """Return mapping items as a list so comparisons honor key order."""
    return list(mapping.items())


@define(slots=True)
class TocNode:
    """Entry of the table of contents.

    Attributes:
        key: Slug under which the node is stored in its parent, used as a
            stable identifier and URL segment.
        name: Display label.
        children: Ordered child entries keyed by slug. Empty for a leaf.
    """

    key: str
    name: str
    children: ChildMap = field(factory=dict, repr=False, eq=ordered_items)

    @property
    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return not self.children
