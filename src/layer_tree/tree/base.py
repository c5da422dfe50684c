"""Read-only tree protocol consumed by the layout engine."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from layer_tree.content.base import Graphable


class Tree(Protocol):
    """Protocol that all tree sources must implement."""

    def get_root_id(self) -> Hashable | None:
        """Id of the root node, or None for an empty tree."""
        ...

    def has_node(self, node_id: Hashable) -> bool: ...

    def get_children_ids(self, node_id: Hashable) -> list[Hashable]:
        """Child ids in display order."""
        ...

    def get_value(self, node_id: Hashable) -> Graphable | None:
        """Payload of a node. Raises LookupError if it cannot be read."""
        ...
