"""Exceptions raised by the layout engine.

Every failure aborts the whole layout call; there is no partial result.
"""

from __future__ import annotations

from collections.abc import Hashable


class LayoutError(Exception):
    """Base exception for layer-tree errors."""

    node_id: Hashable | None = None


class EmptyTree(LayoutError):
    """Raised when the tree has no root."""

    def __init__(self) -> None:
        super().__init__("Empty tree: no root node to lay out")


class NodeNotFound(LayoutError):
    """Raised when a node id does not resolve in the tree."""

    def __init__(self, node_id: Hashable) -> None:
        self.node_id = node_id
        super().__init__(f"Node not found: {node_id!r}")


class BrokenNode(LayoutError):
    """Raised when a node exists but its value cannot be retrieved."""

    def __init__(self, node_id: Hashable, reason: str = "value lookup failed") -> None:
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"Tree broken at node {node_id!r}: {reason}")


class EmptyNode(LayoutError):
    """Raised when a node carries no payload."""

    def __init__(self, node_id: Hashable) -> None:
        self.node_id = node_id
        super().__init__(f"Empty node: {node_id!r} has no content")


class TextMeasurementFailed(LayoutError):
    """Raised when a node's content declines to produce a sized text."""

    def __init__(self, node_id: Hashable, size: float) -> None:
        self.node_id = node_id
        self.size = size
        super().__init__(f"Could not set text for node {node_id!r} at size {size}")
