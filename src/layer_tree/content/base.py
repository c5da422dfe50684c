"""Measurable-content protocol."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from layer_tree.types import Vec2

if TYPE_CHECKING:
    from layer_tree.layout.types import SizedText


@runtime_checkable
class Graphable(Protocol):
    """Protocol that every tree node payload must implement."""

    def set_text(
        self,
        font: Any,
        max_width: int | None,
        max_height: int | None,
        position: Vec2,
        size: float,
    ) -> SizedText | None:
        """Measure the content at ``position``; None if it cannot be measured."""
        ...

    def get_links(self) -> list[Hashable]:
        """Ids of the nodes this content points to."""
        ...
