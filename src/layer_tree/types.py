"""Shared value types for layer-tree.

Coordinates, sizes and margin settings used by the tree adapter, content
payloads and the layout engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class Vec2:
    """A 2D point or size (width, height)."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def scaled(self, fx: float, fy: float | None = None) -> Vec2:
        return Vec2(self.x * fx, self.y * (fx if fy is None else fy))

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class Margins:
    """Spacing used while laying out a tree.

    ``inner_margins`` pads a node's own text on every side; ``outer_margins``
    is reserved around each child subtree stacked inside a parent.
    """

    inner_margins: Vec2
    outer_margins: Vec2

    def may_overhang(self) -> bool:
        """True when a child can stick out past its parent's right edge."""
        return self.inner_margins.x > 2 * self.outer_margins.x


class Winding(Enum):
    Positive = auto()  # min -> (max.x, min.y) -> max -> (min.x, max.y)
    Negative = auto()  # min -> (min.x, max.y) -> max -> (max.x, min.y)
