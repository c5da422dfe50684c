"""Path primitive for node outlines."""

from __future__ import annotations

from dataclasses import dataclass

from layer_tree.types import Vec2, Winding


@dataclass(frozen=True)
class Path:
    """A polygon described by its corner points."""

    points: tuple[Vec2, ...]
    closed: bool = True

    @classmethod
    def rectangle(cls, top_left: Vec2, bottom_right: Vec2, winding: Winding = Winding.Positive) -> Path:
        """Build a closed four-corner outline spanning ``top_left`` to ``bottom_right``."""
        x0, y0 = top_left.x, top_left.y
        x1, y1 = bottom_right.x, bottom_right.y
        if winding == Winding.Positive:
            corners = (Vec2(x0, y0), Vec2(x1, y0), Vec2(x1, y1), Vec2(x0, y1))
        else:
            corners = (Vec2(x0, y0), Vec2(x0, y1), Vec2(x1, y1), Vec2(x1, y0))
        return cls(points=corners, closed=True)

    def bounds(self) -> tuple[Vec2, Vec2]:
        if not self.points:
            raise ValueError("Empty path has no bounds")
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Vec2(min(xs), min(ys)), Vec2(max(xs), max(ys))
