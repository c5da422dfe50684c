"""Centralized configuration for layer-tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from layer_tree.types import Margins, Vec2


@dataclass
class LayoutConfig:
    """Configuration for a layout pass."""

    inner_margins: Vec2 = field(default_factory=lambda: Vec2(4.0, 4.0))
    outer_margins: Vec2 = field(default_factory=lambda: Vec2(2.0, 2.0))
    position: Vec2 = field(default_factory=Vec2.zero)
    text_size: float = 14.0
    max_depth: int | None = None

    @property
    def margins(self) -> Margins:
        return Margins(inner_margins=self.inner_margins, outer_margins=self.outer_margins)

    def validate(self) -> None:
        """Raise ValueError if any setting is out of range."""
        if self.text_size <= 0:
            raise ValueError(f"text_size must be positive, got {self.text_size}")
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        for name, margin in (("inner_margins", self.inner_margins), ("outer_margins", self.outer_margins)):
            if margin.x < 0 or margin.y < 0:
                raise ValueError(f"{name} must be non-negative, got ({margin.x}, {margin.y})")
