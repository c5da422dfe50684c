"""Plain-text labels measured with a fixed-pitch font."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from typing import Any

from layer_tree.layout.types import SizedText
from layer_tree.types import Vec2


@dataclass(frozen=True)
class MonospaceFont:
    """A fixed-pitch font described as ratios of the text size."""

    char_width: float = 0.6
    line_height: float = 1.25


def label_dimensions(label: str) -> tuple[int, int]:
    """Return (longest line length, line count) for a label."""
    if not label:
        return (0, 1)
    lines = label.split("\n")
    max_w = max(len(line) for line in lines)
    return (max_w, len(lines))


@dataclass(frozen=True)
class Label:
    """Graphable payload holding a text label and outgoing links."""

    text: str
    links: Sequence[Hashable] = field(default_factory=tuple)

    def set_text(
        self,
        font: Any,
        max_width: int | None,
        max_height: int | None,
        position: Vec2,
        size: float,
    ) -> SizedText | None:
        if not isinstance(font, MonospaceFont) or size <= 0:
            return None
        max_line_w, line_count = label_dimensions(self.text)
        dimensions = Vec2(max_line_w * font.char_width, line_count * font.line_height).scaled(size)
        if max_width is not None and dimensions.x > max_width:
            return None
        if max_height is not None and dimensions.y > max_height:
            return None
        return SizedText(
            content=self.text,
            dimensions=dimensions,
            position=position,
            font=font,
            size=size,
        )

    def get_links(self) -> list[Hashable]:
        return list(self.links)
