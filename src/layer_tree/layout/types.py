"""Layout output types shared by the engine and its callers."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any

from layer_tree.geometry import Path
from layer_tree.types import Vec2


@dataclass
class SizedText:
    """A measured block of text positioned at its anchor."""

    content: str
    dimensions: Vec2
    position: Vec2
    font: Any
    size: float


@dataclass
class PathElement:
    """The outline of a node."""

    path: Path


@dataclass
class TextElement:
    """The label of a node."""

    text: SizedText


NodeElement = PathElement | TextElement


@dataclass
class RenderedNode:
    """A positioned node with its drawables and outgoing links."""

    position: Vec2
    dimensions: Vec2
    node_elements: list[NodeElement] = field(default_factory=list)
    node_links: list[Hashable] = field(default_factory=list)
    truncated: bool = False

    def bounds(self) -> tuple[Vec2, Vec2]:
        return self.position, self.position + self.dimensions

    def contains(self, other: RenderedNode) -> bool:
        lo, hi = self.bounds()
        olo, ohi = other.bounds()
        return lo.x <= olo.x and lo.y <= olo.y and ohi.x <= hi.x and ohi.y <= hi.y

    @property
    def outline(self) -> Path:
        for element in self.node_elements:
            if isinstance(element, PathElement):
                return element.path
        raise ValueError("Rendered node has no outline")

    @property
    def text(self) -> SizedText:
        for element in self.node_elements:
            if isinstance(element, TextElement):
                return element.text
        raise ValueError("Rendered node has no text")
