"""Layout engine and its output types."""

from __future__ import annotations

from layer_tree.layout.engine import graph_layer_tree, layout_node
from layer_tree.layout.types import NodeElement, PathElement, RenderedNode, SizedText, TextElement

__all__ = [
    "NodeElement",
    "PathElement",
    "RenderedNode",
    "SizedText",
    "TextElement",
    "graph_layer_tree",
    "layout_node",
]
