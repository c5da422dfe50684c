"""layer-tree: nested-box layout for trees of measurable content."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from loguru import logger

from layer_tree.config import LayoutConfig
from layer_tree.content import Graphable, Label, MonospaceFont
from layer_tree.errors import BrokenNode, EmptyNode, EmptyTree, LayoutError, NodeNotFound, TextMeasurementFailed
from layer_tree.geometry import Path
from layer_tree.layout import (
    NodeElement,
    PathElement,
    RenderedNode,
    SizedText,
    TextElement,
    graph_layer_tree,
    layout_node,
)
from layer_tree.tree import DiGraphTree, Tree
from layer_tree.types import Margins, Vec2, Winding

logger.disable("layer_tree")

__all__ = [
    "BrokenNode",
    "DiGraphTree",
    "EmptyNode",
    "EmptyTree",
    "Graphable",
    "Label",
    "LayoutConfig",
    "LayoutError",
    "Margins",
    "MonospaceFont",
    "NodeElement",
    "NodeNotFound",
    "Path",
    "PathElement",
    "RenderedNode",
    "SizedText",
    "TextElement",
    "TextMeasurementFailed",
    "Tree",
    "Vec2",
    "Winding",
    "graph_layer_tree",
    "layout_node",
    "layout_tree",
]


def layout_tree(tree: Tree, font: Any, config: LayoutConfig | None = None) -> dict[Hashable, RenderedNode]:
    """Lay out a tree using the settings in ``config``.

    Args:
        tree: Tree source whose payloads implement Graphable.
        font: Font handed unchanged to every payload's ``set_text``.
        config: Margins, origin, text size and depth limit; defaults if None.

    Returns:
        Rendered nodes keyed by node id.

    Raises:
        ValueError: If the configuration is out of range.
        LayoutError: If the tree is empty or any node fails to lay out.
    """
    cfg = config if config is not None else LayoutConfig()
    cfg.validate()
    return graph_layer_tree(font, tree, cfg.margins, cfg.position, cfg.text_size, max_depth=cfg.max_depth)
