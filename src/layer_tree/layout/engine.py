"""Nested-box tree layout.

Every node becomes a box holding its own label; its children are stacked
top-to-bottom inside it, below the label. A single depth-first pass
measures each label, recurses into the children and folds their sizes back
into the parent's box.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from loguru import logger

from layer_tree.errors import BrokenNode, EmptyNode, EmptyTree, NodeNotFound, TextMeasurementFailed
from layer_tree.geometry import Path
from layer_tree.layout.types import PathElement, RenderedNode, TextElement
from layer_tree.tree.base import Tree
from layer_tree.types import Margins, Vec2, Winding


def layout_node(
    node_id: Hashable,
    tree: Tree,
    font: Any,
    margins: Margins,
    depth: int,
    max_depth: int | None,
    position: Vec2,
    text_size: float,
) -> tuple[dict[Hashable, RenderedNode], Vec2]:
    """Lay out the subtree rooted at ``node_id`` with its top-left at ``position``.

    Returns every rendered node of the subtree keyed by id, plus the
    subtree root's dimensions so a parent can fold them into its own box.
    """
    _check_max_depth(max_depth)
    rendered: dict[Hashable, RenderedNode] = {}
    dimensions = _layout_into(rendered, node_id, tree, font, margins, depth, max_depth, position, text_size)
    return rendered, dimensions


def graph_layer_tree(
    font: Any,
    tree: Tree,
    margins: Margins,
    position: Vec2,
    text_size: float,
    max_depth: int | None = None,
) -> dict[Hashable, RenderedNode]:
    """Lay out a whole tree starting from its root.

    Raises:
        EmptyTree: If the tree has no root.
        LayoutError: Any node-level failure aborts the whole pass.
    """
    root_id = tree.get_root_id()
    if root_id is None:
        raise EmptyTree()
    if margins.may_overhang():
        logger.warning(
            "inner margin x {} exceeds twice the outer margin x {}; children may overhang their parent",
            margins.inner_margins.x,
            margins.outer_margins.x,
        )
    rendered, dimensions = layout_node(root_id, tree, font, margins, 0, max_depth, position, text_size)
    logger.info(
        "Laid out {} nodes from root {!r}: {}x{}",
        len(rendered),
        root_id,
        dimensions.x,
        dimensions.y,
    )
    return rendered


def _check_max_depth(max_depth: int | None) -> None:
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")


def _layout_into(
    rendered: dict[Hashable, RenderedNode],
    node_id: Hashable,
    tree: Tree,
    font: Any,
    margins: Margins,
    depth: int,
    max_depth: int | None,
    position: Vec2,
    text_size: float,
) -> Vec2:
    if not tree.has_node(node_id):
        raise NodeNotFound(node_id)
    try:
        content = tree.get_value(node_id)
    except LookupError as e:
        raise BrokenNode(node_id, str(e) or "value lookup failed") from e
    if content is None:
        raise EmptyNode(node_id)

    inner = margins.inner_margins
    outer = margins.outer_margins

    sized_text = content.set_text(font, None, None, position + inner, text_size)
    if sized_text is None:
        raise TextMeasurementFailed(node_id, text_size)

    width = sized_text.dimensions.x + inner.x * 2
    height = sized_text.dimensions.y + inner.y * 2

    children = tree.get_children_ids(node_id)
    truncated = max_depth is not None and depth >= max_depth and bool(children)
    if truncated:
        children = []

    cursor_x = position.x + inner.x
    cursor_y = position.y + sized_text.dimensions.y + inner.y * 2
    for child_id in children:
        child_dims = _layout_into(
            rendered,
            child_id,
            tree,
            font,
            margins,
            depth + 1,
            max_depth,
            Vec2(cursor_x, cursor_y),
            text_size,
        )
        # outer margin, same as the height folded below, so siblings stay inside the box
        cursor_y += child_dims.y + outer.y
        width = max(width, child_dims.x + outer.x * 2)
        height += child_dims.y + outer.y

    dimensions = Vec2(width, height)
    outline = Path.rectangle(position, position + dimensions, Winding.Positive)
    rendered[node_id] = RenderedNode(
        position=position,
        dimensions=dimensions,
        node_elements=[PathElement(outline), TextElement(sized_text)],
        node_links=list(content.get_links()),
        truncated=truncated,
    )
    logger.debug("node {!r} depth={} at ({}, {}) size {}x{}", node_id, depth, position.x, position.y, width, height)
    return dimensions
