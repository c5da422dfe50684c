"""DiGraphTree — a tree of Graphable payloads stored in a networkx DiGraph.

Edges point from parent to child. Each node keeps its payload in the
``data`` node attribute, and children are returned in the order their edges
were added.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from layer_tree.content.base import Graphable


class DiGraphTree:
    """Wraps a networkx DiGraph and exposes the read-only tree queries."""

    def __init__(self, digraph: nx.DiGraph | None = None, root: Hashable | None = None) -> None:
        self.digraph: nx.DiGraph = digraph if digraph is not None else nx.DiGraph()
        _check_tree(self.digraph, root)
        self.root = root

    @classmethod
    def from_digraph(cls, digraph: nx.DiGraph, root: Hashable | None = None) -> DiGraphTree:
        """Wrap an existing DiGraph after checking that it is a rooted tree."""
        return cls(digraph=digraph, root=root)

    def add_node(self, node_id: Hashable, value: Graphable | None, parent: Hashable | None = None) -> None:
        """Add a node under ``parent``; with no parent it becomes the root."""
        if node_id in self.digraph:
            raise ValueError(f"Duplicate node id {node_id!r}")
        if parent is None:
            if self.get_root_id() is not None:
                raise ValueError(f"Tree already has a root; cannot add {node_id!r} as a second root")
            self.digraph.add_node(node_id, data=value)
            self.root = node_id
            return
        if parent not in self.digraph:
            raise ValueError(f"Unknown parent {parent!r} for node {node_id!r}")
        self.digraph.add_node(node_id, data=value)
        self.digraph.add_edge(parent, node_id)

    def get_root_id(self) -> Hashable | None:
        """Explicit root if still in the graph, else the unique parentless node."""
        if self.root is not None and self.root in self.digraph:
            return self.root
        roots = [node_id for node_id in self.digraph.nodes if self.digraph.in_degree(node_id) == 0]
        if len(roots) > 1:
            raise ValueError(f"Graph has {len(roots)} parentless nodes; a tree has exactly one root")
        return roots[0] if roots else None

    def has_node(self, node_id: Hashable) -> bool:
        return node_id in self.digraph

    def get_children_ids(self, node_id: Hashable) -> list[Hashable]:
        if node_id not in self.digraph:
            return []
        return list(self.digraph.successors(node_id))

    def get_value(self, node_id: Hashable) -> Graphable | None:
        return self.digraph.nodes[node_id]["data"]

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def descendant_ids(self, node_id: Hashable) -> list[Hashable]:
        """All ids in the subtree rooted at ``node_id``, pre-order, root included."""
        return list(nx.dfs_preorder_nodes(self.digraph, node_id))


def _check_tree(digraph: nx.DiGraph, root: Hashable | None) -> None:
    if digraph.number_of_nodes() > 0 and not nx.is_arborescence(digraph):
        raise ValueError("Graph is not a tree: every node but the root needs exactly one parent")
    if root is None:
        return
    if root not in digraph:
        raise ValueError(f"Root {root!r} is not in the graph")
    if digraph.in_degree(root) != 0:
        raise ValueError(f"Root {root!r} has a parent")
