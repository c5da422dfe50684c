"""Tree sources: the read-only protocol and a networkx-backed adapter."""

from layer_tree.tree.base import Tree
from layer_tree.tree.digraph import DiGraphTree

__all__ = [
    "DiGraphTree",
    "Tree",
]
