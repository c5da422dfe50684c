"""Node payloads: the measurable-content protocol and a label implementation."""

from layer_tree.content.base import Graphable
from layer_tree.content.label import Label, MonospaceFont, label_dimensions

__all__ = [
    "Graphable",
    "Label",
    "MonospaceFont",
    "label_dimensions",
]
