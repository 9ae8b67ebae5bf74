"""
Node - Tree node holding a value and its cached subtree height.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """
    Node in the AVL Tree.

    Attributes:
        value: The stored value. Never changed after the node is created.
        height: Cached subtree height. 0 for a leaf.
        left: Left child (all values compare less than `value`).
        right: Right child (all values compare greater than `value`).
    """

    value: Any
    height: int = 0
    left: "Node | None" = None
    right: "Node | None" = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def update_height(self) -> None:
        """Recompute the cached height from the children's cached heights."""
        self.height = 1 + max(node_height(self.left), node_height(self.right))

    def balance(self) -> int:
        """Return left height minus right height."""
        return node_height(self.left) - node_height(self.right)


def node_height(node: Node | None) -> int:
    """
    Get the cached height of a possibly absent node.

    An absent child counts as -1 so that a leaf works out to 0.
    """
    if node is None:
        return -1
    return node.height
