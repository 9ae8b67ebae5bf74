"""
Rebalancer - Rotation procedures that restore AVL balance after an insert.
"""

import logging
from collections.abc import Callable
from typing import Any

from avltree.models.node import Node

logger = logging.getLogger(__name__)


class Rebalancer:
    """
    Restores the balance of a subtree whose children differ in height by 2.

    The case is chosen from the side that grew and from how the inserted
    value compares with the root of that side:

    - Left-Left:   single right rotation
    - Left-Right:  left rotation of the left child, then Left-Left
    - Right-Right: single left rotation
    - Right-Left:  right rotation of the right child, then Right-Right

    Every procedure takes ownership of a subtree root and returns the node
    that must take its place in the parent.
    """

    def __init__(self, compare: Callable[[Any, Any], int]) -> None:
        """
        Initialize rebalancer.

        Args:
            compare: Three-way comparator, negative / zero / positive.
        """
        self._compare = compare

    def rebalance(self, node: Node, value: Any) -> Node:
        """
        Rebalance `node` after `value` was inserted somewhere below it.

        Args:
            node: Subtree root whose cached height is already current.
            value: The value that was just inserted.

        Returns:
            The new subtree root. `node` itself if no rotation was needed.
        """
        balance = node.balance()

        if balance == 2:
            assert node.left is not None
            if self._compare(value, node.left.value) < 0:
                logger.debug(f"Left-Left rotation at {node.value!r}")
                return self.left_left(node)
            logger.debug(f"Left-Right rotation at {node.value!r}")
            return self.left_right(node)

        if balance == -2:
            assert node.right is not None
            if self._compare(value, node.right.value) < 0:
                logger.debug(f"Right-Left rotation at {node.value!r}")
                return self.right_left(node)
            logger.debug(f"Right-Right rotation at {node.value!r}")
            return self.right_right(node)

        return node

    def left_left(self, node: Node) -> Node:
        """Resolve a Left-Left imbalance with one right rotation."""
        new_root = self.rotate_right(node)
        # Demoted node first, the promoted root depends on it
        node.update_height()
        new_root.update_height()
        return new_root

    def right_right(self, node: Node) -> Node:
        """Resolve a Right-Right imbalance with one left rotation."""
        new_root = self.rotate_left(node)
        node.update_height()
        new_root.update_height()
        return new_root

    def left_right(self, node: Node) -> Node:
        """
        Resolve a Left-Right imbalance.

        Steps:
        1) Right-Right on the left child, so its heavy side matches the root's
        2) Left-Left on the root
        """
        assert node.left is not None
        node.left = self.right_right(node.left)
        return self.left_left(node)

    def right_left(self, node: Node) -> Node:
        """
        Resolve a Right-Left imbalance.

        Steps:
        1) Left-Left on the right child, so its heavy side matches the root's
        2) Right-Right on the root
        """
        assert node.right is not None
        node.right = self.left_left(node.right)
        return self.right_right(node)

    @staticmethod
    def rotate_left(node: Node) -> Node:
        """
        Perform one left rotation.

        The right child becomes the subtree root and adopts `node` as its left
        child. `node` takes over the right child's former left subtree.
        Heights are recomputed for the demoted then the promoted node.
        """
        right = node.right
        assert right is not None
        node.right = right.left
        right.left = node

        node.update_height()
        right.update_height()
        return right

    @staticmethod
    def rotate_right(node: Node) -> Node:
        """Perform one right rotation, the mirror of rotate_left."""
        left = node.left
        assert left is not None
        node.left = left.right
        left.right = node

        node.update_height()
        left.update_height()
        return left
