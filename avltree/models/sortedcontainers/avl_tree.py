"""
AVL Tree implementation for sorted, duplicate-free value storage.

Height-balanced: the children of every node differ in height by at most 1.
"""

import logging
from collections.abc import Callable
from typing import Any

from avltree.engine.rebalancer import Rebalancer
from avltree.interfaces.sorted_set import SortedSet
from avltree.models.exceptions import DuplicateValueError
from avltree.models.insert_result import InsertResult
from avltree.models.node import Node

logger = logging.getLogger(__name__)


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ordering."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class AVLTree(SortedSet):
    """
    AVL Tree implementation of SortedSet.

    Properties maintained after every insert:
    1. In-order values are strictly ascending (no duplicates)
    2. Child heights of every node differ by at most 1
    3. Every cached height equals 1 + max(child heights), 0 for a leaf
    """

    def __init__(
        self,
        comparator: Callable[[Any, Any], int] | None = None,
        strict: bool = False,
    ) -> None:
        """
        Initialize an empty tree.

        Args:
            comparator: Three-way comparator returning negative / zero /
                        positive. Defaults to natural ordering.
            strict: If True, inserting a duplicate raises DuplicateValueError
                    instead of returning DUPLICATE_IGNORED.
        """
        if comparator is not None and not callable(comparator):
            raise TypeError(f"comparator must be callable, got {type(comparator).__name__}")
        if not isinstance(strict, bool):
            raise TypeError(f"strict must be a bool, got {type(strict).__name__}")

        self._compare = comparator if comparator is not None else natural_compare
        self._strict = strict
        self._rebalancer = Rebalancer(self._compare)
        self._root: Node | None = None
        self._size: int = 0

    @property
    def root(self) -> Node | None:
        return self._root

    @property
    def strict(self) -> bool:
        return self._strict

    def insert(self, value: Any) -> InsertResult:
        """Insert a value, rebalancing on the way back up. O(log N)"""
        size_before = self._size
        self._root = self._insert(self._root, value)

        if self._size > size_before:
            return InsertResult.INSERTED

        logger.debug(f"Failed to insert {value!r}: cannot add same value twice")
        if self._strict:
            raise DuplicateValueError(value)
        return InsertResult.DUPLICATE_IGNORED

    def has(self, value: Any) -> bool:
        """Check if a value is stored. O(log N)"""
        current = self._root
        while current is not None:
            cmp = self._compare(value, current.value)
            if cmp < 0:
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                return True
        return False

    def height(self) -> int:
        if self._root is None:
            return 0
        return self._root.height

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _insert(self, node: Node | None, value: Any) -> Node:
        """
        Insert into the subtree rooted at `node`.

        Args:
            node: Subtree root, None for an empty slot.
            value: Value to insert.

        Returns:
            The node that now roots this subtree.
        """
        if node is None:
            self._size += 1
            return Node(value=value)

        cmp = self._compare(value, node.value)
        if cmp < 0:
            node.left = self._insert(node.left, value)
        elif cmp > 0:
            node.right = self._insert(node.right, value)
        else:
            # Duplicate, nothing below changed
            return node

        node.update_height()
        return self._rebalancer.rebalance(node, value)

    def __repr__(self) -> str:
        return f"AVLTree(size={self._size}, height={self.height()})"
