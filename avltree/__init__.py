"""
Self-balancing binary search tree (AVL tree).

This package provides an ordered, duplicate-free container with:
- insert(value) - O(log N), rebalances with single or double rotations
- height() - O(1), cached height of the root (0 for empty or single node)
- has(value) - O(log N) membership check
- size() - O(1) number of stored values
"""

from avltree.models.exceptions import DuplicateValueError
from avltree.models.insert_result import InsertResult
from avltree.models.sortedcontainers.avl_tree import AVLTree

__all__ = ["AVLTree", "DuplicateValueError", "InsertResult"]
