"""
Abstract base classes for the AVL tree package.
"""

from avltree.interfaces.sorted_set import SortedSet

__all__ = ["SortedSet"]
