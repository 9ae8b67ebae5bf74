"""
Data models for the AVL tree.
"""

from avltree.models.exceptions import DuplicateValueError
from avltree.models.insert_result import InsertResult
from avltree.models.node import Node, node_height

__all__ = [
    "DuplicateValueError",
    "InsertResult",
    "Node",
    "node_height",
]
