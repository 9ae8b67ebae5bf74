"""
Custom exceptions for the AVL tree.
"""

from typing import Any


class DuplicateValueError(Exception):
    """
    Raised by a strict tree when a value that is already present is inserted.

    The tree is never modified before this is raised.
    """

    def __init__(self, value: Any):
        """
        Initialize duplicate error.

        Args:
            value: The value that compared equal to an existing node.
        """
        self.value = value
        super().__init__(f"Failed to insert {value!r}: cannot add same value twice")
