"""
SortedSet abstract base class for ordered, duplicate-free containers.
"""

from abc import ABC, abstractmethod
from typing import Any

from avltree.models.insert_result import InsertResult


class SortedSet(ABC):
    """
    Abstract base class for sorted sets of mutually comparable values.

    Implementations:
    - AVLTree: height-balanced, rebalances on every insert
    """

    @abstractmethod
    def insert(self, value: Any) -> InsertResult:
        """
        Insert a value.

        Args:
            value: The value to insert. Must be comparable with stored values.

        Returns:
            INSERTED if a new entry was created, DUPLICATE_IGNORED if an
            equal value was already present.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, value: Any) -> bool:
        """
        Check if a value is present.

        Args:
            value: The value to look up.

        Returns:
            True if an equal value is stored, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def height(self) -> int:
        """
        Return the height of the underlying structure.

        Returns:
            0 for an empty or single-entry set.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of stored values.

        Time complexity: O(1)
        """
        pass
