"""
InsertResult - Outcome of a single insert call.
"""

from enum import IntEnum


class InsertResult(IntEnum):
    """Outcome of inserting a value into the tree."""

    INSERTED = 0  # A new node was created
    DUPLICATE_IGNORED = 1  # Value already present, tree left unchanged
