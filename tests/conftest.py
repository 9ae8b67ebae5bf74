"""
Shared pytest fixtures for AVL tree tests.
"""

import pytest

from avltree import AVLTree
from avltree.models.node import Node


def _walk(node: Node | None, values: list) -> int:
    """Check every invariant below `node`, collecting values in order."""
    if node is None:
        return -1

    left_height = _walk(node.left, values)
    values.append(node.value)
    right_height = _walk(node.right, values)

    expected = 1 + max(left_height, right_height)
    assert node.height == expected, f"stale height at {node.value!r}"
    assert abs(left_height - right_height) <= 1, f"unbalanced at {node.value!r}"
    return expected


@pytest.fixture
def tree():
    """Provide a fresh AVLTree with natural ordering."""
    return AVLTree()


@pytest.fixture
def strict_tree():
    """Provide an AVLTree that raises on duplicates."""
    return AVLTree(strict=True)


@pytest.fixture(scope="session")
def in_order():
    """Provide a function returning the tree's values in order."""

    def collect(tree: AVLTree) -> list:
        values: list = []
        stack: list[Node] = []
        node = tree.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            values.append(node.value)
            node = node.right
        return values

    return collect


@pytest.fixture(scope="session")
def check_invariants():
    """Provide a function asserting order, balance and cached heights."""

    def check(tree: AVLTree) -> list:
        values: list = []
        _walk(tree.root, values)
        assert all(a < b for a, b in zip(values, values[1:])), "order violated"
        assert len(values) == tree.size()
        return values

    return check


@pytest.fixture(scope="session")
def shape():
    """Provide a function rendering the tree as nested (value, left, right) tuples."""

    def render(node: Node | None):
        if node is None:
            return None
        return (node.value, render(node.left), render(node.right))

    return lambda tree: render(tree.root)
