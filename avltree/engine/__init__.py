"""
Rebalancing engine for the AVL tree.
"""

from avltree.engine.rebalancer import Rebalancer

__all__ = ["Rebalancer"]
