"""
Core blocklytree components.

This package provides the base model class and shared type aliases used
by the tree model and the codec.
"""

from blocklytree.core.tree_node import TreeNode
from blocklytree.core.types import Position

__all__ = [
    "TreeNode",
    "Position",
]
