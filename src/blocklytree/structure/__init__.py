"""
Block tree model and traversal.

This package contains the immutable structures a decoded program is made
of, along with read-only helpers for walking them.
"""

from blocklytree.structure.blocks import (
    Block,
    BlockField,
    BlockMutation,
    BlockStatement,
    BlockValue,
    Document,
)
from blocklytree.structure.traversal import iter_chain, walk

__all__ = [
    "Document",
    "Block",
    "BlockValue",
    "BlockField",
    "BlockStatement",
    "BlockMutation",
    "iter_chain",
    "walk",
]
