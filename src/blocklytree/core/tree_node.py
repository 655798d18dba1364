"""
Core TreeNode base class for the blocklytree framework.

This module contains the TreeNode base model that every decoded block
program entity derives from.
"""

from pydantic import BaseModel, ConfigDict


class TreeNode(BaseModel):
    """
    Base class for all block tree entities.

    Nodes are constructed once at decode time and never mutated afterwards,
    so instances are frozen and may be shared between readers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
