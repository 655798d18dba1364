"""
Structural accessors used by interpreters to walk decoded programs.
"""

from blocklytree.access.accessors import (
    SOCKET_ARITY_MESSAGE,
    block_statement_with_name,
    block_value_with_name,
    field_with_name,
    single_block_statement_with_name,
    single_block_value_with_name,
    single_field_with_name,
)

__all__ = [
    "SOCKET_ARITY_MESSAGE",
    "field_with_name",
    "single_field_with_name",
    "block_value_with_name",
    "block_statement_with_name",
    "single_block_value_with_name",
    "single_block_statement_with_name",
]
