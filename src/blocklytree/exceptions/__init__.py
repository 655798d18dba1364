"""
blocklytree exception classes.

This package provides all exception types used throughout blocklytree for
consistent error handling and reporting.
"""

from blocklytree.exceptions.core import (
    BlocklyDecodeError,
    BlocklyTreeError,
    ErrorContext,
    StructuralValidationError,
)

__all__ = [
    "BlocklyTreeError",
    "BlocklyDecodeError",
    "StructuralValidationError",
    "ErrorContext",
]
