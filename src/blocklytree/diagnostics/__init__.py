"""
Structural failure reporting.

This package provides the failure channel protocol the accessors report to,
and a collecting implementation of it.
"""

from blocklytree.diagnostics.sink import Diagnostic, DiagnosticCollector, FailureChannel

__all__ = [
    "FailureChannel",
    "Diagnostic",
    "DiagnosticCollector",
]
