"""
Failure channel used by the structural accessors.

Accessors never raise on malformed trees. They report the problem to a
failure channel supplied by the caller and hand back a safe default, so a
single walk over a program can collect every structural problem before the
interpreter decides to give up.
"""

import logging
from typing import Protocol, runtime_checkable

from attrs import frozen

from blocklytree.exceptions import StructuralValidationError

logger = logging.getLogger(__name__)


@runtime_checkable
class FailureChannel(Protocol):
    """Anything that can receive a structural failure report."""

    def fail(self, reason: str) -> None: ...


@frozen
class Diagnostic:
    """A single reported failure, numbered in reporting order."""

    reason: str
    sequence: int

    def __str__(self) -> str:
        return self.reason


class DiagnosticCollector:
    """Failure channel that records every report for later inspection.

    Responsibilities:
      - Keep reported failures in the order they arrived.
      - Log each failure as it is reported.
      - Turn a non-empty batch into a single StructuralValidationError on request.
    """

    def __init__(self):
        self._diagnostics: list[Diagnostic] = []

    def fail(self, reason: str) -> None:
        """Record a failure.

        Params:
            reason: Human-readable description of the violated contract.
        """
        diagnostic = Diagnostic(reason=reason, sequence=len(self._diagnostics))
        self._diagnostics.append(diagnostic)
        logger.warning("Structural failure #%d: %s", diagnostic.sequence, reason)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    @property
    def reasons(self) -> list[str]:
        return [d.reason for d in self._diagnostics]

    @property
    def count(self) -> int:
        return len(self._diagnostics)

    @property
    def failed(self) -> bool:
        return bool(self._diagnostics)

    def clear(self) -> None:
        """Forget every recorded failure."""
        self._diagnostics.clear()

    def raise_if_failed(self, context: str = "block program") -> None:
        """Raise if any failure has been recorded.

        Params:
            context: Description of what was walked, used in the error message.

        Raises:
            StructuralValidationError: If at least one failure was reported.
        """
        if self._diagnostics:
            raise StructuralValidationError(self.reasons, context)
