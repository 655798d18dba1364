"""
Exception classes for blocklytree decoding and validation.

This module defines the exception types raised while decoding serialized
block programs and when a batch of collected structural failures is
surfaced to the caller.
"""

from dataclasses import dataclass


@dataclass
class ErrorContext:
    """
    Location information for error messages.

    Captures where in the block tree an error occurred so that messages can
    point at the offending block and element.

    Params:
        block_type: Type tag of the block being processed (e.g., "controls_if")
        x: Serialized x position of the block, if any
        y: Serialized y position of the block, if any
        element_tag: Tag of the serialized element being decoded
    """

    block_type: str | None = None
    x: str | None = None
    y: str | None = None
    element_tag: str | None = None

    def format_location(self) -> str:
        """
        Format the known location parts, one per line.

        Returns:
            Indented location description, empty when nothing is known
        """
        lines = []

        if self.block_type:
            if self.x or self.y:
                lines.append(f"  in block '{self.block_type}' at ({self.x}, {self.y})")
            else:
                lines.append(f"  in block '{self.block_type}'")

        if self.element_tag:
            lines.append(f"  element: <{self.element_tag}>")

        return "\n".join(lines)


class BlocklyTreeError(Exception):
    """Base exception for all blocklytree errors."""

    pass


class BlocklyDecodeError(BlocklyTreeError):
    """Raised when a serialized block program cannot be decoded."""

    def __init__(self, reason: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            reason: Why decoding failed
            context: Optional location of the offending element
        """
        self.reason = reason
        self.context = context

        message = f"Cannot decode block program: {reason}"
        if context:
            location_info = context.format_location()
            if location_info:
                message = f"{message}\n{location_info}"

        super().__init__(message)


class StructuralValidationError(BlocklyTreeError):
    """Raised when one or more structural failures were collected during a tree walk."""

    def __init__(self, issues: list[str], context: str):
        """
        Initialize the exception.

        Params:
            issues: Failure reasons in the order they were reported
            context: What was being walked when the failures were collected
        """
        self.issues = issues
        self.context = context
        issue_summary = "; ".join(issues)
        super().__init__(
            f"{len(issues)} structural issue(s) in {context}: {issue_summary}"
        )
