"""
Custom exceptions for the deal message parser.

Extraction itself never fails on ambiguous text: uncertain fields are
omitted instead. The only hard failure is malformed input, which is
rejected before any extraction runs.
"""

from typing import Any


class DealParserError(Exception):
    """Base exception for all deal parser errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


# =============================================================================
# Input Errors
# =============================================================================


class InputError(DealParserError):
    """Base class for errors caused by the caller's arguments."""

    pass


class InvalidInputError(InputError):
    """Message or brand roster has the wrong type or exceeds limits."""

    pass


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionError(DealParserError):
    """Unexpected fault inside an extractor (a bug, not ambiguous text)."""

    pass


def describe_type(value: Any) -> str:
    """Short type label used in error context."""
    return type(value).__name__
