"""Custom exceptions for strictfmt."""

from __future__ import annotations

from typing import Any

__all__ = [
    "ArgumentTypeMismatchError",
    "FailwithError",
    "FormatError",
    "InvalidDirectiveError",
    "ScanError",
    "SinkWriteError",
    "StrictFmtError",
    "UnsupportedFlagError",
]


class StrictFmtError(Exception):
    """Base exception for all strictfmt errors."""


class FormatError(StrictFmtError):
    """Raised when a format string cannot be parsed.

    ``position`` is the zero-based index into the raw format string.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class InvalidDirectiveError(FormatError):
    """Raised for a malformed ``%`` sequence."""


class UnsupportedFlagError(FormatError):
    """Raised when a directive carries a flag the engine does not support (``#``)."""

    def __init__(self, message: str, flag: str, position: int) -> None:
        super().__init__(message, position)
        self.flag = flag


class ArgumentTypeMismatchError(StrictFmtError, TypeError):
    """Raised by the binding layer when arguments do not fit the derived chain.

    Attributes:
        slot: Zero-based argument slot index, or ``None`` for arity errors.
        expected: Human-readable name of the expected argument kind.
        actual: The offending value (``None`` for arity errors).
    """

    def __init__(
        self,
        message: str,
        slot: int | None = None,
        expected: str | None = None,
        actual: Any = None,
    ) -> None:
        super().__init__(message)
        self.slot = slot
        self.expected = expected
        self.actual = actual


class SinkWriteError(StrictFmtError):
    """Raised when the underlying sink rejects a write; the render is aborted."""


class FailwithError(StrictFmtError):
    """Terminal condition raised by ``failwithf`` carrying the rendered message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ScanError(StrictFmtError):
    """Raised when ``sscanf`` cannot match or convert its input."""
