"""
Exception types raised by the Chissor core.

Everything the core can fail with derives from ChissorError, so the
presentation layer can record any failure with a single handler.
InvariantViolation is the exception: it signals a caller bug and is
never shown as a user error by the App controller.
"""

from pathlib import Path
from typing import List, Optional, Sequence


class ChissorError(Exception):
    """Base class for Chissor errors."""


class LoadError(ChissorError):
    """Raised when a vocabulary source is malformed."""

    def __init__(self, source: str, reason: str, line_no: Optional[int] = None,
                 line: Optional[str] = None):
        self.source = source
        self.reason = reason
        self.line_no = line_no
        self.line = line
        if line_no is None:
            message = f"invalid dictionary {source}: {reason}"
        else:
            message = f"invalid dictionary entry in {source} at line {line_no}: {reason}"
        super().__init__(message)


class ParseError(ChissorError):
    """Raised when a word field cannot be parsed."""

    def __init__(self, field: str, value: str, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class BatchError(ChissorError):
    """Raised when a batch run stops on a failing file.

    Outputs written before the failure stay on disk and are listed in
    ``written``.
    """

    def __init__(self, path: Path, cause: Exception, written: Sequence[Path] = ()):
        self.path = Path(path)
        self.cause = cause
        self.written: List[Path] = list(written)
        super().__init__(f"batch operation failed at {self.path}: {cause}")


class InvariantViolation(ChissorError):
    """Raised when a caller breaks a documented precondition."""
