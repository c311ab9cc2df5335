"""Exception classes for Papier.

Token-level malformation (a ``!`` not followed by a UUID, a ``#`` with no tag
name) is never an error: the scanner degrades such text to a plain word.
Only broken sub-document structure is fatal, and it is reported through
StructuralError with the position where it was detected.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from papier.location import SourceLocation


class PapierError(Exception):
    """Base exception for all Papier errors."""

    pass


class ParseError(PapierError):
    """Error while parsing Papier source.

    Raised when the parser encounters input it cannot turn into a tree.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class StructuralErrorKind(Enum):
    """Kinds of fatal sub-document nesting errors."""

    UNTERMINATED_SUB_DOCUMENT = "unterminated-sub-document"  # EOF before `}`
    MISSING_OPEN_BRACE = "missing-open-brace"  # `* title` without `{`


class StructuralError(ParseError):
    """Fatal error caused by unbalanced or misplaced sub-document delimiters.

    No partial tree is produced when this is raised.

    Attributes:
        kind: Which structural rule was broken
        location: Where the problem was detected
        opened_at: Where the offending sub-document was opened, if known
    """

    def __init__(
        self,
        kind: StructuralErrorKind,
        message: str,
        location: SourceLocation,
        opened_at: SourceLocation | None = None,
    ) -> None:
        self.kind = kind
        self.location = location
        self.opened_at = opened_at
        super().__init__(
            message,
            lineno=location.lineno,
            col_offset=location.col_offset,
            source_file=location.source_file,
        )

    @property
    def offset(self) -> int:
        """Absolute source index where the error was detected."""
        return self.location.offset
