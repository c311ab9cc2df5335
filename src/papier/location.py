"""Source positions for tokens, nodes and structural errors.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A span in the source buffer.

    Line and column numbers are 1-indexed and count Unicode code points.
    ``offset``/``end_offset`` are absolute indexes into the source string,
    so ``source[loc.offset:loc.end_offset]`` is the exact text of the span.

    Attributes:
        lineno: Starting line number
        col_offset: Starting column
        offset: Absolute start index
        end_offset: Absolute end index (exclusive)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column (optional)
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=1, source_file="notes.pap")
        >>> str(loc)
        'notes.pap:3:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location from this start to ``end``'s end."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )

    @classmethod
    def at_end(cls, source: str, source_file: str | None = None) -> SourceLocation:
        """Location of the end-of-input position of ``source``."""
        last_newline = source.rfind("\n")
        lineno = source.count("\n") + 1
        col = len(source) - last_newline
        end = len(source)
        return cls(
            lineno=lineno,
            col_offset=col,
            offset=end,
            end_offset=end,
            end_lineno=lineno,
            end_col_offset=col,
            source_file=source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for synthetic nodes."""
        return cls(lineno=0, col_offset=0)
