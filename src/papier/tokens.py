"""Token and TokenType definitions for the Papier scanner.

The scanner produces a stream of Token objects that the line assembler and
the document builder consume. Each Token has a type, the literal text it
covers (carriage returns removed), the classified payload and an optional
trailing punctuation mark.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from papier.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the scanner."""

    # Stream structure
    EOF = auto()
    LINE_BREAK = auto()  # \n
    BLANK = auto()  # run of space / tab / carriage return

    # Prefixed words
    UUID = auto()  # !0f8fad5b-d9cb-469f-a165-70867728950e
    ALIAS = auto()  # !!name
    REF = auto()  # !?anything
    TAG = auto()  # #tag
    FMT = auto()  # @format

    # Everything else
    WORD = auto()

    # Structural punctuation (title mode only)
    BRACE_OPEN = auto()  # {


WORD_TYPES: frozenset[TokenType] = frozenset(
    {
        TokenType.UUID,
        TokenType.ALIAS,
        TokenType.REF,
        TokenType.TAG,
        TokenType.FMT,
        TokenType.WORD,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type
        value: Literal text of the token (carriage returns removed)
        payload: Classified payload without prefix or punctuation; equal to
            ``value`` for non-word tokens
        punctuation: Trailing punctuation mark attached to a word, if any
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _source_file: Optional source file path

    """

    type: TokenType
    value: str
    payload: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    punctuation: str | None = None
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from papier.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._lineno,
            end_col_offset=self._col + (self._end_offset - self._start_offset),
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def is_word(self) -> bool:
        return self.type in WORD_TYPES

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col
