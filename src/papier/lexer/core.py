"""Single-pass scanner with O(n) guaranteed performance.

Walks the source once, left to right, yielding one token per blank run,
word chunk or newline. Every position is consumed exactly once; there is
no rewind.

Thread Safety:
Scanner instances are single-use. Create one per source string (or window).
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from papier.config import get_parse_config
from papier.lexer.classifiers import PrefixClassifierMixin
from papier.lexer.modes import (
    BLANK_CHARS,
    CARRIAGE_RETURN,
    CHUNK_TERMINATORS,
    NEWLINE,
    OPEN_BRACE,
    ScanMode,
)
from papier.tokens import Token, TokenType


class Scanner(PrefixClassifierMixin):
    """Tokenizer for Papier text.

    Scans ``source[start:end]`` (the whole source by default). Offsets on
    the produced tokens are absolute, so a window of a larger buffer keeps
    accurate positions when ``lineno``/``col`` describe where it starts.

    Usage:
        >>> for token in Scanner("hello #world\\n").scan():
        ...     print(token)
        Token(WORD, 'hello', 1:1)
        Token(BLANK, ' ', 1:6)
        Token(TAG, '#world', 1:7)
        Token(LINE_BREAK, '\\n', 1:13)
        Token(EOF, '', 2:1)

    """

    __slots__ = (
        "_source",
        "_pos",
        "_end",
        "_lineno",
        "_col",
        "_mode",
        "_source_file",
        "_punctuation",
        "_fold_tag_case",
        "_started",
    )

    def __init__(
        self,
        source: str,
        *,
        start: int = 0,
        end: int | None = None,
        lineno: int = 1,
        col: int = 1,
        mode: ScanMode = ScanMode.TEXT,
        source_file: str | None = None,
    ) -> None:
        """Initialize scanner.

        Args:
            source: Papier source text
            start: Index where scanning begins
            end: Index where scanning stops (defaults to end of source)
            lineno: Line number of ``start``
            col: Column of ``start``
            mode: TEXT for prose lines, TITLE for a sub-document opener
            source_file: Optional source file path for locations
        """
        config = get_parse_config()
        self._source = source
        self._pos = start
        self._end = len(source) if end is None else end
        self._lineno = lineno
        self._col = col
        self._mode = mode
        self._source_file = source_file
        self._punctuation = config.punctuation
        self._fold_tag_case = config.fold_tag_case
        self._started = False

    def scan(self) -> Iterator[Token]:
        """Tokenize the window into a token stream.

        Yields:
            Token objects one at a time, ending with exactly one EOF

        Raises:
            RuntimeError: If the scanner has already been used
        """
        if self._started:
            msg = "Scanner instances are single-use; create a new Scanner to rescan"
            raise RuntimeError(msg)
        self._started = True
        return self._scan()

    def _scan(self) -> Iterator[Token]:
        source = self._source
        end = self._end
        while self._pos < end:
            char = source[self._pos]
            if char == NEWLINE:
                yield self._scan_line_break()
            elif char in BLANK_CHARS:
                yield self._scan_blank()
            else:
                yield self._scan_chunk()

        yield self._make_token(TokenType.EOF, "", "", self._pos, self._pos)

    def _scan_line_break(self) -> Token:
        start = self._pos
        token = self._make_token(TokenType.LINE_BREAK, NEWLINE, NEWLINE, start, start + 1)
        self._pos += 1
        self._lineno += 1
        self._col = 1
        return token

    def _scan_blank(self) -> Token:
        source = self._source
        start = self._pos
        pos = start
        while pos < self._end and source[pos] in BLANK_CHARS:
            pos += 1
        value = source[start:pos]
        token = self._make_token(TokenType.BLANK, value, value, start, pos)
        self._commit(pos)
        return token

    def _scan_chunk(self) -> Token:
        source = self._source
        start = self._pos
        pos = start
        while pos < self._end and source[pos] not in CHUNK_TERMINATORS:
            pos += 1
        text = source[start:pos].replace(CARRIAGE_RETURN, "")

        if self._mode is ScanMode.TITLE and text == OPEN_BRACE:
            token = self._make_token(TokenType.BRACE_OPEN, text, text, start, pos)
        else:
            token_type, payload, punctuation = self._classify_word(text)
            token = self._make_token(
                token_type, text, payload, start, pos, punctuation=punctuation
            )
        self._commit(pos)
        return token

    def _commit(self, pos: int) -> None:
        """Advance to ``pos`` on the current line."""
        self._col += pos - self._pos
        self._pos = pos

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        payload: str,
        start_pos: int,
        end_pos: int,
        *,
        punctuation: str | None = None,
    ) -> Token:
        return Token(
            type=token_type,
            value=value,
            payload=payload,
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=start_pos,
            _end_offset=end_pos,
            punctuation=punctuation,
            _source_file=self._source_file,
        )


def scan(source: str, *, source_file: str | None = None) -> Iterator[Token]:
    """Scan Papier source into a lazy, finite token stream.

    The stream is not restartable; call again to rescan.

    Example:
        >>> [t.type.name for t in scan("!!home.\\n")]
        ['ALIAS', 'LINE_BREAK', 'EOF']
    """
    return Scanner(source, source_file=source_file).scan()
