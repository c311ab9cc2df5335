"""Document builder producing the Papier tree.

A line-oriented state machine with two modes:

- Top: a line starting with ``* `` (carriage returns ignored) opens a
  sub-document; every other line joins the current Text block, which is
  scanned and assembled into lines.
- InSubDocument: raw lines are collected until a line that is exactly
  ``}``. Contents are never parsed again, so sub-documents do not nest.

Each step finds the end of the current line, classifies it, then commits
past it. Positions only move forward.

Thread Safety:
Parser instances are single-use. The resulting tree is immutable.

"""

from __future__ import annotations

from papier.errors import StructuralError, StructuralErrorKind
from papier.lexer import Scanner, ScanMode
from papier.lexer.modes import CARRIAGE_RETURN, CLOSE_BRACE, NEWLINE, SUB_DOCUMENT_MARKER
from papier.location import SourceLocation
from papier.nodes import Block, Document, SubDocument, Text, Word
from papier.parsing import assemble, word_from_token
from papier.tokens import Token, TokenType
from papier.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Builder for Papier documents.

    Usage:
        >>> blocks = Parser("* Intro {\\nsome text\\n}\\n").parse()
        >>> blocks[0].contents
        ('some text',)

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_pos",
        "_lineno",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Papier source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._lineno = 1

    def parse(self) -> list[Block]:
        """Parse the source into top-level blocks.

        Raises:
            StructuralError: On an unterminated sub-document or an opener
                without ``{``
        """
        blocks: list[Block] = []
        while self._pos < self._source_len:
            if self._marker_end() != -1:
                blocks.append(self._parse_sub_document())
            else:
                blocks.append(self._parse_text())
        return blocks

    # =========================================================================
    # Line navigation
    # =========================================================================

    def _find_line_end(self) -> int:
        """Position of the next newline, or end of source."""
        idx = self._source.find(NEWLINE, self._pos)
        return idx if idx != -1 else self._source_len

    def _commit_line(self, line_end: int) -> None:
        """Move past ``line_end`` and its newline, if any."""
        self._pos = line_end
        if self._pos < self._source_len:
            self._pos += 1
            self._lineno += 1

    def _marker_end(self) -> int:
        """Position just past a ``* `` marker opening the current line, or -1.

        Carriage returns before or inside the marker are skipped.
        """
        pos = self._pos
        for char in SUB_DOCUMENT_MARKER:
            while pos < self._source_len and self._source[pos] == CARRIAGE_RETURN:
                pos += 1
            if pos == self._source_len or self._source[pos] != char:
                return -1
            pos += 1
        return pos

    def _location(self, start: int, end: int, lineno: int, end_lineno: int) -> SourceLocation:
        return SourceLocation(
            lineno=lineno,
            col_offset=1,
            offset=start,
            end_offset=end,
            end_lineno=end_lineno,
            source_file=self._source_file,
        )

    # =========================================================================
    # Top mode
    # =========================================================================

    def _parse_text(self) -> Text:
        """Collect lines up to the next opener (or EOF) into one Text block."""
        start = self._pos
        lineno = self._lineno
        last_lineno = lineno
        while self._pos < self._source_len and self._marker_end() == -1:
            last_lineno = self._lineno
            self._commit_line(self._find_line_end())

        scanner = Scanner(
            self._source,
            start=start,
            end=self._pos,
            lineno=lineno,
            source_file=self._source_file,
        )
        lines = tuple(assemble(scanner.scan()))
        return Text(
            location=self._location(start, self._pos, lineno, last_lineno),
            lines=lines,
        )

    # =========================================================================
    # InSubDocument mode
    # =========================================================================

    def _parse_sub_document(self) -> SubDocument:
        start = self._pos
        lineno = self._lineno
        line_end = self._find_line_end()
        title = self._parse_title(self._marker_end(), line_end)
        opened_at = self._location(start, line_end, lineno, lineno)
        logger.debug("opened sub-document at %s", opened_at)
        self._commit_line(line_end)

        contents: list[str] = []
        while self._pos < self._source_len:
            line_end = self._find_line_end()
            line = self._source[self._pos : line_end].replace(CARRIAGE_RETURN, "")
            close_lineno = self._lineno
            self._commit_line(line_end)
            if line == CLOSE_BRACE:
                logger.debug(
                    "closed sub-document opened at %s (%d content lines)",
                    opened_at,
                    len(contents),
                )
                return SubDocument(
                    location=self._location(start, self._pos, lineno, close_lineno),
                    title=title,
                    contents=tuple(contents),
                )
            contents.append(line)

        error_loc = SourceLocation.at_end(self._source, self._source_file)
        logger.debug("unterminated sub-document opened at %s", opened_at)
        raise StructuralError(
            StructuralErrorKind.UNTERMINATED_SUB_DOCUMENT,
            f"sub-document opened at line {lineno} is never closed with '}}'",
            error_loc,
            opened_at=opened_at,
        )

    def _parse_title(self, start: int, line_end: int) -> tuple[Word, ...]:
        """Parse the rest of an opener line: optional title words, then ``{``.

        A ``{`` only opens the block when it is the last thing on the line;
        earlier ones are ordinary title words.
        """
        scanner = Scanner(
            self._source,
            start=start,
            end=line_end,
            lineno=self._lineno,
            col=start - self._pos + 1,
            mode=ScanMode.TITLE,
            source_file=self._source_file,
        )
        tokens: list[Token] = []
        eof: Token | None = None
        for token in scanner.scan():
            if token.type is TokenType.EOF:
                eof = token
            elif token.type is not TokenType.BLANK:
                tokens.append(token)

        if not tokens or tokens[-1].type is not TokenType.BRACE_OPEN:
            assert eof is not None
            logger.debug("sub-document opener without '{' at %s", eof.location)
            raise StructuralError(
                StructuralErrorKind.MISSING_OPEN_BRACE,
                "expected '{' at the end of the sub-document opener",
                eof.location,
            )
        return tuple(word_from_token(token) for token in tokens[:-1])


def build(source: str, source_file: str | None = None) -> Document:
    """Build a Document from Papier source.

    Reads configuration from the current context (see ``papier.config``).

    Raises:
        StructuralError: On malformed sub-document nesting

    Example:
        >>> doc = build("hello #world\\n")
        >>> [w.literal for w in doc.children[0].lines[0].words]
        ['hello', '#world']
    """
    blocks = Parser(source, source_file=source_file).parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(source),
        source_file=source_file,
    )
    return Document(location=loc, children=tuple(blocks))
