"""Line assembly: token stream to Line nodes.

Blank runs separate words and are dropped. A line break closes the current
line and is discarded. The assembler keeps no state beyond the line being
built and knows nothing about sub-documents.
"""

from collections.abc import Iterable, Iterator

from papier.location import SourceLocation
from papier.nodes import Alias, Fmt, Line, Plain, Ref, Tag, Uuid, Word
from papier.tokens import Token, TokenType

_WORD_NODES = {
    TokenType.UUID: Uuid,
    TokenType.ALIAS: Alias,
    TokenType.REF: Ref,
    TokenType.TAG: Tag,
    TokenType.FMT: Fmt,
    TokenType.WORD: Plain,
}


def word_from_token(token: Token) -> Word:
    """Build the word node for a word token.

    Structural tokens (a title's ``{`` in a non-final position) become
    plain words.
    """
    node_cls = _WORD_NODES.get(token.type, Plain)
    return node_cls(
        location=token.location,
        payload=token.payload,
        punctuation=token.punctuation,
    )


def assemble(tokens: Iterable[Token]) -> Iterator[Line]:
    """Group tokens into lines, lazily.

    A final line without a trailing newline is still emitted; nothing is
    emitted for the empty tail after a final newline.

    Example:
        >>> from papier.lexer import scan
        >>> [line.text for line in assemble(scan("a  b\\n\\nc"))]
        ['a b', '', 'c']
    """
    words: list[Word] = []
    first: Token | None = None

    for token in tokens:
        if token.type is TokenType.EOF:
            if first is not None:
                yield _make_line(words, first, token)
            return

        if first is None:
            first = token

        if token.type is TokenType.LINE_BREAK:
            yield _make_line(words, first, token)
            words = []
            first = None
        elif token.type is not TokenType.BLANK:
            words.append(word_from_token(token))


def _make_line(words: list[Word], first: Token, last: Token) -> Line:
    loc = SourceLocation(
        lineno=first.lineno,
        col_offset=first.col,
        offset=first.location.offset,
        end_offset=last.location.end_offset,
        end_lineno=last.lineno,
        end_col_offset=last.location.end_col_offset,
        source_file=first.location.source_file,
    )
    return Line(location=loc, words=tuple(words))
