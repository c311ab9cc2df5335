"""Tests for the scanner's token stream: words, blanks, breaks, modes."""

import pytest

from papier.lexer import Scanner, ScanMode, scan
from papier.tokens import TokenType


def _types(source: str) -> list[TokenType]:
    return [t.type for t in scan(source)]


class TestTokenStream:
    """Basic token shapes."""

    def test_words_and_tag(self) -> None:
        tokens = list(scan("hello #world\n"))
        assert [t.type for t in tokens] == [
            TokenType.WORD,
            TokenType.BLANK,
            TokenType.TAG,
            TokenType.LINE_BREAK,
            TokenType.EOF,
        ]
        assert tokens[0].payload == "hello"
        assert tokens[2].value == "#world"
        assert tokens[2].payload == "world"

    def test_empty_source_is_only_eof(self) -> None:
        assert _types("") == [TokenType.EOF]

    def test_blank_runs_collapse_to_one_token(self) -> None:
        tokens = list(scan("a \t  b"))
        assert [t.type for t in tokens] == [
            TokenType.WORD,
            TokenType.BLANK,
            TokenType.WORD,
            TokenType.EOF,
        ]
        assert tokens[1].value == " \t  "

    def test_each_newline_is_its_own_token(self) -> None:
        assert _types("\n\n") == [
            TokenType.LINE_BREAK,
            TokenType.LINE_BREAK,
            TokenType.EOF,
        ]

    def test_newline_never_part_of_word(self) -> None:
        tokens = list(scan("one\ntwo"))
        words = [t.value for t in tokens if t.is_word]
        assert words == ["one", "two"]

    def test_braces_are_words_in_text_mode(self) -> None:
        tokens = list(scan("{ }"))
        assert [t.type for t in tokens if t.type is not TokenType.BLANK] == [
            TokenType.WORD,
            TokenType.WORD,
            TokenType.EOF,
        ]


class TestCarriageReturn:
    """Carriage returns are insignificant wherever they appear."""

    def test_crlf_line_ending(self) -> None:
        tokens = list(scan("hello\r\n"))
        assert tokens[0].type is TokenType.WORD
        assert tokens[0].value == "hello"
        assert tokens[1].type is TokenType.LINE_BREAK

    def test_cr_inside_word_is_dropped(self) -> None:
        tokens = list(scan("ab\rcd"))
        assert [t.value for t in tokens if t.is_word] == ["abcd"]

    def test_cr_alone_is_not_a_separator(self) -> None:
        words = [t for t in scan("#ta\rg") if t.is_word]
        assert len(words) == 1
        assert words[0].type is TokenType.TAG
        assert words[0].payload == "tag"

    def test_cr_between_blanks_folds_into_blank(self) -> None:
        tokens = list(scan("a \r b"))
        assert [t.type for t in tokens] == [
            TokenType.WORD,
            TokenType.BLANK,
            TokenType.WORD,
            TokenType.EOF,
        ]

    def test_cr_never_in_payload(self) -> None:
        token = next(t for t in scan("!!na\rme\r\n") if t.is_word)
        assert token.type is TokenType.ALIAS
        assert token.payload == "name"


class TestTitleMode:
    """A lone brace is structural only when scanning an opener title."""

    def test_lone_brace_is_brace_open(self) -> None:
        source = "Intro {"
        tokens = list(Scanner(source, mode=ScanMode.TITLE).scan())
        assert [t.type for t in tokens] == [
            TokenType.WORD,
            TokenType.BLANK,
            TokenType.BRACE_OPEN,
            TokenType.EOF,
        ]

    def test_attached_brace_is_a_word(self) -> None:
        tokens = list(Scanner("Intro{", mode=ScanMode.TITLE).scan())
        assert tokens[0].type is TokenType.WORD
        assert tokens[0].value == "Intro{"

    def test_brace_with_trailing_cr(self) -> None:
        tokens = list(Scanner("{\r", mode=ScanMode.TITLE).scan())
        assert tokens[0].type is TokenType.BRACE_OPEN


class TestWindows:
    """Scanning a slice of a larger buffer."""

    def test_window_keeps_absolute_offsets(self) -> None:
        source = "skip me\nkeep #this\n"
        tokens = list(Scanner(source, start=8, end=len(source), lineno=2).scan())
        tag = next(t for t in tokens if t.type is TokenType.TAG)
        assert tag.location.offset == 13
        assert tag.location.lineno == 2
        assert tag.location.col_offset == 6
        assert source[tag.location.offset : tag.location.end_offset] == "#this"

    def test_window_end_is_respected(self) -> None:
        source = "one two three"
        tokens = list(Scanner(source, start=0, end=7).scan())
        assert [t.value for t in tokens if t.is_word] == ["one", "two"]


class TestSingleUse:
    def test_scanner_cannot_be_restarted(self) -> None:
        scanner = Scanner("abc")
        list(scanner.scan())
        with pytest.raises(RuntimeError):
            scanner.scan()

    def test_scan_is_lazy(self) -> None:
        stream = scan("a b c")
        first = next(stream)
        assert first.value == "a"
