"""Tests for prefixed-word classification and plain-word fallback.

Overlapping prefixes (``!``, ``!!``, ``!?``) are resolved longest first;
any malformed payload degrades to a plain word over the same text.
"""

import pytest

from papier.config import ParseConfig, parse_config_context
from papier.lexer import scan
from papier.lexer.classifiers import PREFIX_RULES
from papier.tokens import Token, TokenType

UUID = "0f8fad5b-d9cb-469f-a165-70867728950e"


def _word(source: str) -> Token:
    words = [t for t in scan(source) if t.is_word]
    assert len(words) == 1, f"expected one word in {source!r}, got {words}"
    return words[0]


class TestPrefixOrdering:
    """Candidate order is by prefix length first, precedence second."""

    def test_two_char_prefixes_come_first(self) -> None:
        prefixes = [rule.prefix for rule in PREFIX_RULES]
        assert prefixes[:2] == ["!!", "!?"]
        assert prefixes.index("!") > prefixes.index("!?")

    def test_uuid_precedence_orders_single_char_prefixes(self) -> None:
        prefixes = [rule.prefix for rule in PREFIX_RULES]
        assert prefixes[2] == "!"


class TestUuid:
    def test_valid_uuid(self) -> None:
        token = _word(f"!{UUID}")
        assert token.type is TokenType.UUID
        assert token.payload == UUID

    def test_uppercase_hex_is_plain(self) -> None:
        token = _word(f"!{UUID.upper()}")
        assert token.type is TokenType.WORD
        assert token.payload == f"!{UUID.upper()}"

    def test_not_a_uuid_is_plain(self) -> None:
        token = _word("!not-a-uuid")
        assert token.type is TokenType.WORD
        assert token.payload == "!not-a-uuid"
        assert token.punctuation is None

    def test_uuid_with_trailing_text_is_plain(self) -> None:
        token = _word(f"!{UUID}x")
        assert token.type is TokenType.WORD

    def test_short_group_is_plain(self) -> None:
        token = _word("!0f8fad5b-d9cb-469f-a165-7086772895")
        assert token.type is TokenType.WORD

    def test_bare_bang_is_plain(self) -> None:
        token = _word("!")
        assert token.type is TokenType.WORD
        assert token.payload == "!"


class TestAlias:
    def test_alias(self) -> None:
        token = _word("!!my-alias")
        assert token.type is TokenType.ALIAS
        assert token.payload == "my-alias"

    def test_alias_with_punctuation(self) -> None:
        token = _word("!!my-alias.")
        assert token.type is TokenType.ALIAS
        assert token.payload == "my-alias"
        assert token.punctuation == "."

    def test_alias_is_one_token_not_bang_plus_word(self) -> None:
        tokens = [t for t in scan("!!home") if t.type is not TokenType.EOF]
        assert len(tokens) == 1
        assert tokens[0].type is TokenType.ALIAS

    def test_alias_must_start_with_letter(self) -> None:
        token = _word("!!1st")
        assert token.type is TokenType.WORD
        assert token.payload == "!!1st"

    def test_empty_alias_is_plain(self) -> None:
        token = _word("!!")
        assert token.type is TokenType.WORD


class TestRef:
    def test_ref_takes_any_text(self) -> None:
        token = _word("!?https://example.com/a#b")
        assert token.type is TokenType.REF
        assert token.payload == "https://example.com/a#b"

    def test_ref_keeps_trailing_mark(self) -> None:
        token = _word("!?roadmap.")
        assert token.type is TokenType.REF
        assert token.payload == "roadmap."
        assert token.punctuation is None

    def test_ref_of_alias_text_is_not_alias(self) -> None:
        token = _word("!?home")
        assert token.type is TokenType.REF

    def test_empty_ref_is_plain(self) -> None:
        assert _word("!?").type is TokenType.WORD


class TestTag:
    @pytest.mark.parametrize("payload", ["todo", "TODO", "2024", "a-b_c", "Mixed-Case"])
    def test_valid_tags(self, payload: str) -> None:
        token = _word(f"#{payload}")
        assert token.type is TokenType.TAG
        assert token.payload == payload

    @pytest.mark.parametrize("source", ["#", "#-x", "#_x", "#a.b", "#ñ"])
    def test_invalid_tags_are_plain(self, source: str) -> None:
        token = _word(source)
        assert token.type is TokenType.WORD

    def test_tag_with_exclamation(self) -> None:
        token = _word("#urgent!")
        assert token.type is TokenType.TAG
        assert token.payload == "urgent"
        assert token.punctuation == "!"

    def test_hash_mid_word_is_plain(self) -> None:
        token = _word("tag#foo")
        assert token.type is TokenType.WORD
        assert token.payload == "tag#foo"

    def test_fold_tag_case(self) -> None:
        with parse_config_context(ParseConfig(fold_tag_case=True)):
            token = _word("#ToDo")
        assert token.payload == "todo"
        assert token.value == "#ToDo"


class TestFmt:
    def test_fmt(self) -> None:
        token = _word("@code")
        assert token.type is TokenType.FMT
        assert token.payload == "code"

    def test_fmt_is_lowercase_only(self) -> None:
        assert _word("@Code").type is TokenType.WORD

    def test_email_is_plain(self) -> None:
        assert _word("me@example.com").type is TokenType.WORD


class TestPunctuation:
    @pytest.mark.parametrize("mark", list(".,;:!?"))
    def test_every_mark_attaches(self, mark: str) -> None:
        token = _word(f"@bold{mark}")
        assert token.type is TokenType.FMT
        assert token.punctuation == mark

    def test_two_marks_make_a_plain_word(self) -> None:
        token = _word("#tag!!")
        assert token.type is TokenType.WORD
        assert token.payload == "#tag!!"
        assert token.punctuation is None

    @pytest.mark.parametrize("source", ["done.", "wait,", "really?!", "!nope."])
    def test_plain_word_keeps_its_marks(self, source: str) -> None:
        token = _word(source)
        assert token.type is TokenType.WORD
        assert token.payload == source
        assert token.punctuation is None

    def test_lone_mark_stays_payload(self) -> None:
        token = _word("?")
        assert token.payload == "?"
        assert token.punctuation is None

    def test_custom_punctuation_set(self) -> None:
        with parse_config_context(ParseConfig(punctuation=frozenset("."))):
            token = _word("#tag!")
        assert token.type is TokenType.WORD
        assert token.punctuation is None
