"""Prefixed-word classifier mixin.

Five prefix forms compete for a chunk: ``!!`` (alias), ``!?`` (reference),
``!`` (UUID), ``#`` (tag) and ``@`` (format). Candidates are tried longest
prefix first; the nominal precedence only orders prefixes of equal length.
A chunk whose payload does not fit the candidate's pattern falls through to
the next candidate and finally to a plain word covering the same text.

Only forms whose payload cannot contain a punctuation mark (UUID, alias,
tag, format) take an optional trailing mark. References and plain words
are greedy over non-blank text and keep the mark in their payload.
"""

import re
from typing import NamedTuple

from papier.tokens import TokenType

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
)
ALIAS_PATTERN = re.compile(r"[a-zA-Z][-_a-zA-Z0-9]*")
REF_PATTERN = re.compile(r"[^ \t\n]+")
TAG_PATTERN = re.compile(r"[a-z0-9][-_a-z0-9]*", re.IGNORECASE | re.ASCII)
FMT_PATTERN = re.compile(r"[a-z][-_a-z0-9]*")


class PrefixRule(NamedTuple):
    token_type: TokenType
    prefix: str
    pattern: re.Pattern[str]
    precedence: int
    punctuated: bool = True


PREFIX_RULES: tuple[PrefixRule, ...] = tuple(
    sorted(
        (
            PrefixRule(TokenType.UUID, "!", UUID_PATTERN, 2),
            PrefixRule(TokenType.ALIAS, "!!", ALIAS_PATTERN, 1),
            PrefixRule(TokenType.REF, "!?", REF_PATTERN, 1, punctuated=False),
            PrefixRule(TokenType.TAG, "#", TAG_PATTERN, 1),
            PrefixRule(TokenType.FMT, "@", FMT_PATTERN, 1),
        ),
        key=lambda rule: (-len(rule.prefix), -rule.precedence),
    )
)


class PrefixClassifierMixin:
    """Mixin providing word classification.

    Required Host Attributes:
        - _punctuation: frozenset[str]
        - _fold_tag_case: bool

    """

    _punctuation: frozenset[str]
    _fold_tag_case: bool

    def _classify_word(self, text: str) -> tuple[TokenType, str, str | None]:
        """Classify a chunk (carriage returns already removed).

        Args:
            text: Non-empty run of non-blank characters

        Returns:
            (token_type, payload, punctuation)
        """
        for rule in PREFIX_RULES:
            if not text.startswith(rule.prefix):
                continue
            matched = self._match_payload(
                text[len(rule.prefix) :], rule.pattern, punctuated=rule.punctuated
            )
            if matched is None:
                continue
            payload, punctuation = matched
            if rule.token_type is TokenType.TAG and self._fold_tag_case:
                payload = payload.lower()
            return rule.token_type, payload, punctuation

        return TokenType.WORD, text, None

    def _match_payload(
        self, body: str, pattern: re.Pattern[str], *, punctuated: bool
    ) -> tuple[str, str | None] | None:
        """Match a payload, detaching one trailing punctuation mark if allowed."""
        if punctuated and len(body) > 1 and body[-1] in self._punctuation:
            if pattern.fullmatch(body, 0, len(body) - 1):
                return body[:-1], body[-1]
        if body and pattern.fullmatch(body):
            return body, None
        return None
