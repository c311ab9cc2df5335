"""Parsing helpers shared by the document builder."""

from papier.parsing.lines import assemble, word_from_token

__all__ = ["assemble", "word_from_token"]
