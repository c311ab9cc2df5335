"""Scanner operating modes and character sets."""

from __future__ import annotations

from enum import Enum, auto


class ScanMode(Enum):
    """Scanner operating modes.

    - TEXT: Prose lines; every chunk is a word
    - TITLE: Rest of a ``* `` opener line; a lone ``{`` is structural

    """

    TEXT = auto()
    TITLE = auto()


# Separators between words. A carriage return is insignificant wherever it
# appears, so it folds into blank runs and is stripped from chunks.
BLANK_CHARS: frozenset[str] = frozenset(" \t\r")

# Characters that end a chunk
CHUNK_TERMINATORS: frozenset[str] = frozenset(" \t\n")

CARRIAGE_RETURN = "\r"
NEWLINE = "\n"

SUB_DOCUMENT_MARKER = "* "
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
