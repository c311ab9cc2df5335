"""Scanner for the Papier document language.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScanMode, scan
├── core.py              # Scanner class (blank runs, chunks, line breaks)
├── modes.py             # ScanMode enum, character sets, markers
└── classifiers/
    └── prefix.py        # Ordered-candidate prefix matcher

Usage:
    >>> from papier.lexer import scan
    >>> for token in scan("* Intro {\\n"):
    ...     print(token)
Token(WORD, '*', 1:1)
Token(BLANK, ' ', 1:2)
Token(WORD, 'Intro', 1:3)
Token(BLANK, ' ', 1:8)
Token(WORD, '{', 1:9)
Token(LINE_BREAK, '\\n', 1:10)
Token(EOF, '', 2:1)

"""

from papier.lexer.core import Scanner, scan
from papier.lexer.modes import ScanMode

__all__ = ["ScanMode", "Scanner", "scan"]
