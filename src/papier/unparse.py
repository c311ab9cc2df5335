"""Canonical Papier source from a tree.

Re-emits a Document as Papier text: words joined by single spaces, one
newline per line, ``* title {`` / ``}`` around sub-document contents.
Parsing the result yields a structurally identical tree (locations aside).

Example:
    >>> from papier import parse
    >>> unparse(parse("hello   #world\\n* Intro {\\nbody\\n}"))
    'hello #world\\n* Intro {\\nbody\\n}\\n'
"""

from papier.lexer.modes import CLOSE_BRACE, NEWLINE, OPEN_BRACE, SUB_DOCUMENT_MARKER
from papier.nodes import Document, Line, SubDocument, Text


def unparse(doc: Document) -> str:
    """Serialize a document back to Papier source."""
    parts: list[str] = []
    for block in doc.children:
        match block:
            case Text(lines=lines):
                for line in lines:
                    parts.append(_line_source(line))
                    parts.append(NEWLINE)
            case SubDocument(title=title, contents=contents):
                parts.append(SUB_DOCUMENT_MARKER)
                parts.extend(f"{word.literal} " for word in title)
                parts.append(OPEN_BRACE)
                parts.append(NEWLINE)
                for content in contents:
                    parts.append(content)
                    parts.append(NEWLINE)
                parts.append(CLOSE_BRACE)
                parts.append(NEWLINE)
            case _:
                msg = f"Cannot unparse block of type {type(block).__name__}"
                raise TypeError(msg)
    return "".join(parts)


def _line_source(line: Line) -> str:
    literals = [word.literal for word in line.words]
    # A prose line "*<tab>x" must not come back as a "* x" opener.
    if len(literals) > 1 and literals[0] == "*":
        return "*\t" + " ".join(literals[1:])
    return " ".join(literals)
